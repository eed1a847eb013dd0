"""
BitTorrent peer ID type.

A peer ID is an opaque 20-byte value exchanged during peer handshakes and
announced to trackers. Most clients start it with a short ASCII prefix that
identifies the client and its version, followed by random bytes:

    -TR0072-abvd7xkqq04n
    ^^^^^^^^ Azureus-style prefix: client code `TR`, version `0072`

`PeerId` keeps two paths apart:

- The raw bytes (`as_bytes`, `prefix`), for downstream parsers.
- The safe rendering (`to_safe`, `str`), for logs and user interfaces only.
"""

from __future__ import annotations

import logging
import secrets
import string
from typing import Any, Iterable

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .constants import (
    AZUREUS_PREFIX_LENGTH,
    DEFAULT_PREFIX,
    PEER_ID_LENGTH,
    PLACEHOLDER,
    SAFE_CHARACTERS,
)
from .exceptions import PeerIdLengthError

logger = logging.getLogger(__name__)

_GENERATED_ALPHABET = string.ascii_letters + string.digits
"""Characters used for the random part of generated peer IDs."""

_HEX_PATTERN = rf"^(0x)?[0-9a-fA-F]{{{PEER_ID_LENGTH * 2}}}$"
"""JSON schema pattern for the hex form of a peer ID."""


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix

    Raises:
      ValueError if a hex string or an integer is malformed.
      TypeError if the value has no byte interpretation.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return bytes.fromhex(value.removeprefix("0x"))
        except ValueError as exc:
            raise ValueError(
                f"Peer Id strings must be hex encoded, got {value!r}; "
                "pass raw peer ID text as bytes"
            ) from exc
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    raise TypeError(f"Cannot interpret {type(value).__name__} as peer ID bytes")


class PeerId(bytes):
    """
    An unparsed BitTorrent peer ID: exactly 20 opaque bytes.

    Instances are immutable. Two peer IDs are equal iff their bytes are equal;
    a peer ID never equals a plain `bytes` object. Ordering follows the same
    rule: peer IDs sort byte-wise among themselves, and ordering one against
    any other object raises `TypeError`.
    """

    __slots__ = ()

    LENGTH = PEER_ID_LENGTH
    """The exact number of bytes in every peer ID."""

    def __new__(cls, value: Any) -> Self:
        """
        Create a peer ID from a 20-byte source.

        A `str` is always read as hex, never as peer ID text, so
        `PeerId("-TR0072-abvd7xkqq04n")` is rejected; pass `b"-TR0072-abvd7xkqq04n"`.
        The length checked is that of the decoded bytes, so `"00" * 10` fails
        with a length of 10.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            PeerIdLengthError: If the resulting byte length is not 20.
            ValueError: If a string is not valid hex.
            TypeError: If the value has no byte interpretation.
        """
        if isinstance(value, cls):
            return value
        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise PeerIdLengthError(len(b))
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create a peer ID filled with zero bytes."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def generate(cls, prefix: bytes = DEFAULT_PREFIX) -> Self:
        """
        Create a new peer ID for the local client.

        The ID is `prefix` followed by random letters and digits, so the whole
        value renders verbatim when the prefix itself is safe.

        Args:
            prefix: Client prefix, conventionally Azureus-style (`-XXnnnn-`).

        Raises:
            ValueError: If the prefix is longer than a peer ID.
        """
        if len(prefix) > cls.LENGTH:
            raise ValueError(
                f"Peer Id prefix must be at most {cls.LENGTH} bytes, got {len(prefix)} bytes"
            )
        suffix = "".join(
            secrets.choice(_GENERATED_ALPHABET) for _ in range(cls.LENGTH - len(prefix))
        )
        peer_id = cls(bytes(prefix) + suffix.encode("ascii"))
        logger.debug("Generated peer id %s", peer_id)
        return peer_id

    def as_bytes(self) -> bytes:
        """Return the raw 20 bytes. Parsers must read these, never `to_safe()`."""
        return bytes(self)

    def prefix(self, length: int = AZUREUS_PREFIX_LENGTH) -> bytes:
        """Return the first `length` raw bytes, the Azureus-style prefix by default."""
        return bytes(self)[:length]

    def to_safe(self) -> str:
        """
        Render the peer ID for display.

        The bytes are decoded as UTF-8, replacing invalid sequences, and every
        character outside `0-9`, `a-z`, `A-Z`, `-` and `.` becomes `?`. The
        result is safe to print in any environment without escaping.

        The result has one character per decoded code point, so it is shorter
        than 20 characters when the bytes hold multi-byte UTF-8 sequences.

            >>> PeerId(b"-TR0000-*\\x00\\x01d7xkqq04n").to_safe()
            '-TR0000-???d7xkqq04n'
        """
        decoded = bytes(self).decode("utf-8", errors="replace")
        if all(c in SAFE_CHARACTERS for c in decoded):
            return decoded
        return "".join(c if c in SAFE_CHARACTERS else PLACEHOLDER for c in decoded)

    def __str__(self) -> str:
        return self.to_safe()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_safe(), format_spec)

    def __repr__(self) -> str:
        """Return the byte-wise debug dump."""
        return f"{type(self).__name__}({self.hex()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeerId):
            return False
        return bytes(self) == bytes(other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((PeerId, bytes(self)))

    def _ordering_operand(self, other: object) -> bytes:
        if not isinstance(other, PeerId):
            raise TypeError(
                f"'{type(self).__name__}' can only be ordered against another peer id, "
                f"not '{type(other).__name__}'"
            )
        return bytes(other)

    def __lt__(self, other: object) -> bool:
        return bytes(self) < self._ordering_operand(other)

    def __le__(self, other: object) -> bool:
        return bytes(self) <= self._ordering_operand(other)

    def __gt__(self, other: object) -> bool:
        return bytes(self) > self._ordering_operand(other)

    def __ge__(self, other: object) -> bool:
        return bytes(self) >= self._ordering_operand(other)

    @classmethod
    def _validate(cls, value: Any) -> Self:
        try:
            return cls(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. Accept an existing `PeerId`, 20 raw bytes, or a hex string.
        2. Serialize as `0x`-prefixed hex, which is lossless.
        3. Describe both directions as a hex string in JSON schema.
        """
        hex_schema = core_schema.str_schema(pattern=_HEX_PATTERN)
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: "0x" + x.hex(),
                return_schema=hex_schema,
            ),
            json_schema_input_schema=hex_schema,
        )
