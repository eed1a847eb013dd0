"""Exception hierarchy for peer IDs."""

from __future__ import annotations

from .constants import PEER_ID_LENGTH


class PeerIdError(Exception):
    """
    Base exception for all peer ID errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class PeerIdLengthError(PeerIdError, ValueError):
    """
    Raised when a byte sequence is not exactly `PEER_ID_LENGTH` bytes long.

    Attributes:
        length: The length of the rejected input.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Invalid Peer Id length, expected a {PEER_ID_LENGTH} bytes long slice, "
            f"got {length} bytes"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeerIdLengthError):
            return NotImplemented
        return type(self) is type(other) and self.length == other.length

    def __hash__(self) -> int:
        return hash((type(self), self.length))
