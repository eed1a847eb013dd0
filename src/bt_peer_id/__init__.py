"""Base type for BitTorrent peer IDs."""

from .constants import PEER_ID_LENGTH, PLACEHOLDER, SAFE_CHARACTERS
from .exceptions import PeerIdError, PeerIdLengthError
from .peer_id import PeerId

__all__ = [
    # Core types
    "PeerId",
    # Constants
    "PEER_ID_LENGTH",
    "PLACEHOLDER",
    "SAFE_CHARACTERS",
    # Exceptions
    "PeerIdError",
    "PeerIdLengthError",
]
