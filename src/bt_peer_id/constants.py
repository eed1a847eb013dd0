"""Peer ID constants."""

import string

PEER_ID_LENGTH = 20
"""The exact number of bytes in a BitTorrent peer ID."""

AZUREUS_PREFIX_LENGTH = 8
"""Length of the Azureus-style client prefix, e.g. `-TR0072-`."""

SAFE_CHARACTERS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "-.")
"""
Characters that survive safe rendering unchanged.

`-` and `.` are kept for Azureus-style and dotted prefixes. Changing this set
changes log output.
"""

PLACEHOLDER = "?"
"""Substituted for every character outside `SAFE_CHARACTERS`."""

DEFAULT_PREFIX = b"-BP0100-"
"""Client prefix used by `PeerId.generate` when none is given."""
