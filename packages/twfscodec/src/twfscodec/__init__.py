# packages/twfscodec/src/twfscodec/__init__.py
from __future__ import annotations

"""twfscodec - metadata of encrypted .dat containers (public surface).

Header / entry table decoding, checksum validation and salt recovery.
Payload bytes are never decoded here.
"""

__version__ = "1.0.0"

from .config import KEY_SALT_LIST, RecoveryConfig
from .errors import (
    TwfsError, IoFailure, InvalidArchivePath, MalformedText,
    ChecksumMismatch, UnsupportedVersion, NoCandidateMatched,
)
from .records import (
    Header, Entry, ACCEPTED_VERSION,
    FLAG_COMPRESSED, FLAG_ALL_ENCRYPTED, FLAG_HEAD_ENCRYPTED,
)
from .records_io import decode_header, decode_entries
from .validate import validate_header, validate_version, validate_entries
from .stream import read_header, read_entries, read_with_salt
from .recover import recover

__all__ = [
    "__version__",
    "KEY_SALT_LIST", "RecoveryConfig",
    "TwfsError", "IoFailure", "InvalidArchivePath", "MalformedText",
    "ChecksumMismatch", "UnsupportedVersion", "NoCandidateMatched",
    "Header", "Entry", "ACCEPTED_VERSION",
    "FLAG_COMPRESSED", "FLAG_ALL_ENCRYPTED", "FLAG_HEAD_ENCRYPTED",
    "decode_header", "decode_entries",
    "validate_header", "validate_version", "validate_entries",
    "read_header", "read_entries", "read_with_salt",
    "recover",
]
