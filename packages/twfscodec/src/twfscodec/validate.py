# packages/twfscodec/src/twfscodec/validate.py
from __future__ import annotations
from typing import Sequence

from .errors import ChecksumMismatch, UnsupportedVersion
from .records import Header, Entry, ACCEPTED_VERSION

__all__ = [
    "header_checksum", "entry_checksum",
    "validate_header", "validate_version", "validate_entries",
]

_U32 = 0xFFFFFFFF


def header_checksum(h: Header) -> int:
    return (h.version + h.file_cnt) & _U32


def entry_checksum(e: Entry) -> int:
    """flags + offset + original_size + raw_size + sum(key), modulo 2**32."""
    return (e.flags + e.offset + e.original_size + e.raw_size + sum(e.key)) & _U32


def validate_header(h: Header) -> None:
    if header_checksum(h) != h.checksum:
        raise ChecksumMismatch("header checksum wrong")


def validate_version(h: Header) -> None:
    if h.version != ACCEPTED_VERSION:
        raise UnsupportedVersion(h.version)


def validate_entries(entries: Sequence[Entry]) -> None:
    # Stops at the first bad entry: the error names only that one.
    for e in entries:
        if entry_checksum(e) != e.checksum:
            raise ChecksumMismatch(f"entry checksum wrong, file name: {e.name}", name=e.name)
