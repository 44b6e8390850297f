# packages/twfscodec/src/twfscodec/records.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any

__all__ = [
    "Header", "Entry",
    "HEADER_SIZE", "ENTRY_FIXED_SIZE", "KEY_SIZE", "ACCEPTED_VERSION", "MAX_NAME_UNITS",
    "FLAG_COMPRESSED", "FLAG_ALL_ENCRYPTED", "FLAG_HEAD_ENCRYPTED",
]

HEADER_SIZE = 4 + 1 + 4          # checksum | version | file_cnt
KEY_SIZE = 16
ENTRY_FIXED_SIZE = 5 * 4 + KEY_SIZE  # after the name
ACCEPTED_VERSION = 2
MAX_NAME_UNITS = 0x8000          # UTF-16 units; longest path a real archive can store

# Entry.flags
FLAG_COMPRESSED = 1
FLAG_ALL_ENCRYPTED = 2
FLAG_HEAD_ENCRYPTED = 4   # only the head of the payload is encrypted


@dataclass(frozen=True)
class Header:
    checksum: int
    version: int
    file_cnt: int


@dataclass(frozen=True)
class Entry:
    """One record of the entry table.

    `offset`/`original_size`/`raw_size` describe the payload, which this
    package never decodes. `key` is the per-entry payload key (16 bytes).
    """
    name: str
    checksum: int
    flags: int
    offset: int
    original_size: int
    raw_size: int
    key: bytes = field(default=bytes(KEY_SIZE))

    def __post_init__(self) -> None:
        if len(self.key) != KEY_SIZE:
            raise ValueError(f"Entry.key must be {KEY_SIZE} bytes, got {len(self.key)}")

    @property
    def is_compressed(self) -> bool:
        return bool(self.flags & FLAG_COMPRESSED)

    @property
    def is_encrypted(self) -> bool:
        return bool(self.flags & FLAG_ALL_ENCRYPTED)

    @property
    def is_head_encrypted(self) -> bool:
        return bool(self.flags & FLAG_HEAD_ENCRYPTED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "checksum": int(self.checksum),
            "flags": int(self.flags),
            "offset": int(self.offset),
            "original_size": int(self.original_size),
            "raw_size": int(self.raw_size),
            "key": bytes(self.key),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Entry":
        return Entry(
            name=str(d["name"]),
            checksum=int(d["checksum"]),
            flags=int(d.get("flags", 0)),
            offset=int(d.get("offset", 0)),
            original_size=int(d.get("original_size", 0)),
            raw_size=int(d.get("raw_size", 0)),
            key=bytes(d.get("key", bytes(KEY_SIZE))),
        )
