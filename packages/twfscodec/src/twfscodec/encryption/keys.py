# packages/twfscodec/src/twfscodec/encryption/keys.py
from __future__ import annotations
from typing import Protocol

from ..records import HEADER_SIZE

__all__ = ["KeyDerivation", "TwfsKeyDerivation", "DEFAULT_KEYS"]

KEY_LEN = 16


class KeyDerivation(Protocol):
    """Pure functions of (file_name[, salt]) used to locate and key the metadata."""

    def derive_header_key(self, file_name: str, salt: str) -> bytes: ...
    def derive_entries_key(self, file_name: str, salt: str) -> bytes: ...
    def derive_header_offset(self, file_name: str) -> int: ...
    def derive_entries_offset(self, file_name: str) -> int: ...


def _name_seeds(file_name: str) -> tuple[int, int]:
    s1 = sum(ord(c) for c in file_name)
    return s1, s1 * 3


def _combined(file_name: str, salt: str) -> bytes:
    b = (file_name + salt).encode("utf-8")
    if not b:
        raise ValueError("key derivation needs a non-empty file name or salt")
    return b


class TwfsKeyDerivation:
    """Key/offset derivation bound to the archive's base name.

    header offset  = sum(name) % 312 + 30
    entries offset = 9 + (3*sum(name)) % 212 + 33   (relative to the header)
    """

    def derive_header_offset(self, file_name: str) -> int:
        s1, _ = _name_seeds(file_name)
        return s1 % 312 + 30

    def _entries_gap(self, file_name: str) -> int:
        _, s2 = _name_seeds(file_name)
        return s2 % 212 + 33

    def derive_entries_offset(self, file_name: str) -> int:
        return HEADER_SIZE + self._entries_gap(file_name)

    def derive_header_key(self, file_name: str, salt: str) -> bytes:
        b = _combined(file_name, salt)
        return bytes((i + b[i % len(b)]) & 0xFF for i in range(KEY_LEN))

    def derive_entries_key(self, file_name: str, salt: str) -> bytes:
        b = _combined(file_name, salt)
        seed = self.derive_header_offset(file_name) + self._entries_gap(file_name)
        n = len(b)
        return bytes((i + (i % 3 + 2) * b[(seed - i) % n]) & 0xFF for i in range(KEY_LEN))


DEFAULT_KEYS = TwfsKeyDerivation()
