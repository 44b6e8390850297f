from __future__ import annotations
import hashlib, random
from typing import List, Sequence

import pytest

from twfscodec.encryption import DEFAULT_KEYS, Snow2Cipher
from twfscodec.records import Header, Entry, ACCEPTED_VERSION
from twfscodec.records_io import iter_header_chunks, iter_entry_chunks
from twfscodec.validate import entry_checksum

# --- Helpers ------------------------------------------------------------------

def make_entry(name: str, flags: int = 0, offset: int = 0, original_size: int = 0,
               raw_size: int = 0, key: bytes = bytes(range(16))) -> Entry:
    """Entry with a correct checksum."""
    e = Entry(name, 0, flags, offset, original_size, raw_size, key)
    return Entry(name, entry_checksum(e), flags, offset, original_size, raw_size, key)

def make_header(file_cnt: int, version: int = ACCEPTED_VERSION) -> Header:
    return Header(checksum=(version + file_cnt) & 0xFFFFFFFF, version=version, file_cnt=file_cnt)


class XorDecoder:
    """Cheap keyed stream for unit tests (chunking independent)."""
    def __init__(self, key: bytes, source):
        self.key = key
        self.source = source
        self.pos = 0

    def transform(self, b: bytes) -> bytes:
        out = bytes(c ^ self.key[(self.pos + i) % len(self.key)] for i, c in enumerate(b))
        self.pos += len(b)
        return out

    def read(self, n: int = -1, /) -> bytes:
        return self.transform(self.source.read(n))


class StubKeys:
    """Fixed offsets, md5-derived keys; records every header-key request."""
    def __init__(self, header_offset: int = 16, entries_offset: int = 24):
        self.header_offset = header_offset
        self.entries_offset = entries_offset
        self.header_calls: List[str] = []

    def derive_header_key(self, file_name: str, salt: str) -> bytes:
        self.header_calls.append(salt)
        return hashlib.md5(f"H|{file_name}|{salt}".encode()).digest()

    def derive_entries_key(self, file_name: str, salt: str) -> bytes:
        return hashlib.md5(f"E|{file_name}|{salt}".encode()).digest()

    def derive_header_offset(self, file_name: str) -> int:
        return self.header_offset

    def derive_entries_offset(self, file_name: str) -> int:
        return self.entries_offset


def _encrypt_snow2(key: bytes, chunks) -> bytes:
    c = Snow2Cipher(key)
    return b"".join(c.encrypt(ch) for ch in chunks)

def _encrypt_xor(key: bytes, chunks) -> bytes:
    return XorDecoder(key, None).transform(b"".join(chunks))


def build_archive(file_name: str, salt: str, header: Header, entries: Sequence[Entry],
                  keys=DEFAULT_KEYS, cipher: str = "snow2", tail: int = 64) -> bytes:
    """Random filler with the encrypted header/entry table at the derived offsets."""
    enc = _encrypt_snow2 if cipher == "snow2" else _encrypt_xor
    h_off = keys.derive_header_offset(file_name)
    e_off = h_off + keys.derive_entries_offset(file_name)
    h_blob = enc(keys.derive_header_key(file_name, salt), iter_header_chunks(header))
    e_blob = enc(keys.derive_entries_key(file_name, salt),
                 [ch for e in entries for ch in iter_entry_chunks(e)])
    buf = bytearray(random.Random(7).randbytes(e_off + len(e_blob) + tail))
    buf[h_off:h_off + len(h_blob)] = h_blob
    buf[e_off:e_off + len(e_blob)] = e_blob
    return bytes(buf)


@pytest.fixture
def two_entries() -> List[Entry]:
    return [
        make_entry("a.txt", flags=0, offset=0x400, original_size=120, raw_size=120),
        make_entry("b.bin", flags=1, offset=0x478, original_size=4096, raw_size=1033,
                   key=bytes([0xFF] * 16)),
    ]
