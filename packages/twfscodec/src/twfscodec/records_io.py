# packages/twfscodec/src/twfscodec/records_io.py
# Header / entry table layout. Decoding reads one field at a time because the
# keyed decoders combine per read chunk (see encryption.snow2).
from __future__ import annotations
import struct
from typing import Iterator, List, Sequence

from .errors import MalformedText
from .reader import BinaryCursor, Readable
from .records import Header, Entry, KEY_SIZE, MAX_NAME_UNITS

__all__ = [
    "decode_header", "decode_entry", "decode_entries",
    "iter_header_chunks", "iter_entry_chunks",
    "pack_header", "pack_entries",
]

_LE = "<"  # little-endian


def _cursor(stream: Readable | BinaryCursor) -> BinaryCursor:
    return stream if isinstance(stream, BinaryCursor) else BinaryCursor(stream)


def decode_header(stream: Readable | BinaryCursor) -> Header:
    """checksum:u32 | version:u8 | file_cnt:u32"""
    cur = _cursor(stream)
    return Header(
        checksum=cur.read_u32(),
        version=cur.read_u8(),
        file_cnt=cur.read_u32(),
    )


def decode_entry(stream: Readable | BinaryCursor) -> Entry:
    cur = _cursor(stream)
    n_units = cur.read_u32()
    if n_units > MAX_NAME_UNITS:
        # garbage length from a wrong key; never allocate for it
        raise MalformedText(f"entry name length {n_units} exceeds {MAX_NAME_UNITS} units")
    raw = cur.read_exact(2 * n_units)
    try:
        name = raw.decode("utf-16-le")
    except UnicodeDecodeError as e:
        raise MalformedText(f"entry name is not valid UTF-16: {e.reason}") from e
    return Entry(
        name=name,
        checksum=cur.read_u32(),
        flags=cur.read_u32(),
        offset=cur.read_u32(),
        original_size=cur.read_u32(),
        raw_size=cur.read_u32(),
        key=cur.read_exact(KEY_SIZE),
    )


def decode_entries(stream: Readable | BinaryCursor, count: int) -> List[Entry]:
    """Decode `count` entries in archive order. Any failure aborts the whole table."""
    cur = _cursor(stream)
    out: List[Entry] = []
    for _ in range(count):
        out.append(decode_entry(cur))
    return out


# ---------- field layout (encode side) ----------------------------------------
# Each yielded chunk matches one read issued by the decoder above.

def iter_header_chunks(h: Header) -> Iterator[bytes]:
    yield struct.pack(_LE + "I", h.checksum)
    yield struct.pack(_LE + "B", h.version)
    yield struct.pack(_LE + "I", h.file_cnt)


def iter_entry_chunks(e: Entry) -> Iterator[bytes]:
    units = e.name.encode("utf-16-le")
    yield struct.pack(_LE + "I", len(units) // 2)
    yield units
    for v in (e.checksum, e.flags, e.offset, e.original_size, e.raw_size):
        yield struct.pack(_LE + "I", v)
    yield bytes(e.key)


def pack_header(h: Header) -> bytes:
    return b"".join(iter_header_chunks(h))


def pack_entries(entries: Sequence[Entry]) -> bytes:
    return b"".join(c for e in entries for c in iter_entry_chunks(e))
