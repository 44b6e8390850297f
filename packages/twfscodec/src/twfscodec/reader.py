# packages/twfscodec/src/twfscodec/reader.py
from __future__ import annotations
import struct
from typing import Protocol

from .errors import IoFailure

__all__ = ["Readable", "BinaryCursor"]

_LE = "<"  # little-endian


class Readable(Protocol):
    def read(self, n: int = -1, /) -> bytes: ...


class BinaryCursor:
    """Sequential little-endian reads over anything with `read(n)`.

    Works the same over a raw file, a BytesIO or a keyed decoder. Never seeks.
    A short read raises IoFailure.
    """

    def __init__(self, source: Readable):
        self.source = source

    def read_exact(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("read_exact: n must be >= 0")
        if n == 0:
            return b""
        try:
            b = self.source.read(n)
        except OSError as e:
            raise IoFailure(f"read of {n} bytes failed: {e}", wanted=n) from e
        if b is None or len(b) != n:
            got = 0 if b is None else len(b)
            raise IoFailure(f"short read: wanted {n} bytes, got {got}", wanted=n, got=got)
        return bytes(b)

    def read_u8(self) -> int:
        return self.read_exact(1)[0]

    def read_u32(self) -> int:
        (v,) = struct.unpack(_LE + "I", self.read_exact(4))
        return v
