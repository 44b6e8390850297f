# packages/twfscodec/src/twfscodec/encryption/snow2.py
"""
SNOW-2 style keyed stream used to protect the archive metadata.

Keystream
---------
16-word LFSR over GF(2^32) + two-register FSM (S-box = AES round function),
128-bit key, no IV, 32 initialization clocks with FSM feedback. Keystream
words are serialized little-endian.

Combine rule
------------
Not XOR: every read chunk of n bytes is one little-endian integer and
    plain = (cipher - keystream) mod 2**(8n)
so a borrow crosses bytes inside a chunk but never crosses chunks. Encoder
and decoder must therefore use the same chunking (one chunk per field).
"""
from __future__ import annotations
import struct
from typing import Callable

from ..reader import Readable
from .tables import MUL_A, DIV_A, S1_T0, S1_T1, S1_T2, S1_T3

__all__ = ["Snow2Cipher", "Snow2Decoder", "DecoderFactory"]

_M = 0xFFFFFFFF

# (key, source) -> object with read(n)
DecoderFactory = Callable[[bytes, Readable], Readable]


def _load_key_word(key: bytes, off: int) -> int:
    # big-endian, each byte sign-extended before being OR-ed in (client quirk)
    val = 0
    for b in key[off:off + 4]:
        sb = b - 256 if b > 127 else b
        val = ((val << 8) | (sb & _M)) & _M
    return val


def _s1(w: int) -> int:
    return S1_T0[w & 0xFF] ^ S1_T1[(w >> 8) & 0xFF] ^ S1_T2[(w >> 16) & 0xFF] ^ S1_T3[w >> 24]


class Snow2Cipher:
    def __init__(self, key: bytes):
        if len(key) != 16:
            raise ValueError("Snow2Cipher: key must be 16 bytes")
        k = [_load_key_word(key, i) for i in range(0, 16, 4)]
        hi = k[::-1]                       # s12..s15 = k3..k0
        lo = [(~w) & _M for w in hi]
        self._s = lo + hi + lo + hi        # s0..s15
        self._r1 = 0
        self._r2 = 0
        self._buf = bytearray()
        for _ in range(32):
            self._clock(feedback=True)
        self._clock(feedback=False)

    def _clock(self, feedback: bool) -> int:
        s = self._s
        f = ((self._r1 + s[15]) & _M) ^ self._r2
        v = (((s[0] << 8) & _M) ^ MUL_A[s[0] >> 24] ^ s[2]
             ^ (s[11] >> 8) ^ DIV_A[s[11] & 0xFF])
        if feedback:
            v ^= f
        r1 = (self._r2 + s[5]) & _M
        self._r2 = _s1(self._r1)
        self._r1 = r1
        z = f ^ s[0]
        del s[0]
        s.append(v)
        return z

    def keystream(self, n: int) -> bytes:
        while len(self._buf) < n:
            self._buf.extend(struct.pack("<I", self._clock(feedback=False)))
        out = bytes(self._buf[:n])
        del self._buf[:n]
        return out

    def _combine(self, chunk: bytes, sign: int) -> bytes:
        n = len(chunk)
        if n == 0:
            return b""
        ks = int.from_bytes(self.keystream(n), "little")
        v = (int.from_bytes(chunk, "little") + sign * ks) & ((1 << (8 * n)) - 1)
        return v.to_bytes(n, "little")

    def decrypt(self, chunk: bytes) -> bytes:
        return self._combine(chunk, -1)

    def encrypt(self, chunk: bytes) -> bytes:
        return self._combine(chunk, +1)


class Snow2Decoder:
    """Wraps a byte source; every read(n) returns the decrypted chunk."""

    def __init__(self, key: bytes, source: Readable):
        self.source = source
        self.cipher = Snow2Cipher(key)

    def read(self, n: int = -1, /) -> bytes:
        return self.cipher.decrypt(self.source.read(n))
