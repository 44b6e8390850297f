# packages/twfscodec/src/twfscodec/encryption/tables.py
"""
SNOW-2 lookup tables, generated once at import.

MUL_A / DIV_A : multiplication by alpha / alpha^-1 in GF(2^32), built from
                GF(2^8) (beta field, poly 0x1A9) powers.
S1_T0..S1_T3  : AES round function (SubBytes + MixColumn) split per input byte.

All tables are returned as python lists of ints (hot loop indexes them with
plain ints; numpy scalars would be slower and warn on overflow).
"""
from __future__ import annotations
from typing import List

import numpy as np

__all__ = ["MUL_A", "DIV_A", "S1_T0", "S1_T1", "S1_T2", "S1_T3", "AES_SBOX"]

_BETA_POLY = 0xA9  # x^8 + x^7 + x^5 + x^3 + 1
_AES_POLY = 0x1B   # x^8 + x^4 + x^3 + x + 1


def _mulx(v: np.ndarray, c: int) -> np.ndarray:
    v = v.astype(np.uint8)
    return np.where(v & 0x80, (v << 1) ^ c, v << 1).astype(np.uint8)


def _mulx_pow(v: np.ndarray, i: int, c: int) -> np.ndarray:
    for _ in range(i):
        v = _mulx(v, c)
    return v


def _rotl8(v: np.ndarray, k: int) -> np.ndarray:
    return ((v << k) | (v >> (8 - k))).astype(np.uint8)


def _aes_sbox() -> np.ndarray:
    # log/antilog over generator 3
    exp = np.zeros(255, dtype=np.uint8)
    log = np.zeros(256, dtype=np.int64)
    x = np.array([1], dtype=np.uint8)
    for i in range(255):
        exp[i] = x[0]
        log[int(x[0])] = i
        x = x ^ _mulx(x, _AES_POLY)
    a = np.arange(256)
    inv = np.where(a == 0, 0, exp[(255 - log[a]) % 255]).astype(np.uint8)
    s = inv ^ _rotl8(inv, 1) ^ _rotl8(inv, 2) ^ _rotl8(inv, 3) ^ _rotl8(inv, 4) ^ 0x63
    return s.astype(np.uint8)


def _pack(b3: np.ndarray, b2: np.ndarray, b1: np.ndarray, b0: np.ndarray) -> List[int]:
    w = (
        (b3.astype(np.uint32) << 24)
        | (b2.astype(np.uint32) << 16)
        | (b1.astype(np.uint32) << 8)
        | b0.astype(np.uint32)
    )
    return [int(v) for v in w.tolist()]


def _alpha_tables() -> tuple[List[int], List[int]]:
    c = np.arange(256, dtype=np.uint8)

    def p(i: int) -> np.ndarray:
        return _mulx_pow(c, i, _BETA_POLY)

    mul = _pack(p(23), p(245), p(48), p(239))
    div = _pack(p(16), p(39), p(6), p(64))
    return mul, div


def _s1_tables(sbox: np.ndarray) -> tuple[List[int], ...]:
    s = sbox
    s2 = _mulx(s, _AES_POLY)
    s3 = s2 ^ s
    # MixColumn circulant (2 3 1 1); index = byte position of the input word
    t0 = _pack(s3, s, s, s2)
    t1 = _pack(s, s, s2, s3)
    t2 = _pack(s, s2, s3, s)
    t3 = _pack(s2, s3, s, s)
    return t0, t1, t2, t3


_SBOX = _aes_sbox()
AES_SBOX: List[int] = [int(v) for v in _SBOX.tolist()]
MUL_A, DIV_A = _alpha_tables()
S1_T0, S1_T1, S1_T2, S1_T3 = _s1_tables(_SBOX)
