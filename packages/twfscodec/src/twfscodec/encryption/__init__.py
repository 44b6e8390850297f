# packages/twfscodec/src/twfscodec/encryption/__init__.py
from __future__ import annotations

# Key / offset derivation from (file name, salt)
from .keys import KeyDerivation, TwfsKeyDerivation, DEFAULT_KEYS

# Keyed stream (metadata only)
from .snow2 import Snow2Cipher, Snow2Decoder, DecoderFactory

__all__ = [
    "KeyDerivation", "TwfsKeyDerivation", "DEFAULT_KEYS",
    "Snow2Cipher", "Snow2Decoder", "DecoderFactory",
]
