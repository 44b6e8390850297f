# packages/twfscodec/src/twfscodec/stream.py
from __future__ import annotations
import io
import logging
from typing import BinaryIO, List, Optional, Tuple

from .encryption import DEFAULT_KEYS, KeyDerivation, Snow2Decoder, DecoderFactory
from .records import Header, Entry
from .records_io import decode_header, decode_entries
from .validate import validate_header, validate_version, validate_entries

__all__ = ["read_header", "read_entries", "read_with_salt"]

log = logging.getLogger(__name__)


def read_header(
    file_name: str,
    salt: str,
    source: BinaryIO,
    keys: Optional[KeyDerivation] = None,
    decoder: Optional[DecoderFactory] = None,
) -> Header:
    """Seek to the derived header offset and decode the 9-byte header (not validated)."""
    keys = keys or DEFAULT_KEYS
    decoder = decoder or Snow2Decoder
    key = keys.derive_header_key(file_name, salt)
    offset = keys.derive_header_offset(file_name)
    source.seek(offset, io.SEEK_SET)
    return decode_header(decoder(key, source))


def read_entries(
    file_name: str,
    header: Header,
    salt: str,
    source: BinaryIO,
    keys: Optional[KeyDerivation] = None,
    decoder: Optional[DecoderFactory] = None,
) -> List[Entry]:
    """Decode `header.file_cnt` entries from header_offset + entries_offset (not validated)."""
    keys = keys or DEFAULT_KEYS
    decoder = decoder or Snow2Decoder
    key = keys.derive_entries_key(file_name, salt)
    offset = keys.derive_header_offset(file_name) + keys.derive_entries_offset(file_name)
    log.debug("entries: %s @ 0x%x (%d entries)", file_name, offset, header.file_cnt)
    source.seek(offset, io.SEEK_SET)
    return decode_entries(decoder(key, source), header.file_cnt)


def read_with_salt(
    file_name: str,
    salt: str,
    source: BinaryIO,
    keys: Optional[KeyDerivation] = None,
    decoder: Optional[DecoderFactory] = None,
) -> Tuple[Header, List[Entry]]:
    """
    Full decode + validation with one known salt:
      header → checksum → version → entries → entry checksums.
    Raises the first failure (IoFailure, MalformedText, ChecksumMismatch,
    UnsupportedVersion).
    `keys`/`decoder` default to DEFAULT_KEYS / Snow2Decoder.
    """
    header = read_header(file_name, salt, source, keys, decoder)
    validate_header(header)
    validate_version(header)
    entries = read_entries(file_name, header, salt, source, keys, decoder)
    validate_entries(entries)
    return header, entries
