# packages/twfscodec/src/twfscodec/recover.py
"""
Salt recovery by trial decode.

A wrong key yields effectively random bytes, which almost never satisfy the
header and entry checksums. Each candidate salt is tried in order on a source
rewound to 0; the first one whose header, version and whole entry table
validate is returned.
"""
from __future__ import annotations
import io
import logging
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional, Tuple

from .config import RecoveryConfig
from .encryption import KeyDerivation, DecoderFactory
from .errors import ATTEMPT_ERRORS, NoCandidateMatched, TwfsError
from .records import Header, Entry
from .stream import read_with_salt

__all__ = ["Attempt", "attempt", "recover"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attempt:
    """Outcome of one candidate trial. `error` is None on success."""
    salt: str
    header: Optional[Header] = None
    entries: List[Entry] = field(default_factory=list)
    error: Optional[TwfsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def attempt(
    file_name: str,
    salt: str,
    source: BinaryIO,
    keys: Optional[KeyDerivation] = None,
    decoder: Optional[DecoderFactory] = None,
) -> Attempt:
    """One full decode + validate. Attempt-local failures are returned, not raised."""
    source.seek(0, io.SEEK_SET)
    try:
        header, entries = read_with_salt(file_name, salt, source, keys, decoder)
    except ATTEMPT_ERRORS as e:
        return Attempt(salt=salt, error=e)
    return Attempt(salt=salt, header=header, entries=entries)


def recover(
    file_name: str,
    source: BinaryIO,
    config: RecoveryConfig | None = None,
    keys: Optional[KeyDerivation] = None,
    decoder: Optional[DecoderFactory] = None,
) -> Tuple[Header, List[Entry], str]:
    """
    Try every candidate salt of `config` (default: RecoveryConfig()) in order.

    Returns (header, entries, salt) for the first candidate that validates;
    later candidates are never tried. Raises NoCandidateMatched when all fail,
    leaving `source` at position 0. OSError from seeking the source is fatal
    and propagates.
    """
    cfg = config or RecoveryConfig()
    n = len(cfg.salts)
    for i, salt in enumerate(cfg.salts):
        res = attempt(file_name, salt, source, keys, decoder)
        if res.ok:
            log.info("matching salt found [%d/%d]: %s", i + 1, n, salt)
            return res.header, res.entries, salt
        log.debug("salt [%d/%d] rejected: %s", i + 1, n, res.error)
        source.seek(0, io.SEEK_SET)
    raise NoCandidateMatched(n)
