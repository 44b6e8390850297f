from __future__ import annotations
import os, sys, logging
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Tuple

from twfscodec import (
    Header, Entry, RecoveryConfig, IoFailure, InvalidArchivePath,
    read_with_salt, recover,
)
from twfscodec.encryption import KeyDerivation, DecoderFactory

log = logging.getLogger(__name__)


def canonical_name(path: Path | str) -> str:
    """Base name the keys are derived from (moving the file keeps its keys)."""
    name = Path(path).name
    if name in ("", ".", ".."):
        raise InvalidArchivePath(f"not a valid file path: {path!r}")
    return name


def read_archive(
    source: BinaryIO,
    file_name: str,
    salt: Optional[str] = None,
    config: Optional[RecoveryConfig] = None,
    keys: Optional[KeyDerivation] = None,
    decoder: Optional[DecoderFactory] = None,
) -> Tuple[Header, List[Entry], str]:
    if salt is not None:
        # known salt: one attempt, no candidate search
        header, entries = read_with_salt(file_name, salt, source, keys, decoder)
        return header, entries, salt
    return recover(file_name, source, config, keys, decoder)


def list_archive(
    path: Path | str,
    salt: Optional[str] = None,
    config: Optional[RecoveryConfig] = None,
    keys: Optional[KeyDerivation] = None,
    decoder: Optional[DecoderFactory] = None,
) -> List[str]:
    """File names stored in the archive at `path`, in archive order."""
    path = Path(path)
    name = canonical_name(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        raise IoFailure(f"cannot open {path}: {e.strerror or e}") from e
    with f:
        header, entries, used = read_archive(f, name, salt, config, keys, decoder)
    log.info("%s: version %d, %d entries (salt %s)", path, header.version, len(entries), used)
    return [e.name for e in entries]


def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)


def write_names(names: Iterable[str], output: Path | str | None = None) -> None:
    """One name per line; stdout when `output` is None, else an atomic file write."""
    text = "".join(f"{n}\n" for n in names)
    if output is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    atomic_write(output, text.encode("utf-8"))
