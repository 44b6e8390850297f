# packages/twfscodec/src/twfscodec/config.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
import os

__all__ = ["KEY_SALT_LIST", "RecoveryConfig", "parse_salts"]

# Known salts, in trial order. The first one that validates wins.
KEY_SALT_LIST: tuple[str, ...] = (
    "3@6|3a[@<Ex:L=eN|g",
    "CuAVPMZx:E96:(Rxdw",
    "@6QeTuOaDgJlZcBm#9",
    "DaXU_Vx9xy;[ycFz{1",
    "}F33F0}_7X^;b?PM/;",
    "C(K^x&pBEeg7A5;{G9",
    "smh=Pdw+%?wk?m4&(y",
    "xGqK]W+_eM5u3[8-8u",
    "1&w2!&w{Q)Fkz4e&p0",
    "})wWb4?-sVGHNoPKpc",
)


@dataclass(frozen=True, slots=True)
class RecoveryConfig:
    """
    Candidate salts tried by `twfscodec.recover.recover`.

    Champs
    ------
    salts : tuple[str, ...], default=KEY_SALT_LIST
        Ordered candidates. Must be non-empty, every salt a non-empty string.

    ENV
    ---
    TWFS_SALTS_FILE → text file, one salt per line (blank lines and lines
    starting with `#` are skipped). Replaces the built-in list.
    """
    salts: tuple[str, ...] = KEY_SALT_LIST

    def __post_init__(self) -> None:
        if not isinstance(self.salts, tuple):
            raise ValueError("RecoveryConfig.salts must be a tuple")
        if not self.salts:
            raise ValueError("RecoveryConfig.salts must not be empty")
        for s in self.salts:
            if not isinstance(s, str) or not s:
                raise ValueError("RecoveryConfig.salts must contain non-empty strings")

    @staticmethod
    def from_file(path: str | Path) -> "RecoveryConfig":
        text = Path(path).read_text(encoding="utf-8")
        return RecoveryConfig(salts=parse_salts(text.splitlines()))

    @staticmethod
    def from_env() -> "RecoveryConfig":
        p = _opt_env("TWFS_SALTS_FILE")
        return RecoveryConfig.from_file(p) if p else RecoveryConfig()


def parse_salts(lines: Iterable[str]) -> tuple[str, ...]:
    out = []
    for line in lines:
        s = line.rstrip("\r\n")
        if not s.strip() or s.lstrip().startswith("#"):
            continue
        out.append(s)
    return tuple(out)


def _opt_env(name: str) -> Path | None:
    v = os.getenv(name)
    return Path(v) if v else None
