from __future__ import annotations
import logging, os, sys
from pathlib import Path
from typing import Optional

from twfscodec import RecoveryConfig

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    # stdout carries the listing; logs go to stderr
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers)

def env_salt() -> Optional[str]:
    return os.getenv("TWFS_SALT") or None

def load_recovery_config(salts_file: Optional[str]) -> RecoveryConfig:
    """--salts-file → TWFS_SALTS_FILE → built-in list."""
    if salts_file:
        return RecoveryConfig.from_file(salts_file)
    return RecoveryConfig.from_env()
