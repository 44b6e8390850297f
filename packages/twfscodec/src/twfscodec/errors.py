# packages/twfscodec/src/twfscodec/errors.py
from __future__ import annotations

__all__ = [
    "TwfsError",
    "IoFailure", "InvalidArchivePath", "MalformedText",
    "ChecksumMismatch", "UnsupportedVersion", "NoCandidateMatched",
    "ATTEMPT_ERRORS",
]


class TwfsError(Exception):
    """Base class of every error raised by twfscodec."""


class IoFailure(TwfsError, OSError):
    """Short read or unreadable source. Fatal to the current decode attempt."""

    def __init__(self, msg: str, wanted: int | None = None, got: int | None = None):
        super().__init__(msg)
        self.wanted = wanted
        self.got = got

    def __str__(self) -> str:
        return self.args[0] if self.args else "I/O failure"


class InvalidArchivePath(TwfsError, ValueError):
    pass


class MalformedText(TwfsError, ValueError):
    """Entry name bytes are not valid UTF-16."""


class ChecksumMismatch(TwfsError, ValueError):
    """Header or entry arithmetic invariant violated.

    `name` is None for the header, otherwise the name of the first bad entry.
    """

    def __init__(self, msg: str, name: str | None = None):
        super().__init__(msg)
        self.name = name


class UnsupportedVersion(TwfsError, ValueError):
    def __init__(self, version: int):
        super().__init__(f"unsupported header version {version}")
        self.version = version


class NoCandidateMatched(TwfsError, LookupError):
    def __init__(self, attempts: int):
        super().__init__(
            f"no candidate salt matched after {attempts} attempts; "
            "pass the salt explicitly (--salt)"
        )
        self.attempts = attempts


# Attempt-local failures: the recovery engine moves on to the next salt.
ATTEMPT_ERRORS = (IoFailure, MalformedText, ChecksumMismatch, UnsupportedVersion)
