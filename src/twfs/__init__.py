"""twfs - unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import twfs
    names = twfs.list_archive("data/dt_00028.dat")
    header, entries, salt = twfs.read_archive(fp, "dt_00028.dat")

Or detailed modules:

    from twfs import codec, wf
"""

__version__ = "1.0.0"

# Sub-namespaces. twfswf is optional at import time; twfscodec is the core.
import twfscodec as codec

try:
    import twfswf as wf
except Exception:
    wf = None

from twfscodec import (
    Header, Entry, RecoveryConfig, KEY_SALT_LIST,
    TwfsError, NoCandidateMatched,
    read_with_salt, recover,
)

if wf is not None:
    from twfswf import canonical_name, read_archive, list_archive, write_names
else:
    canonical_name = read_archive = list_archive = write_names = None  # type: ignore

__all__ = [
    # sub-namespaces
    "codec", "wf",
    # convenience
    "Header", "Entry", "RecoveryConfig", "KEY_SALT_LIST",
    "TwfsError", "NoCandidateMatched",
    "read_with_salt", "recover",
    "canonical_name", "read_archive", "list_archive", "write_names",
    "__version__",
]
