# packages/twfswf/src/twfswf/__init__.py
from __future__ import annotations

from .api import canonical_name, read_archive, list_archive, write_names, atomic_write

__all__ = [
    "canonical_name",
    "read_archive",
    "list_archive",
    "write_names",
    "atomic_write",
    # on n’importe PAS le sous-module cli ici
]

__version__ = "1.0.0"
