"""Metadata predicates for filesystem objects.

This package provides the FileInfo metadata record, file checks that
judge it (type, size, permissions, modification time), the value checks
they are built from, and the CheckFailedError they raise.
"""

from pathproviso.checks.errors import CheckFailedError
from pathproviso.checks.fileinfo import (
    FileInfo,
    FileInfoCheck,
    any_of,
    is_dir,
    is_regular,
    is_symlink,
    mod_time,
    negate,
    perm,
    size,
)
from pathproviso.checks.values import (
    ValueCheck,
    between,
    eq,
    ge,
    gt,
    le,
    lt,
    perm_eq,
    perm_has_all,
    perm_has_none,
)

__all__ = [
    "CheckFailedError",
    "FileInfo",
    "FileInfoCheck",
    "ValueCheck",
    "any_of",
    "between",
    "eq",
    "ge",
    "gt",
    "is_dir",
    "is_regular",
    "is_symlink",
    "le",
    "lt",
    "mod_time",
    "negate",
    "perm",
    "perm_eq",
    "perm_has_all",
    "perm_has_none",
    "size",
]
