"""Provisos: existence, symlink policy and predicates for one path.

This package provides the Provisos value type, its failure hierarchy and
presets for the common cases.
"""

from pathproviso.provisos.errors import (
    MissingButRequiredError,
    PresentButForbiddenError,
    ProvisoError,
    ProvisoErrorKind,
    RetrievalError,
)
from pathproviso.provisos.models import Existence, Provisos
from pathproviso.provisos.presets import dir_exists, file_exists, file_non_empty, is_new

__all__ = [
    "Existence",
    "MissingButRequiredError",
    "PresentButForbiddenError",
    "ProvisoError",
    "ProvisoErrorKind",
    "Provisos",
    "RetrievalError",
    "dir_exists",
    "file_exists",
    "file_non_empty",
    "is_new",
]
