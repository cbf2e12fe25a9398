"""pathproviso - declarative checks on filesystem objects.

Describe what a path must look like (whether it exists, whether symlinks
are followed, and what its type, size and permissions must be) and check
it before acting on it.
"""

from pathproviso.provisos import (
    Existence,
    MissingButRequiredError,
    PresentButForbiddenError,
    ProvisoError,
    ProvisoErrorKind,
    Provisos,
    RetrievalError,
    dir_exists,
    file_exists,
    file_non_empty,
    is_new,
)

__version__ = "0.3.0"

__all__ = [
    "Existence",
    "MissingButRequiredError",
    "PresentButForbiddenError",
    "ProvisoError",
    "ProvisoErrorKind",
    "Provisos",
    "RetrievalError",
    "__version__",
    "dir_exists",
    "file_exists",
    "file_non_empty",
    "is_new",
]
