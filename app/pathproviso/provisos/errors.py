"""Existence and retrieval failures reported by Provisos.check.

Predicate failures are not part of this hierarchy: they surface as the
predicate's own CheckFailedError.
"""

import os
from enum import Enum


class ProvisoErrorKind(str, Enum):
    """Kind of failure reported by a Provisos check.

    Attributes:
        MISSING_BUT_REQUIRED: The object had to exist but was absent.
        PRESENT_BUT_FORBIDDEN: The object had to be absent but was present.
        RETRIEVAL_ERROR: Metadata could not be read for a reason other
            than absence (permission denied, name too long, ...).
    """

    MISSING_BUT_REQUIRED = "missing_but_required"
    PRESENT_BUT_FORBIDDEN = "present_but_forbidden"
    RETRIEVAL_ERROR = "retrieval_error"


class ProvisoError(Exception):
    """Base exception for Provisos existence and retrieval failures.

    Attributes:
        path: The path that was checked, as given by the caller.
        kind: Which failure occurred.
    """

    kind: ProvisoErrorKind

    def __init__(self, path: str | os.PathLike[str], detail: str) -> None:
        self.path = os.fspath(path)
        self.detail = detail
        super().__init__(f"path: {self.path!r}: {detail}")


class MissingButRequiredError(ProvisoError):
    """Raised when the object must exist but does not."""

    kind = ProvisoErrorKind.MISSING_BUT_REQUIRED

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(path, "should exist but does not")


class PresentButForbiddenError(ProvisoError):
    """Raised when the object must not exist but does."""

    kind = ProvisoErrorKind.PRESENT_BUT_FORBIDDEN

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(path, "should not exist but does")


class RetrievalError(ProvisoError):
    """Raised when the object's metadata cannot be retrieved.

    Attributes:
        cause: The underlying OSError.
    """

    kind = ProvisoErrorKind.RETRIEVAL_ERROR

    def __init__(self, path: str | os.PathLike[str], cause: OSError) -> None:
        self.cause = cause
        super().__init__(path, cause.strerror or str(cause))
