"""The Provisos value type and its evaluation.

A Provisos bundles an existence requirement, a symlink policy and an
ordered tuple of metadata predicates. Checking a path retrieves its
metadata once, settles existence first and only then runs the predicates.
"""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pathproviso.checks import CheckFailedError, FileInfo, FileInfoCheck
from pathproviso.provisos.errors import (
    MissingButRequiredError,
    PresentButForbiddenError,
    ProvisoError,
    RetrievalError,
)

logger = logging.getLogger(__name__)


class Existence(str, Enum):
    """Whether the filesystem object should exist.

    A check is only valid at the moment it is made; the object may appear
    or vanish immediately afterwards.

    Attributes:
        OPTIONAL: No existence constraint. Predicates apply if it exists.
        MUST_EXIST: The object must be present.
        MUST_NOT_EXIST: The object must be absent. Predicates never run.
    """

    OPTIONAL = "optional"
    MUST_EXIST = "must_exist"
    MUST_NOT_EXIST = "must_not_exist"


_SUBJECT = "the filesystem object"


@dataclass(frozen=True, slots=True)
class Provisos:
    """Expectations of a filesystem object.

    Provisos values hold no per-check state and can be shared freely
    between threads checking different paths.

    Attributes:
        existence: Whether the object must, must not, or may exist.
        checks: Predicates run in order against the object's metadata.
            The first failure is reported. Ignored for MUST_NOT_EXIST.
        follow_symlinks: If True (the default) a symbolic link is judged by
            its target; otherwise by the link itself.
    """

    existence: Existence = Existence.OPTIONAL
    checks: tuple[FileInfoCheck, ...] = ()
    follow_symlinks: bool = True

    def __post_init__(self) -> None:
        """Store checks as a tuple so callers may pass any iterable."""
        if not isinstance(self.checks, tuple):
            checks: Iterable[FileInfoCheck] = self.checks
            object.__setattr__(self, "checks", tuple(checks))

    def get_file_info(self, path: str | os.PathLike[str]) -> FileInfo:
        """Retrieve the object's metadata respecting follow_symlinks.

        Args:
            path: Path to the object. It is passed to the OS unchanged.

        Returns:
            FileInfo for the object (or for the link itself when not
            following symlinks).

        Raises:
            FileNotFoundError: If the object does not exist.
            OSError: If the metadata cannot be retrieved for another reason.
        """
        stat_result = os.stat(path) if self.follow_symlinks else os.lstat(path)
        return FileInfo.from_stat(path, stat_result)

    def check(self, path: str | os.PathLike[str]) -> None:
        """Check that the object at ``path`` satisfies these provisos.

        Existence is settled before any predicate runs: an absent object is
        never handed to the predicates, and if it is absent and not required
        no further checks are made.

        Args:
            path: Path to check.

        Raises:
            MissingButRequiredError: If the object must exist but does not.
            PresentButForbiddenError: If the object must not exist but does.
            RetrievalError: If the metadata lookup failed other than by the
                object being absent.
            CheckFailedError: The first failing predicate's own error,
                unaltered.
        """
        try:
            info = self.get_file_info(path)
        except FileNotFoundError:
            logger.debug("%s: not found (existence=%s)", path, self.existence.value)
            if self.existence == Existence.MUST_EXIST:
                raise MissingButRequiredError(path) from None
            return
        except OSError as e:
            # Anything short of "not found" counts as present here
            if self.existence == Existence.MUST_NOT_EXIST:
                raise PresentButForbiddenError(path) from e
            logger.debug("%s: metadata lookup failed: %s", path, e)
            raise RetrievalError(path, e) from e

        if self.existence == Existence.MUST_NOT_EXIST:
            raise PresentButForbiddenError(path)

        for c in self.checks:
            c(info)

        logger.debug("%s: satisfies %d check(s)", path, len(self.checks))

    def is_satisfied_by(self, path: str | os.PathLike[str]) -> bool:
        """Return True if ``check`` passes for ``path``."""
        try:
            self.check(path)
        except (ProvisoError, CheckFailedError):
            return False
        return True

    def describe(self) -> str:
        """Describe these provisos in words.

        Depends only on the existence requirement and whether any checks
        are configured; no filesystem access.
        """
        if self.existence == Existence.MUST_NOT_EXIST:
            return f"{_SUBJECT} must not exist"

        if self.existence == Existence.MUST_EXIST:
            text = f"{_SUBJECT} must exist"
            joiner = " and"
        else:
            text = f"{_SUBJECT} need not exist"
            joiner = " but if it does it"

        if self.checks:
            text += f"{joiner} must satisfy further checks"
        return text

    def __str__(self) -> str:
        return self.describe()
