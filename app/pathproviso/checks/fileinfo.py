"""Metadata records and the predicates that judge them.

A FileInfo wraps the result of a stat call together with the path it was
taken from. File checks are plain callables taking a FileInfo and raising
CheckFailedError when the object does not satisfy them.
"""

import os
import stat
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pathproviso.checks.errors import CheckFailedError
from pathproviso.checks.values import ValueCheck

# Permission bits reported by FileInfo.perm
PERM_MASK = 0o777


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Metadata for a single filesystem object.

    Attributes:
        name: Path as given to the stat call.
        stat: Raw result of os.stat or os.lstat.
    """

    name: str
    stat: os.stat_result

    @classmethod
    def from_stat(cls, name: str | os.PathLike[str], stat_result: os.stat_result) -> "FileInfo":
        """Build a FileInfo from a path and an existing stat result."""
        return cls(name=os.fspath(name), stat=stat_result)

    @property
    def mode(self) -> int:
        """Full st_mode, including the file type bits."""
        return self.stat.st_mode

    @property
    def perm(self) -> int:
        """Permission bits only (e.g. 0o644)."""
        return self.stat.st_mode & PERM_MASK

    @property
    def size(self) -> int:
        return self.stat.st_size

    @property
    def mtime(self) -> datetime:
        """Last modification time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.stat.st_mtime, tz=UTC)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.stat.st_mode)

    @property
    def is_regular(self) -> bool:
        return stat.S_ISREG(self.stat.st_mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.stat.st_mode)

    @property
    def type_name(self) -> str:
        """Human-readable name of the object's type."""
        mode = self.stat.st_mode
        if stat.S_ISDIR(mode):
            return "a directory"
        if stat.S_ISREG(mode):
            return "a regular file"
        if stat.S_ISLNK(mode):
            return "a symbolic link"
        if stat.S_ISFIFO(mode):
            return "a named pipe"
        if stat.S_ISSOCK(mode):
            return "a socket"
        if stat.S_ISCHR(mode):
            return "a character device"
        if stat.S_ISBLK(mode):
            return "a block device"
        return "an object of unknown type"


FileInfoCheck = Callable[[FileInfo], None]


def is_dir(info: FileInfo) -> None:
    """Require the object to be a directory."""
    if not info.is_dir:
        msg = f"{info.name!r} should be a directory but is {info.type_name}"
        raise CheckFailedError(msg)


def is_regular(info: FileInfo) -> None:
    """Require the object to be a regular file."""
    if not info.is_regular:
        msg = f"{info.name!r} should be a regular file but is {info.type_name}"
        raise CheckFailedError(msg)


def is_symlink(info: FileInfo) -> None:
    """Require the object to be a symbolic link.

    Only meaningful when the metadata was retrieved without following
    symlinks; a followed link reports the type of its target.
    """
    if not info.is_symlink:
        msg = f"{info.name!r} should be a symbolic link but is {info.type_name}"
        raise CheckFailedError(msg)


def _wrap(attribute: str, getter: Callable[[FileInfo], Any], check: ValueCheck[Any]) -> FileInfoCheck:
    """Apply a value check to one attribute of a FileInfo.

    ValueErrors from the value check are re-raised as CheckFailedError
    naming both the attribute and the path.
    """

    def file_check(info: FileInfo) -> None:
        try:
            check(getter(info))
        except ValueError as e:
            msg = f"the check on the {attribute} of {info.name!r} failed: {e}"
            raise CheckFailedError(msg) from e

    return file_check


def size(check: ValueCheck[int]) -> FileInfoCheck:
    """Apply a value check to the object's size in bytes."""
    return _wrap("size", lambda info: info.size, check)


def perm(check: ValueCheck[int]) -> FileInfoCheck:
    """Apply a permission check to the object's permission bits."""
    return _wrap("permissions", lambda info: info.perm, check)


def mod_time(check: ValueCheck[datetime]) -> FileInfoCheck:
    """Apply a value check to the object's modification time."""
    return _wrap("modification time", lambda info: info.mtime, check)


def any_of(*checks: FileInfoCheck) -> FileInfoCheck:
    """Pass if at least one of the given checks passes.

    Raises:
        ValueError: If no checks are given.
    """
    if not checks:
        msg = "any_of needs at least one check"
        raise ValueError(msg)

    def file_check(info: FileInfo) -> None:
        failures: list[str] = []
        for c in checks:
            try:
                c(info)
            except CheckFailedError as e:
                failures.append(str(e))
            else:
                return
        raise CheckFailedError(" or ".join(failures))

    return file_check


def negate(check: FileInfoCheck, description: str) -> FileInfoCheck:
    """Pass only if the given check fails.

    Args:
        check: Check to invert.
        description: What the inverted check requires, used in the failure
            message (e.g. "not be a directory").
    """

    def file_check(info: FileInfo) -> None:
        try:
            check(info)
        except CheckFailedError:
            return
        msg = f"{info.name!r} should {description}"
        raise CheckFailedError(msg)

    return file_check
