"""Value checks used by the file checks.

A value check takes a single value and raises ValueError describing the
failure. They know nothing about files; FileInfo factories such as
``size`` and ``perm`` attach the path to the message.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")

ValueCheck = Callable[[T], None]


class _Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...
    def __le__(self, other: Any, /) -> bool: ...


C = TypeVar("C", bound=_Comparable)


def gt(limit: C) -> ValueCheck[C]:
    """Require the value to be greater than ``limit``."""

    def check(value: C) -> None:
        if not limit < value:
            msg = f"the value ({value}) must be greater than {limit}"
            raise ValueError(msg)

    return check


def ge(limit: C) -> ValueCheck[C]:
    """Require the value to be greater than or equal to ``limit``."""

    def check(value: C) -> None:
        if not limit <= value:
            msg = f"the value ({value}) must be greater than or equal to {limit}"
            raise ValueError(msg)

    return check


def lt(limit: C) -> ValueCheck[C]:
    """Require the value to be less than ``limit``."""

    def check(value: C) -> None:
        if not value < limit:
            msg = f"the value ({value}) must be less than {limit}"
            raise ValueError(msg)

    return check


def le(limit: C) -> ValueCheck[C]:
    """Require the value to be less than or equal to ``limit``."""

    def check(value: C) -> None:
        if not value <= limit:
            msg = f"the value ({value}) must be less than or equal to {limit}"
            raise ValueError(msg)

    return check


def eq(expected: T) -> ValueCheck[T]:
    """Require the value to equal ``expected``."""

    def check(value: T) -> None:
        if value != expected:
            msg = f"the value ({value}) must equal {expected}"
            raise ValueError(msg)

    return check


def between(low: C, high: C) -> ValueCheck[C]:
    """Require ``low <= value <= high``.

    Raises:
        ValueError: If ``high`` is less than ``low``.
    """
    if high < low:
        msg = f"impossible range: upper limit ({high}) is less than lower limit ({low})"
        raise ValueError(msg)

    def check(value: C) -> None:
        if value < low or high < value:
            msg = f"the value ({value}) must be between {low} and {high}"
            raise ValueError(msg)

    return check


# Permission checks
# =============================================================================


def _octal(bits: int) -> str:
    return f"{bits:#05o}"


def perm_eq(expected: int) -> ValueCheck[int]:
    """Require the permission bits to equal ``expected`` exactly."""

    def check(bits: int) -> None:
        if bits != expected:
            msg = f"the permissions ({_octal(bits)}) should be equal to {_octal(expected)}"
            raise ValueError(msg)

    return check


def perm_has_all(required: int) -> ValueCheck[int]:
    """Require every bit in ``required`` to be set."""

    def check(bits: int) -> None:
        missing = required & ~bits
        if missing:
            msg = (
                f"the permissions ({_octal(bits)}) should have all of {_octal(required)}"
                f" set (missing {_octal(missing)})"
            )
            raise ValueError(msg)

    return check


def perm_has_none(forbidden: int) -> ValueCheck[int]:
    """Require no bit in ``forbidden`` to be set."""

    def check(bits: int) -> None:
        present = forbidden & bits
        if present:
            msg = (
                f"the permissions ({_octal(bits)}) should have none of {_octal(forbidden)}"
                f" set (found {_octal(present)})"
            )
            raise ValueError(msg)

    return check
