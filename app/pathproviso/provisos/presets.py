"""Provisos for the most common cases."""

from pathproviso.checks import gt, is_dir, is_regular, size
from pathproviso.provisos.models import Existence, Provisos


def dir_exists() -> Provisos:
    """The path must exist and be a directory."""
    return Provisos(existence=Existence.MUST_EXIST, checks=(is_dir,))


def file_exists() -> Provisos:
    """The path must exist and be a regular file."""
    return Provisos(existence=Existence.MUST_EXIST, checks=(is_regular,))


def file_non_empty() -> Provisos:
    """The path must exist and be a regular file of at least one byte."""
    return Provisos(
        existence=Existence.MUST_EXIST,
        checks=(is_regular, size(gt(0))),
    )


def is_new() -> Provisos:
    """Nothing may exist at the path yet."""
    return Provisos(existence=Existence.MUST_NOT_EXIST)
