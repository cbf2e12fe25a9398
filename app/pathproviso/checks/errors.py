"""Exceptions raised by metadata predicates."""


class CheckFailedError(Exception):
    """Raised when a filesystem object fails a metadata predicate.

    The message is the predicate's own description of the failure and
    always names the path that was checked.
    """
