"""Batch verification of paths against Provisos.

Each path is checked independently; a failure on one path is recorded
in its verdict and does not stop the others.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pathproviso.checks import CheckFailedError
from pathproviso.provisos import ProvisoError, Provisos

logger = logging.getLogger(__name__)

# Verdict kind for predicate failures, alongside the ProvisoErrorKind values
CHECK_FAILED = "check_failed"


@dataclass(frozen=True, slots=True)
class PathVerdict:
    """Result of checking a single path.

    Attributes:
        path: The path that was checked.
        description: Description of the Provisos it was checked against.
        success: Whether the path satisfied the Provisos.
        error: Failure message, None on success.
        kind: ProvisoErrorKind value or "check_failed", None on success.
    """

    path: str
    description: str
    success: bool
    error: str | None = None
    kind: str | None = None

    @property
    def failed(self) -> bool:
        return not self.success


def verify_path(path: str | os.PathLike[str], provisos: Provisos) -> PathVerdict:
    """Check one path and return a verdict instead of raising.

    Args:
        path: Path to check.
        provisos: Expectations for the path.

    Returns:
        PathVerdict describing the outcome.
    """
    path_str = os.fspath(path)
    description = provisos.describe()
    try:
        provisos.check(path_str)
    except ProvisoError as e:
        logger.debug("%s failed: %s", path_str, e)
        return PathVerdict(path_str, description, False, str(e), e.kind.value)
    except CheckFailedError as e:
        logger.debug("%s failed a check: %s", path_str, e)
        return PathVerdict(path_str, description, False, str(e), CHECK_FAILED)
    return PathVerdict(path_str, description, True)


def verify_paths(
    rules: Mapping[str, Provisos] | Iterable[tuple[str, Provisos]],
) -> list[PathVerdict]:
    """Check every path in ``rules`` against its Provisos.

    Args:
        rules: Provisos keyed by path, or (path, Provisos) pairs. Pairs may
            repeat a path; every pair is checked, in order.

    Returns:
        One PathVerdict per rule.
    """
    pairs = rules.items() if isinstance(rules, Mapping) else rules
    verdicts = [verify_path(path, provisos) for path, provisos in pairs]
    failed = sum(1 for v in verdicts if v.failed)
    logger.debug("Verified %d path(s), %d failed", len(verdicts), failed)
    return verdicts
