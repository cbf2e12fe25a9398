"""Unit tests for batch verification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathproviso.checks import is_dir
from pathproviso.core.verifier import CHECK_FAILED, PathVerdict, verify_path, verify_paths
from pathproviso.provisos import Existence, Provisos, dir_exists, file_non_empty, is_new

if TYPE_CHECKING:
    from tests.conftest import FsTree


class TestVerifyPath:
    """Tests for verify_path."""

    def test_success(self, fs_tree: FsTree) -> None:
        """A passing path yields a successful verdict."""
        verdict = verify_path(fs_tree.directory, dir_exists())

        assert verdict == PathVerdict(
            path=str(fs_tree.directory),
            description=dir_exists().describe(),
            success=True,
        )
        assert not verdict.failed

    def test_missing(self, fs_tree: FsTree) -> None:
        """Existence failures carry their kind."""
        verdict = verify_path(fs_tree.missing, dir_exists())

        assert verdict.failed
        assert verdict.kind == "missing_but_required"
        assert str(fs_tree.missing) in (verdict.error or "")

    def test_forbidden(self, fs_tree: FsTree) -> None:
        """Presence against is_new is reported."""
        verdict = verify_path(fs_tree.file, is_new())

        assert verdict.kind == "present_but_forbidden"

    def test_check_failed(self, fs_tree: FsTree) -> None:
        """Predicate failures use the check_failed kind and their own message."""
        verdict = verify_path(fs_tree.empty_file, file_non_empty())

        assert verdict.kind == CHECK_FAILED
        assert (verdict.error or "").startswith("the check on the size of")


class TestVerifyPaths:
    """Tests for verify_paths."""

    def test_failures_isolated(self, fs_tree: FsTree) -> None:
        """A failing path does not stop the rest; order is kept."""
        rules = {
            str(fs_tree.missing): dir_exists(),
            str(fs_tree.directory): Provisos(existence=Existence.MUST_EXIST, checks=(is_dir,)),
            str(fs_tree.file): is_new(),
        }

        verdicts = verify_paths(rules)

        assert [v.path for v in verdicts] == list(rules)
        assert [v.success for v in verdicts] == [False, True, False]

    def test_empty(self) -> None:
        """No rules, no verdicts."""
        assert verify_paths({}) == []

    def test_pairs_keep_repeated_paths(self, fs_tree: FsTree) -> None:
        """Pairs naming the same path twice yield a verdict for each."""
        path = str(fs_tree.file)

        verdicts = verify_paths([(path, file_non_empty()), (path, is_new())])

        assert [v.path for v in verdicts] == [path, path]
        assert [v.success for v in verdicts] == [True, False]
