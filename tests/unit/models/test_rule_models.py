"""Unit tests for rules-file models."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from pathproviso.checks import CheckFailedError, is_dir, is_regular, is_symlink
from pathproviso.models.rules import PathRule, RulesFile, parse_perm
from pathproviso.provisos import Existence, dir_exists, file_non_empty
from pydantic import ValidationError

if TYPE_CHECKING:
    from tests.conftest import FsTree


class TestParsePerm:
    """Tests for parse_perm."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0600", 0o600), ("600", 0o600), ("0o644", 0o644), ("0O755", 0o755), (" 0 ", 0)],
    )
    def test_valid(self, text: str, expected: int) -> None:
        """Octal strings with or without prefixes are accepted."""
        assert parse_perm(text) == expected

    @pytest.mark.parametrize("text", ["rw-", "0800", "", "01777"])
    def test_invalid(self, text: str) -> None:
        """Non-octal or out-of-range values are rejected."""
        with pytest.raises(ValueError):
            parse_perm(text)


class TestPathRuleValidation:
    """Tests for PathRule validation."""

    def test_defaults(self) -> None:
        """An empty rule is optional and follows symlinks."""
        rule = PathRule()

        assert rule.preset is None
        assert rule.follow_symlinks is True

    def test_preset_with_fields_rejected(self) -> None:
        """A preset cannot be mixed with explicit fields."""
        with pytest.raises(ValidationError, match="cannot be combined with: existence, perm"):
            PathRule(preset="dir_exists", existence="must_exist", perm="0700")

    def test_preset_with_follow_and_reason_allowed(self) -> None:
        """follow_symlinks and reason are compatible with presets."""
        rule = PathRule(preset="is_new", follow_symlinks=False, reason="fresh install")

        assert rule.reason == "fresh install"

    def test_inverted_size_range(self) -> None:
        """max_size below min_size is rejected."""
        with pytest.raises(ValidationError, match="less than min_size"):
            PathRule(min_size=10, max_size=5)

    def test_negative_size(self) -> None:
        """Sizes cannot be negative."""
        with pytest.raises(ValidationError):
            PathRule(min_size=-1)

    def test_bad_perm(self) -> None:
        """perm must be octal."""
        with pytest.raises(ValidationError, match="invalid octal permissions"):
            PathRule(perm="rwx")

    def test_unknown_field(self) -> None:
        """Extra fields are forbidden."""
        with pytest.raises(ValidationError):
            PathRule(owner="root")  # type: ignore[call-arg]


class TestToProvisos:
    """Tests for PathRule.to_provisos."""

    def test_preset(self) -> None:
        """A preset rule builds the preset's Provisos."""
        assert PathRule(preset="dir_exists").to_provisos() == dir_exists()

    def test_preset_keeps_symlink_policy(self, fs_tree: FsTree) -> None:
        """follow_symlinks applies on top of a preset."""
        p = PathRule(preset="file_non_empty", follow_symlinks=False).to_provisos()

        assert p.existence == Existence.MUST_EXIST
        assert len(p.checks) == len(file_non_empty().checks)
        assert p.checks[0] is is_regular
        assert p.follow_symlinks is False
        with pytest.raises(CheckFailedError, match="regular file but is a symbolic link"):
            p.check(fs_tree.link_to_file)

    def test_default_existence_is_optional(self) -> None:
        """Without preset or existence the path may be absent."""
        p = PathRule().to_provisos()

        assert p.existence == Existence.OPTIONAL
        assert p.checks == ()

    @pytest.mark.parametrize(
        ("object_type", "check"),
        [("directory", is_dir), ("file", is_regular), ("symlink", is_symlink)],
    )
    def test_type_check(self, object_type: str, check: object) -> None:
        """type maps to the matching type check, placed first."""
        p = PathRule(type=object_type, min_size=1).to_provisos()  # type: ignore[arg-type]

        assert p.checks[0] is check
        assert len(p.checks) == 2

    def test_all_checks_order(self, fs_tree: FsTree) -> None:
        """Type is checked before size, size before permissions."""
        p = PathRule(
            existence="must_exist",
            type="file",
            min_size=1,
            max_size=1000,
            perm="0600",
        ).to_provisos()

        assert len(p.checks) == 4
        p.check(fs_tree.file_0600)
        with pytest.raises(CheckFailedError, match="regular file"):
            p.check(fs_tree.directory)
        with pytest.raises(CheckFailedError, match="size"):
            PathRule(type="file", min_size=1, perm="0600").to_provisos().check(fs_tree.empty_file)
        with pytest.raises(CheckFailedError, match="0o644"):
            p.check(fs_tree.file_0644)


class TestRulesFile:
    """Tests for RulesFile."""

    def test_empty(self) -> None:
        """A RulesFile defaults to no paths."""
        assert RulesFile().paths == {}

    def test_empty_key_rejected(self) -> None:
        """Blank path keys are invalid."""
        with pytest.raises(ValidationError, match="cannot be empty"):
            RulesFile(paths={" ": PathRule()})

    def test_expanded(self) -> None:
        """Leading ~ is expanded; other paths are untouched."""
        rules = RulesFile(paths={"~/x": PathRule(), "relative/y": PathRule()})

        assert [p for p, _ in rules.expanded()] == [
            os.path.expanduser("~/x"),
            "relative/y",
        ]
