"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass(frozen=True)
class FsTree:
    """Paths of a small filesystem tree built under tmp_path."""

    root: Path
    directory: Path
    file: Path
    empty_file: Path
    file_0600: Path
    file_0644: Path
    link_to_file: Path
    link_to_nothing: Path
    missing: Path


@pytest.fixture
def fs_tree(tmp_path: Path) -> FsTree:
    """Build a directory, regular files and symlinks for check tests."""
    directory = tmp_path / "a_dir"
    directory.mkdir()

    file = tmp_path / "a_file"
    file.write_text("hello\n")

    empty_file = tmp_path / "empty_file"
    empty_file.touch()

    file_0600 = tmp_path / "file.0600"
    file_0600.write_text("secret\n")
    os.chmod(file_0600, 0o600)

    file_0644 = tmp_path / "file.0644"
    file_0644.write_text("public\n")
    os.chmod(file_0644, 0o644)

    link_to_file = tmp_path / "link_to_file"
    link_to_file.symlink_to(file)

    link_to_nothing = tmp_path / "link_to_nothing"
    link_to_nothing.symlink_to(tmp_path / "nonesuch_target")

    return FsTree(
        root=tmp_path,
        directory=directory,
        file=file,
        empty_file=empty_file,
        file_0600=file_0600,
        file_0644=file_0644,
        link_to_file=link_to_file,
        link_to_nothing=link_to_nothing,
        missing=tmp_path / "nonesuch",
    )


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config))
    return config
