"""Rules file I/O operations.

This module provides functions for loading and saving rules files in
TOML format with validation using Pydantic models.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from pathproviso.core.paths import get_rules_path
from pathproviso.models.rules import PathRule, RulesFile

logger = logging.getLogger(__name__)


class RulesError(Exception):
    """Base exception for rules-file errors."""


class RulesNotFoundError(RulesError):
    """Raised when the rules file is not found."""


class RulesParseError(RulesError):
    """Raised when the rules file cannot be parsed."""


class RulesValidationError(RulesError):
    """Raised when the rules file content is invalid."""


def load_rules(path: Path | None = None) -> RulesFile:
    """Load and validate a rules file.

    Args:
        path: Path to the rules file. If None, uses the default rules path.

    Returns:
        Validated RulesFile object.

    Raises:
        RulesNotFoundError: If the rules file doesn't exist.
        RulesParseError: If the TOML syntax is invalid.
        RulesValidationError: If the content doesn't match the schema.
    """
    rules_path = path or get_rules_path()

    try:
        with open(rules_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise RulesNotFoundError(f"Rules file not found: {rules_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise RulesParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise RulesError(f"Failed to read rules file: {e}") from e

    try:
        rules = RulesFile.model_validate(data)
    except ValidationError as e:
        raise RulesValidationError(f"Invalid rules file content: {e}") from e

    logger.debug("Loaded %d rule(s) from %s", len(rules.paths), rules_path)
    return rules


def save_rules(rules: RulesFile, path: Path | None = None) -> Path:
    """Save a rules file as TOML.

    The file is written to a temporary file in the same directory and then
    moved into place with os.replace(). The temporary file is removed on
    failure.

    Args:
        rules: The RulesFile object to save.
        path: Destination. If None, uses the default rules path.

    Returns:
        Path where the rules were saved.

    Raises:
        RulesError: If the file cannot be written.
    """
    rules_path = path or get_rules_path()
    data = _rules_to_dict(rules)

    tmp_path: Path | None = None
    try:
        rules_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=rules_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, rules_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise RulesError(f"Failed to write rules file: {e}") from e

    logger.debug("Saved %d rule(s) to %s", len(rules.paths), rules_path)
    return rules_path


def load_or_create_rules(path: Path | None = None) -> RulesFile:
    """Load the rules file, or return an empty one if it does not exist yet.

    Raises:
        RulesParseError: If the TOML syntax is invalid.
        RulesValidationError: If the content doesn't match the schema.
    """
    try:
        return load_rules(path)
    except RulesNotFoundError:
        return RulesFile()


def require_rules(rules_path: Path | None = None) -> RulesFile:
    """Load the rules file or exit with a helpful error message.

    Args:
        rules_path: Optional custom rules path.

    Returns:
        Loaded and validated RulesFile.

    Raises:
        typer.Exit: If the rules file cannot be loaded.
    """
    import typer

    from pathproviso.utils.formatting import print_error, print_info

    path = rules_path or get_rules_path()
    try:
        return load_rules(path)
    except RulesNotFoundError as e:
        print_error(f"Rules file not found: {path}")
        print_info("Run 'pathproviso add PATH ...' to create one.")
        raise typer.Exit(code=1) from e
    except RulesError as e:
        print_error(f"Failed to load rules: {e}")
        raise typer.Exit(code=1) from e


def _rules_to_dict(rules: RulesFile) -> dict[str, Any]:
    """Convert a RulesFile to a dictionary suitable for TOML serialization.

    Unset fields are omitted, as is follow_symlinks when it has its
    default value.
    """
    return {"paths": {path: _rule_to_dict(rule) for path, rule in rules.paths.items()}}


def _rule_to_dict(rule: PathRule) -> dict[str, Any]:
    result = rule.model_dump(exclude_none=True)
    if result.get("follow_symlinks", True):
        result.pop("follow_symlinks", None)
    return result
