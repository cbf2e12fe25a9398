"""Shared option types and helpers for CLI commands.

The rule options (--preset, --exists, --type, ...) are accepted by
several commands and are turned into a PathRule in one place.
"""

from enum import Enum
from typing import Annotated

import typer
from pydantic import ValidationError

from pathproviso.models.rules import PathRule
from pathproviso.utils.formatting import print_error


class PresetChoice(str, Enum):
    """Named Provisos presets."""

    DIR_EXISTS = "dir_exists"
    FILE_EXISTS = "file_exists"
    FILE_NON_EMPTY = "file_non_empty"
    IS_NEW = "is_new"


class ExistenceChoice(str, Enum):
    """Existence requirement options."""

    OPTIONAL = "optional"
    MUST_EXIST = "must_exist"
    MUST_NOT_EXIST = "must_not_exist"


class TypeChoice(str, Enum):
    """Object type options."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


PresetOption = Annotated[
    PresetChoice | None,
    typer.Option("--preset", "-p", help="Use a named preset.", case_sensitive=False),
]
ExistsOption = Annotated[
    ExistenceChoice | None,
    typer.Option("--exists", "-e", help="Existence requirement.", case_sensitive=False),
]
TypeOption = Annotated[
    TypeChoice | None,
    typer.Option("--type", "-t", help="Required object type.", case_sensitive=False),
]
MinSizeOption = Annotated[
    int | None,
    typer.Option("--min-size", help="Minimum size in bytes.", min=0),
]
MaxSizeOption = Annotated[
    int | None,
    typer.Option("--max-size", help="Maximum size in bytes.", min=0),
]
PermOption = Annotated[
    str | None,
    typer.Option("--perm", help="Required permission bits in octal (e.g. 0600)."),
]
NoFollowOption = Annotated[
    bool,
    typer.Option("--no-follow", help="Check symbolic links themselves, not their targets."),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
]


def build_rule(
    preset: PresetChoice | None = None,
    exists: ExistenceChoice | None = None,
    object_type: TypeChoice | None = None,
    min_size: int | None = None,
    max_size: int | None = None,
    perm: str | None = None,
    no_follow: bool = False,
    reason: str | None = None,
) -> PathRule:
    """Build a PathRule from CLI options.

    Raises:
        typer.Exit: With code 2 if the options do not form a valid rule.
    """
    try:
        return PathRule(
            preset=preset.value if preset else None,
            existence=exists.value if exists else None,
            type=object_type.value if object_type else None,
            min_size=min_size,
            max_size=max_size,
            perm=perm,
            follow_symlinks=not no_follow,
            reason=reason,
        )
    except ValidationError as e:
        for err in e.errors():
            print_error(str(err["msg"]))
        raise typer.Exit(code=2) from e
