"""Rule models for the rules.toml file.

Each entry in the ``[paths]`` table describes what one path must look
like and is turned into a Provisos for checking.
"""

import os
from collections.abc import Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pathproviso.checks import (
    FileInfoCheck,
    ge,
    is_dir,
    is_regular,
    is_symlink,
    le,
    perm,
    perm_eq,
    size,
)
from pathproviso.provisos import (
    Existence,
    Provisos,
    dir_exists,
    file_exists,
    file_non_empty,
    is_new,
)

PresetType = Literal["dir_exists", "file_exists", "file_non_empty", "is_new"]
ExistenceType = Literal["optional", "must_exist", "must_not_exist"]
ObjectType = Literal["directory", "file", "symlink"]

_PRESETS = {
    "dir_exists": dir_exists,
    "file_exists": file_exists,
    "file_non_empty": file_non_empty,
    "is_new": is_new,
}

_TYPE_CHECKS: dict[str, FileInfoCheck] = {
    "directory": is_dir,
    "file": is_regular,
    "symlink": is_symlink,
}


def parse_perm(value: str) -> int:
    """Parse an octal permission string such as "0600" or "0o644".

    Raises:
        ValueError: If the string is not octal or exceeds 0o777.
    """
    text = value.strip().lower().removeprefix("0o")
    try:
        bits = int(text, 8)
    except ValueError:
        msg = f"invalid octal permissions: {value!r}"
        raise ValueError(msg) from None
    if not 0 <= bits <= 0o777:
        msg = f"permissions out of range (0-0777): {value!r}"
        raise ValueError(msg)
    return bits


class PathRule(BaseModel):
    """Expectations for a single path.

    Either ``preset`` or the individual fields may be used, not both.
    Without a preset or an explicit existence the path is optional.

    Attributes:
        preset: Named common case (dir_exists, file_exists, file_non_empty, is_new).
        existence: Whether the path must, must not, or may exist.
        type: Required object type.
        min_size: Minimum size in bytes (inclusive).
        max_size: Maximum size in bytes (inclusive).
        perm: Required permission bits as an octal string (e.g. "0600").
        follow_symlinks: Judge symlinks by their target (default) or by the link.
        reason: Human-readable note on why the rule exists.
    """

    model_config = ConfigDict(extra="forbid")

    preset: Annotated[PresetType | None, Field(description="Named common case")] = None
    existence: Annotated[ExistenceType | None, Field(description="Existence requirement")] = None
    type: Annotated[ObjectType | None, Field(description="Required object type")] = None
    min_size: Annotated[int | None, Field(ge=0, description="Minimum size in bytes")] = None
    max_size: Annotated[int | None, Field(ge=0, description="Maximum size in bytes")] = None
    perm: Annotated[str | None, Field(description="Required permission bits (octal)")] = None
    follow_symlinks: Annotated[bool, Field(description="Follow symbolic links")] = True
    reason: Annotated[str | None, Field(description="Reason for the rule")] = None

    @field_validator("perm")
    @classmethod
    def validate_perm(cls, v: str | None) -> str | None:
        """Validate that perm is an octal permission string."""
        if v is not None:
            parse_perm(v)
        return v

    @model_validator(mode="after")
    def validate_combination(self) -> "PathRule":
        """Reject presets mixed with explicit fields and inverted size ranges."""
        explicit = [
            name
            for name in ("existence", "type", "min_size", "max_size", "perm")
            if getattr(self, name) is not None
        ]
        if self.preset is not None and explicit:
            msg = f"preset '{self.preset}' cannot be combined with: {', '.join(explicit)}"
            raise ValueError(msg)
        if (
            self.min_size is not None
            and self.max_size is not None
            and self.max_size < self.min_size
        ):
            msg = f"max_size ({self.max_size}) is less than min_size ({self.min_size})"
            raise ValueError(msg)
        return self

    def to_provisos(self) -> Provisos:
        """Build the Provisos this rule describes.

        Checks run type first, then size, then permissions.
        """
        if self.preset is not None:
            base = _PRESETS[self.preset]()
            return Provisos(
                existence=base.existence,
                checks=base.checks,
                follow_symlinks=self.follow_symlinks,
            )

        checks: list[FileInfoCheck] = []
        if self.type is not None:
            checks.append(_TYPE_CHECKS[self.type])
        if self.min_size is not None:
            checks.append(size(ge(self.min_size)))
        if self.max_size is not None:
            checks.append(size(le(self.max_size)))
        if self.perm is not None:
            checks.append(perm(perm_eq(parse_perm(self.perm))))

        return Provisos(
            existence=Existence(self.existence or "optional"),
            checks=tuple(checks),
            follow_symlinks=self.follow_symlinks,
        )


class RulesFile(BaseModel):
    """Contents of a rules.toml file.

    Attributes:
        paths: Rules keyed by path. Paths may start with ``~``.
    """

    model_config = ConfigDict(extra="forbid")

    paths: Annotated[
        dict[str, PathRule],
        Field(default_factory=dict, description="Rules keyed by path"),
    ]

    @field_validator("paths")
    @classmethod
    def validate_paths(cls, v: dict[str, PathRule]) -> dict[str, PathRule]:
        """Reject empty path keys."""
        if any(not key.strip() for key in v):
            msg = "Path keys cannot be empty"
            raise ValueError(msg)
        return v

    def expanded(self) -> Iterator[tuple[str, PathRule]]:
        """Yield (path, rule) pairs with a leading ``~`` expanded."""
        for path, rule in self.paths.items():
            yield os.path.expanduser(path), rule
