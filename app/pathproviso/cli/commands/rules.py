"""Rules file management commands.

Add, remove and list the path rules stored in the rules file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from pathproviso.cli.types import (
    ExistsOption,
    MaxSizeOption,
    MinSizeOption,
    NoFollowOption,
    PermOption,
    PresetOption,
    TypeOption,
    build_rule,
)
from pathproviso.core.paths import get_rules_path
from pathproviso.core.rules import RulesError, load_or_create_rules, require_rules, save_rules
from pathproviso.utils.formatting import console, print_error, print_info, print_success

RulesOption = Annotated[
    Path | None,
    typer.Option("--rules", "-r", help="Rules file (default: ~/.config/pathproviso/rules.toml)."),
]


def add(
    path: Annotated[str, typer.Argument(help="Path the rule applies to (may start with ~).")],
    preset: PresetOption = None,
    exists: ExistsOption = None,
    object_type: TypeOption = None,
    min_size: MinSizeOption = None,
    max_size: MaxSizeOption = None,
    perm: PermOption = None,
    no_follow: NoFollowOption = False,
    reason: Annotated[
        str | None,
        typer.Option("--reason", help="Why this rule exists."),
    ] = None,
    rules_path: RulesOption = None,
) -> None:
    """Add a rule for PATH, replacing any existing rule."""
    rule = build_rule(preset, exists, object_type, min_size, max_size, perm, no_follow, reason)
    target = rules_path or get_rules_path()

    try:
        rules = load_or_create_rules(target)
        replaced = path in rules.paths
        rules.paths[path] = rule
        save_rules(rules, target)
    except RulesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    verb = "Replaced" if replaced else "Added"
    print_success(f"{verb} rule for {path}: {rule.to_provisos().describe()}")


def remove(
    path: Annotated[str, typer.Argument(help="Path whose rule should be removed.")],
    rules_path: RulesOption = None,
) -> None:
    """Remove the rule for PATH."""
    target = rules_path or get_rules_path()
    rules = require_rules(target)

    if path not in rules.paths:
        print_error(f"No rule for {path}")
        raise typer.Exit(code=1)

    del rules.paths[path]
    try:
        save_rules(rules, target)
    except RulesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Removed rule for {path}")


def list_rules(rules_path: RulesOption = None) -> None:
    """List the rules in the rules file."""
    rules = require_rules(rules_path)

    if not rules.paths:
        print_info("No rules defined.")
        return

    table = Table(
        title="Rules",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="path")
    table.add_column("Provisos")
    table.add_column("Reason", style="muted")

    for path, rule in rules.paths.items():
        table.add_row(
            escape(path),
            escape(rule.to_provisos().describe()),
            escape(rule.reason or "-"),
        )

    console.print(table)
