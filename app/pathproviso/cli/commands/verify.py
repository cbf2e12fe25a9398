"""Verify command: check every path in the rules file."""

from pathlib import Path
from typing import Annotated

import typer

from pathproviso.cli.display import (
    create_verdicts_table,
    print_verdicts_json,
    print_verdicts_summary,
)
from pathproviso.cli.types import FormatOption, OutputFormat
from pathproviso.core.rules import require_rules
from pathproviso.core.verifier import verify_paths
from pathproviso.utils.formatting import console, print_info, print_verdict


def verify(
    ctx: typer.Context,
    rules_path: Annotated[
        Path | None,
        typer.Option("--rules", "-r", help="Rules file (default: ~/.config/pathproviso/rules.toml)."),
    ] = None,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Check every path in the rules file.

    Exits with code 1 if any path fails.
    """
    rules = require_rules(rules_path)

    if not rules.paths:
        print_info("No rules defined.")
        return

    provisos = [(path, rule.to_provisos()) for path, rule in rules.expanded()]
    verdicts = verify_paths(provisos)
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    if output_format == OutputFormat.JSON:
        print_verdicts_json(verdicts)
    elif quiet:
        for verdict in verdicts:
            if verdict.failed:
                print_verdict(verdict)
    else:
        console.print(create_verdicts_table(verdicts, title="Rules"))
        print_verdicts_summary(verdicts)

    if any(v.failed for v in verdicts):
        raise typer.Exit(code=1)
