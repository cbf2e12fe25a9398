"""Check and describe commands.

Checks paths given on the command line against Provisos built from the
rule options, or describes those Provisos without touching the filesystem.
"""

from typing import Annotated

import typer

from pathproviso.cli.display import (
    create_verdicts_table,
    print_verdicts_json,
    print_verdicts_summary,
)
from pathproviso.cli.types import (
    ExistsOption,
    FormatOption,
    MaxSizeOption,
    MinSizeOption,
    NoFollowOption,
    OutputFormat,
    PermOption,
    PresetOption,
    TypeOption,
    build_rule,
)
from pathproviso.core.verifier import verify_path
from pathproviso.utils.formatting import console, print_verdict


def check(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths to check, passed to the OS as typed.", show_default=False),
    ],
    preset: PresetOption = None,
    exists: ExistsOption = None,
    object_type: TypeOption = None,
    min_size: MinSizeOption = None,
    max_size: MaxSizeOption = None,
    perm: PermOption = None,
    no_follow: NoFollowOption = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Check paths against the given provisos.

    Exits with code 1 if any path fails.
    """
    rule = build_rule(preset, exists, object_type, min_size, max_size, perm, no_follow)
    provisos = rule.to_provisos()

    verdicts = [verify_path(path, provisos) for path in paths]
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    if output_format == OutputFormat.JSON:
        print_verdicts_json(verdicts)
    elif quiet:
        for verdict in verdicts:
            if verdict.failed:
                print_verdict(verdict)
    else:
        console.print(f"[muted]{provisos.describe()}[/muted]")
        console.print(create_verdicts_table(verdicts))
        print_verdicts_summary(verdicts)

    if any(v.failed for v in verdicts):
        raise typer.Exit(code=1)


def describe(
    preset: PresetOption = None,
    exists: ExistsOption = None,
    object_type: TypeOption = None,
    min_size: MinSizeOption = None,
    max_size: MaxSizeOption = None,
    perm: PermOption = None,
    no_follow: NoFollowOption = False,
) -> None:
    """Describe the provisos built from the given options."""
    rule = build_rule(preset, exists, object_type, min_size, max_size, perm, no_follow)
    typer.echo(rule.to_provisos().describe())
