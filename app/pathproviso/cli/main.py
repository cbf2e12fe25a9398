"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from pathproviso import __version__
from pathproviso.cli.commands import check, rules, verify
from pathproviso.utils.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="pathproviso",
    help="Declarative checks on filesystem objects.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathproviso version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report failures.",
        ),
    ] = False,
) -> None:
    """pathproviso - Declarative checks on filesystem objects.

    State whether a path must exist, must not exist or may exist, and what
    its type, size and permissions must be, then check it.
    """
    configure_logging(verbose)
    # Store options in context for commands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="check")(check.check)
app.command(name="describe")(check.describe)
app.command(name="verify")(verify.verify)
app.command(name="add")(rules.add)
app.command(name="remove")(rules.remove)
app.command(name="rules")(rules.list_rules)


if __name__ == "__main__":
    app()
