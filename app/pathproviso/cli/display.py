"""Shared Rich display functions for check results."""

import json

from rich.markup import escape
from rich.table import Table

from pathproviso.core.verifier import PathVerdict
from pathproviso.utils.formatting import console, print_success


def create_verdicts_table(verdicts: list[PathVerdict], title: str = "Path Checks") -> Table:
    """Create a Rich table displaying path verdicts.

    Args:
        verdicts: Verdicts to display.
        title: Table title.

    Returns:
        Rich Table with Status, Path and Details columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=6, justify="center")
    table.add_column("Path", style="path", no_wrap=True)
    table.add_column("Details")

    for verdict in verdicts:
        if verdict.success:
            status = "[success]OK[/success]"
            details = f"[muted]{escape(verdict.description)}[/muted]"
        else:
            status = "[error]FAIL[/error]"
            details = escape(verdict.error or "Unknown error")
        table.add_row(status, escape(verdict.path), details)

    return table


def print_verdicts_json(verdicts: list[PathVerdict]) -> None:
    """Print verdicts as JSON."""
    data = [
        {
            "path": v.path,
            "description": v.description,
            "success": v.success,
            "error": v.error,
            "kind": v.kind,
        }
        for v in verdicts
    ]
    console.print_json(json.dumps(data))


def print_verdicts_summary(verdicts: list[PathVerdict]) -> None:
    """Print a one-line summary of verdicts."""
    passed = sum(1 for v in verdicts if v.success)
    failed = sum(1 for v in verdicts if v.failed)

    if failed == 0:
        print_success(f"All {passed} path(s) satisfy their provisos.")
    else:
        console.print(f"\n[success]{passed} passed[/success], [error]{failed} failed[/error]")
