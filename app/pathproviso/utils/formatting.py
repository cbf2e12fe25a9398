"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich. Messages passed
to the print helpers are plain text: paths and error messages may contain
square brackets, so they are escaped before Rich parses markup.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from pathproviso.core.theme import get_theme

if TYPE_CHECKING:
    from pathproviso.core.verifier import PathVerdict


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")


def print_verdict(verdict: PathVerdict) -> None:
    """Print a single verdict on one line.

    Passing paths go to stdout, failures to stderr with their error.
    """
    if verdict.success:
        console.print(f"[success]OK[/] [path]{escape(verdict.path)}[/]")
    else:
        err_console.print(f"[error]FAIL[/] {escape(verdict.error or verdict.path)}")
