"""Logging setup for the CLI."""

import logging

from rich.logging import RichHandler

from pathproviso.utils.formatting import err_console


def configure_logging(verbose: bool = False) -> None:
    """Route pathproviso log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logger = logging.getLogger("pathproviso")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False, markup=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
