"""
simplecalc CLI utilities.

Shared helpers used across CLI modules: version display, logging setup,
and error presentation.
"""

from __future__ import annotations

import logging
import platform

import typer
from rich.console import Console
from rich.markup import escape

from simplecalc.core.errors import CalcError, format_error

err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_version() -> str:
    from simplecalc import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"simplecalc {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    # Unconfigured, only WARNING and above reach stderr via logging.lastResort
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
        logging.getLogger("simplecalc").setLevel(logging.DEBUG)


def print_error(error: CalcError, source: str | None = None) -> None:
    """Print an error to stderr, with a caret snippet when the source is known."""
    if source is None:
        err_console.print(f"[red]Error: {escape(error.message)}[/red]", soft_wrap=True)
        return

    header, *snippet = format_error(error, source).split("\n")
    err_console.print(f"[red]{escape(header)}[/red]", soft_wrap=True)
    for line in snippet:
        err_console.print(line, markup=False, highlight=False, soft_wrap=True)
