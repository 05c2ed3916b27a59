"""
simplecalc CLI package.

- evaluate.py: eval and tokens commands
- recognize.py: FSM recognizer command
- utils.py: Shared utilities
"""

import typer

from simplecalc.cli.evaluate import eval_command, tokens_command
from simplecalc.cli.recognize import recognize_command
from simplecalc.cli.utils import configure_logging, get_version, version_callback

app = typer.Typer(
    help="simplecalc – evaluate arithmetic, comparison and assignment expressions",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log pipeline stages at DEBUG level"),
) -> None:
    """simplecalc CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="eval")(eval_command)
app.command(name="tokens")(tokens_command)
app.command(name="recognize")(recognize_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "get_version", "version_callback"]
