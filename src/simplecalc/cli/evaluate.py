"""
Expression CLI commands.

- eval:   show tokens, tree, and result for one expression
- tokens: show only the token stream
"""

from __future__ import annotations

from pathlib import Path

import typer

from simplecalc.cli.utils import print_error
from simplecalc.core.config import CalcConfig, parse_assignment_option, resolve_config
from simplecalc.core.errors import CalcError, ConfigError
from simplecalc.core.expression_lang.parser import parse_tokens
from simplecalc.core.expression_lang.render import format_number, render_tokens, render_tree
from simplecalc.core.expression_lang.tokenizer import tokenize
from simplecalc.core.session import Session


def _load_config(config: Path | None, assignments: list[str] | None) -> CalcConfig:
    try:
        calc_config = resolve_config(config)
        for text in assignments or []:
            name, value = parse_assignment_option(text)
            calc_config.constants[name] = value
    except ConfigError as e:
        print_error(e)
        raise typer.Exit(code=2)
    return calc_config


def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. 'x = 2 + 3 * 4'"),
    no_tokens: bool = typer.Option(False, "--no-tokens", help="Do not print the token stream"),
    no_tree: bool = typer.Option(False, "--no-tree", help="Do not print the syntax tree"),
    assignments: list[str] | None = typer.Option(
        None, "--set", "-s", help="Pre-seed a variable, NAME=VALUE (repeatable)"
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to simplecalc.toml (default: $SIMPLECALC_CONFIG or ./simplecalc.toml)"
    ),
) -> None:
    """Tokenize, parse and evaluate one expression."""
    calc_config = _load_config(config, assignments)
    session = Session(calc_config.constants)

    try:
        tokens = tokenize(expression)
        if calc_config.output.show_tokens and not no_tokens:
            typer.echo(render_tokens(tokens))
            typer.echo("")

        tree = parse_tokens(tokens)
        if calc_config.output.show_tree and not no_tree:
            typer.echo(render_tree(tree))
            typer.echo("")

        value = session.evaluate(tree)
    except CalcError as e:
        print_error(e, expression)
        raise typer.Exit(code=1)

    typer.echo(format_number(value))


def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Print the token stream for one expression."""
    try:
        tokens = tokenize(expression)
    except CalcError as e:
        print_error(e, expression)
        raise typer.Exit(code=1)

    typer.echo(render_tokens(tokens))
