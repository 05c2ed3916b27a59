"""Run one of the lexer's FSM recognizers directly on sample inputs."""

from __future__ import annotations

from enum import StrEnum

import typer

from simplecalc.core.fsm import IDENTIFIER_RECOGNIZER, NUMBER_RECOGNIZER


class Recognizer(StrEnum):
    NUMBER = "number"
    IDENTIFIER = "identifier"


_MACHINES = {
    Recognizer.NUMBER: NUMBER_RECOGNIZER,
    Recognizer.IDENTIFIER: IDENTIFIER_RECOGNIZER,
}


def recognize_command(
    recognizer: Recognizer = typer.Argument(..., help="Which recognizer to run"),
    inputs: list[str] = typer.Argument(..., help="Strings to match"),
) -> None:
    """Print the prefix of each input the recognizer accepts."""
    machine = _MACHINES[recognizer]
    for text in inputs:
        matched = machine.run(text)
        typer.echo(f"{text} => {matched if matched is not None else 'no match'}")
