"""
Error types for simplecalc lexing, parsing, and evaluation.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from simplecalc.core.ir.location import Position

if TYPE_CHECKING:
    from simplecalc.core.expression_lang.tokenizer import Token, TokenKind


class CalcError(Exception):
    """Base exception for all simplecalc errors."""

    def __init__(self, message: str, position: Position | None = None):
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with position if available."""
        if self.position is not None:
            return f"{self.position}: {self.message}"
        return self.message


class LexError(CalcError):
    """
    Raised when source text cannot be tokenized.

    Examples:
    - Unexpected character (`5 @ 3`)
    - Malformed number literal (`5e`, `1.`)
    """

    def __init__(self, position: Position, character: str, message: str | None = None):
        self.character = character
        super().__init__(message or f"Unexpected character {character!r}", position)


class ParseError(CalcError):
    """
    Raised when the token sequence does not match the grammar.

    Examples:
    - Unclosed grouping (`(5 - 4`)
    - Missing operand (`2 +`)
    - Trailing tokens (`1 2`)
    - Parentheses nested too deeply
    """

    def __init__(
        self,
        position: Position,
        expected: tuple[TokenKind, ...],
        found: Token,
        message: str | None = None,
    ):
        self.expected = expected
        self.found = found
        if message is None:
            wanted = " or ".join(str(kind) for kind in expected)
            message = f"Expected {wanted}, found {found.kind}"
            if found.lexeme:
                message += f" ({found.lexeme!r})"
        super().__init__(message, position)


class EvalErrorKind(StrEnum):
    """Reasons evaluation can fail."""

    UNDEFINED_VARIABLE = "UndefinedVariable"
    UNSUPPORTED_EXPRESSION = "UnsupportedExpression"


class EvalError(CalcError):
    """
    Raised when a parsed expression cannot be evaluated.

    Examples:
    - Reference to an undefined variable
    """

    def __init__(
        self,
        kind: EvalErrorKind,
        position: Position | None = None,
        name: str | None = None,
    ):
        self.kind = kind
        self.name = name
        if kind == EvalErrorKind.UNDEFINED_VARIABLE:
            message = f"Undefined variable '{name}'"
        else:
            message = f"Unsupported expression: {name}"
        super().__init__(message, position)


class ConfigError(CalcError):
    """
    Raised when configuration cannot be loaded.

    Examples:
    - Malformed TOML
    - Constant name that is not a valid identifier
    - Constant value that is not a number
    """

    pass


def format_error(error: CalcError, source: str) -> str:
    """
    Format an error with a source snippet and a caret under its column.

    Args:
        error: The error to render
        source: Source text the error was raised for

    Returns:
        Multi-line string like:

            ParseError at 0:6: Expected RightParen, found EndOfInput
               0 | (5 - 4
                         ^
    """
    header = f"{type(error).__name__}"
    if error.position is None:
        return f"{header}: {error.message}"

    header += f" at {error.position}: {error.message}"
    lines = source.split("\n")
    if not 0 <= error.position.line < len(lines):
        return header

    prefix = f"{error.position.line:4d} | "
    marker = " " * (len(prefix) + error.position.column) + "^"
    return "\n".join([header, prefix + lines[error.position.line], marker])
