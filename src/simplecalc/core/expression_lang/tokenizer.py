"""
Tokenizer for the simplecalc expression language.

Converts an expression string into a lazy sequence of positioned tokens.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from simplecalc.core.errors import LexError
from simplecalc.core.fsm import IDENTIFIER_RECOGNIZER, NUMBER_RECOGNIZER
from simplecalc.core.ir.location import Position

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = "Number"
    IDENTIFIER = "Identifier"

    # Operators
    ARITHMETIC_OPERATOR = "ArithmeticOperator"
    COMPARISON_OPERATOR = "ComparisonOperator"
    ASSIGN_OPERATOR = "AssignOperator"

    # Punctuation
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"

    # End of input
    END_OF_INPUT = "EndOfInput"


@dataclass(frozen=True, slots=True)
class Token:
    """
    A single token from the expression tokenizer.

    Attributes:
        kind: Type of token
        lexeme: Exact source text of the token (empty for EndOfInput)
        position: Where the lexeme starts
        number: Parsed value, for NUMBER tokens only
    """

    kind: TokenKind
    lexeme: str
    position: Position
    number: float | None = None

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, {self.position})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.ARITHMETIC_OPERATOR,
    "-": TokenKind.ARITHMETIC_OPERATOR,
    "*": TokenKind.ARITHMETIC_OPERATOR,
    "/": TokenKind.ARITHMETIC_OPERATOR,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

_SPACES = " \t\r"


class _Scanner:
    """Cursor over one pass of the source text, tracking line and column."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 0
        self.column = 0

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self, count: int = 1) -> None:
        """Move forward ``count`` characters, updating line/column."""
        for _ in range(count):
            if self.pos >= len(self.text):
                return
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            self.pos += 1

    def position(self) -> Position:
        return Position(line=self.line, column=self.column)

    def scan(self) -> Iterator[Token]:
        while (c := self.current_char()) is not None:
            if c in _SPACES or c == "\n":
                self.advance()
                continue

            if not c.isascii():
                raise LexError(self.position(), c)

            if c.isdigit():
                yield self._read_number()
                continue

            if c.isalpha() or c == "_":
                yield self._read_identifier()
                continue

            yield self._read_operator(c)

        yield Token(TokenKind.END_OF_INPUT, "", self.position())

    def _read_number(self) -> Token:
        start = self.position()
        state, end = NUMBER_RECOGNIZER.walk(self.text, self.pos)
        lexeme = self.text[self.pos : end]
        if state not in NUMBER_RECOGNIZER.accepting_states:
            raise LexError(start, lexeme, f"Malformed number literal {lexeme!r}")
        self.advance(len(lexeme))
        return Token(TokenKind.NUMBER, lexeme, start, float(lexeme))

    def _read_identifier(self) -> Token:
        start = self.position()
        name = IDENTIFIER_RECOGNIZER.run(self.text, self.pos)
        assert name is not None
        self.advance(len(name))
        return Token(TokenKind.IDENTIFIER, name, start)

    def _read_operator(self, c: str) -> Token:
        start = self.position()

        # "=", "<" and ">" extend to a two-character comparison on a following "="
        if c in "=<>":
            if self.peek_char() == "=":
                self.advance(2)
                return Token(TokenKind.COMPARISON_OPERATOR, c + "=", start)
            self.advance()
            if c == "=":
                return Token(TokenKind.ASSIGN_OPERATOR, c, start)
            return Token(TokenKind.COMPARISON_OPERATOR, c, start)

        if c in _SINGLE_CHAR:
            self.advance()
            return Token(_SINGLE_CHAR[c], c, start)

        raise LexError(start, c)


class Lexer:
    """
    Lexer for the expression language.

    Iterating a Lexer scans the text from the beginning and yields tokens
    lazily, ending with exactly one END_OF_INPUT token. Scanning stops at
    the first offending character with a LexError. Each iterator has its
    own cursor, so several may run over the same Lexer at once.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        return _Scanner(self.text).scan()


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    tokens = list(Lexer(source))
    logger.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")
    return tokens
