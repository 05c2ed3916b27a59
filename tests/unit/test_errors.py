"""Tests for error messages and source snippets."""

from __future__ import annotations

import pytest

from simplecalc.core.errors import (
    CalcError,
    ConfigError,
    EvalError,
    EvalErrorKind,
    LexError,
    ParseError,
    format_error,
)
from simplecalc.core.expression_lang.parser import parse_expr
from simplecalc.core.ir.location import Position


def _raised(source: str) -> CalcError:
    with pytest.raises(CalcError) as exc_info:
        parse_expr(source)
    return exc_info.value


class TestMessages:
    def test_lex_error(self) -> None:
        err = _raised("5 @ 3")
        assert isinstance(err, LexError)
        assert str(err) == "0:2: Unexpected character '@'"

    def test_parse_error(self) -> None:
        err = _raised("(5 - 4")
        assert isinstance(err, ParseError)
        assert str(err) == "0:6: Expected RightParen, found EndOfInput"

    def test_parse_error_shows_found_lexeme(self) -> None:
        err = _raised("1 2")
        assert str(err) == "0:2: Expected EndOfInput, found Number ('2')"

    def test_parse_error_lists_alternatives(self) -> None:
        err = _raised("*")
        assert err.message == "Expected Number or Identifier or LeftParen, found ArithmeticOperator ('*')"

    def test_eval_error(self) -> None:
        err = EvalError(EvalErrorKind.UNDEFINED_VARIABLE, Position(line=0, column=4), "y")
        assert str(err) == "0:4: Undefined variable 'y'"

    def test_config_error_without_position(self) -> None:
        err = ConfigError("bad config")
        assert str(err) == "bad config"
        assert err.position is None


class TestFormatError:
    def test_caret_under_column(self) -> None:
        source = "(5 - 4"
        rendered = format_error(_raised(source), source)
        assert rendered.split("\n") == [
            "ParseError at 0:6: Expected RightParen, found EndOfInput",
            "   0 | (5 - 4",
            "             ^",
        ]

    def test_second_line(self) -> None:
        source = "1 +\n @"
        rendered = format_error(_raised(source), source)
        assert rendered.split("\n") == [
            "LexError at 1:1: Unexpected character '@'",
            "   1 |  @",
            "        ^",
        ]

    def test_without_position(self) -> None:
        assert format_error(ConfigError("nope"), "") == "ConfigError: nope"

    def test_position_outside_source(self) -> None:
        err = EvalError(EvalErrorKind.UNDEFINED_VARIABLE, Position(line=5, column=0), "z")
        assert format_error(err, "z") == "EvalError at 5:0: Undefined variable 'z'"
