"""Core simplecalc functionality: IR, FSM recognizers, lexer, parser, evaluator, sessions, config."""

from . import ir
from .config import CalcConfig, OutputConfig, load_config, resolve_config
from .errors import (
    CalcError,
    ConfigError,
    EvalError,
    EvalErrorKind,
    LexError,
    ParseError,
    format_error,
)
from .session import Session, SessionResult, calculate

__all__ = [
    "ir",
    "CalcConfig",
    "OutputConfig",
    "load_config",
    "resolve_config",
    "CalcError",
    "ConfigError",
    "EvalError",
    "EvalErrorKind",
    "LexError",
    "ParseError",
    "format_error",
    "Session",
    "SessionResult",
    "calculate",
]
