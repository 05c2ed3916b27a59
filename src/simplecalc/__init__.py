"""
simplecalc - a positional lexer, recursive-descent parser and evaluator
for single-line arithmetic, comparison and assignment expressions.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import ir
from .core.errors import CalcError, ConfigError, EvalError, LexError, ParseError
from .core.expression_lang import evaluate, parse_expr, tokenize
from .core.session import Session, SessionResult, calculate


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("simplecalc")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "ConfigError",
    "EvalError",
    "LexError",
    "ParseError",
    "Session",
    "SessionResult",
    "calculate",
    "evaluate",
    "parse_expr",
    "tokenize",
]
