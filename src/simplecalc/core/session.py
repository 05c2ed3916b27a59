"""
Evaluation sessions.

A Session owns one environment and runs the full pipeline
(tokenize → parse → evaluate) for each source string it is given.
Variables assigned by one call are visible to later calls on the same
session. Sessions are not thread-safe; give each thread its own.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from simplecalc.core.config import default_constants
from simplecalc.core.expression_lang.evaluator import Environment, Evaluator
from simplecalc.core.expression_lang.parser import parse_tokens
from simplecalc.core.expression_lang.tokenizer import Token, tokenize
from simplecalc.core.ir.expressions import Expr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionResult:
    """Output of every pipeline stage for one source string."""

    source: str
    tokens: list[Token]
    tree: Expr
    value: float


class Session:
    """Evaluate expressions against a persistent environment."""

    def __init__(self, constants: Mapping[str, float] | None = None) -> None:
        seed = default_constants() if constants is None else constants
        self.environment: Environment = {name: float(value) for name, value in seed.items()}
        self._evaluator = Evaluator(self.environment)

    def run(self, source: str) -> SessionResult:
        """Run the full pipeline on ``source``.

        Raises:
            LexError, ParseError, EvalError: At the first failing stage.
        """
        tokens = tokenize(source)
        tree = parse_tokens(tokens)
        value = self.evaluate(tree)
        logger.debug(f"Evaluated {source!r} -> {value!r}")
        return SessionResult(source=source, tokens=tokens, tree=tree, value=value)

    def evaluate(self, tree: Expr) -> float:
        """Evaluate an already parsed tree against this session's environment."""
        return self._evaluator.evaluate(tree)

    def calculate(self, source: str) -> float:
        return self.run(source).value


def calculate(source: str, environment: Environment | None = None) -> float:
    """Evaluate ``source`` once. Pass ``environment`` to read and keep assignments."""
    tree = parse_tokens(tokenize(source))
    return Evaluator(environment).evaluate(tree)
