"""
Expression evaluator for the simplecalc expression language.

Evaluates expression AST nodes against an environment (dict of variable
values). Assignment is the only side effect: it writes to the
environment. Does NOT use Python's eval().
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Callable

from simplecalc.core.errors import EvalError, EvalErrorKind
from simplecalc.core.ir.expressions import (
    Assignment,
    BinaryExpr,
    BinaryOp,
    Expr,
    Identifier,
    NumberLiteral,
)

logger = logging.getLogger(__name__)

Environment = dict[str, float]


def _divide(left: float, right: float) -> float:
    """IEEE 754 division: x/0 is a signed infinity, 0/0 is NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _equal(left: float, right: float) -> bool:
    return left == right or abs(left - right) < sys.float_info.epsilon


_ARITHMETIC: dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.ADD: lambda a, b: a + b,
    BinaryOp.SUB: lambda a, b: a - b,
    BinaryOp.MUL: lambda a, b: a * b,
    BinaryOp.DIV: _divide,
}

_COMPARISON: dict[BinaryOp, Callable[[float, float], bool]] = {
    BinaryOp.EQ: _equal,
    BinaryOp.LT: lambda a, b: a < b,
    BinaryOp.LE: lambda a, b: a <= b,
    BinaryOp.GT: lambda a, b: a > b,
    BinaryOp.GE: lambda a, b: a >= b,
}


def _apply(op: BinaryOp, left: float, right: float) -> float:
    if op in _COMPARISON:
        return 1.0 if _COMPARISON[op](left, right) else 0.0
    return _ARITHMETIC[op](left, right)


class Evaluator:
    """Tree-walking interpreter bound to one environment."""

    def __init__(self, environment: Environment | None = None) -> None:
        self.environment: Environment = environment if environment is not None else {}

    def evaluate(self, expr: Expr) -> float:
        """Dispatch evaluation to the appropriate handler."""
        if isinstance(expr, NumberLiteral):
            return expr.value

        if isinstance(expr, Identifier):
            return self._lookup(expr)

        if isinstance(expr, BinaryExpr):
            return self._evaluate_binary(expr)

        if isinstance(expr, Assignment):
            return self._assign(expr)

        raise EvalError(
            EvalErrorKind.UNSUPPORTED_EXPRESSION,
            getattr(expr, "position", None),
            type(expr).__name__,
        )

    def _lookup(self, expr: Identifier) -> float:
        if expr.name not in self.environment:
            raise EvalError(EvalErrorKind.UNDEFINED_VARIABLE, expr.position, expr.name)
        return self.environment[expr.name]

    def _evaluate_binary(self, expr: BinaryExpr) -> float:
        # Chains like "1 + 2 + ... + n" nest to the left; fold that spine in a loop
        spine = [expr]
        while isinstance(spine[-1].left, BinaryExpr):
            spine.append(spine[-1].left)

        result = self.evaluate(spine[-1].left)
        for node in reversed(spine):
            result = _apply(node.op, result, self.evaluate(node.right))
        return result

    def _assign(self, expr: Assignment) -> float:
        value = self.evaluate(expr.value)
        self.environment[expr.name] = value
        logger.debug(f"Assigned {expr.name} = {value!r}")
        return value


def evaluate(expr: Expr, environment: Environment | None = None) -> float:
    """Evaluate an expression against an environment.

    Args:
        expr: Parsed expression AST.
        environment: Variable name -> value. Updated in place by assignment.

    Returns:
        The computed value. Comparisons yield 1.0 or 0.0.

    Raises:
        EvalError: If a variable is undefined.
    """
    return Evaluator(environment).evaluate(expr)
