"""
Text renderings of tokens, expression trees, and results.

Used by the CLI to show each pipeline stage:

    <Identifier(x), 0:0> <AssignOperator(=), 0:2> <Number(2), 0:4> <EndOfInput, 0:5>

    Assignment(x) [0:0]
      Number(2) [0:4]
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from simplecalc.core.expression_lang.tokenizer import Token, TokenKind
from simplecalc.core.ir.expressions import (
    Assignment,
    BinaryExpr,
    Expr,
    Identifier,
    NumberLiteral,
)

INDENT = "  "


def format_number(value: float) -> str:
    """Render integral floats without a trailing ``.0``."""
    if value.is_integer() and abs(value) < 1e16:
        if value == 0.0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def render_token(token: Token) -> str:
    if token.kind == TokenKind.END_OF_INPUT:
        return f"<{token.kind}, {token.position}>"
    return f"<{token.kind}({token.lexeme}), {token.position}>"


def render_tokens(tokens: Iterable[Token]) -> str:
    return " ".join(render_token(token) for token in tokens)


def _label(expr: Expr) -> tuple[str, list[Expr]]:
    if isinstance(expr, NumberLiteral):
        return f"Number({format_number(expr.value)})", []
    if isinstance(expr, Identifier):
        return f"Identifier({expr.name})", []
    if isinstance(expr, BinaryExpr):
        return f"BinaryOp({expr.op.value})", [expr.left, expr.right]
    if isinstance(expr, Assignment):
        return f"Assignment({expr.name})", [expr.value]
    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def render_tree(expr: Expr) -> str:
    """Render an AST as an indented tree, one node per line."""
    lines: list[str] = []
    stack: list[tuple[Expr, int]] = [(expr, 0)]
    while stack:
        node, depth = stack.pop()
        label, children = _label(node)
        lines.append(f"{INDENT * depth}{label} [{node.position}]")
        stack.extend((child, depth + 1) for child in reversed(children))
    return "\n".join(lines)
