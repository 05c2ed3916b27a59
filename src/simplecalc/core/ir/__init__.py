"""
simplecalc Intermediate Representation (IR) types.

Positions and expression AST nodes shared by the lexer, parser,
evaluator and renderer.
"""

from .expressions import (
    Assignment,
    BinaryExpr,
    BinaryOp,
    Expr,
    Identifier,
    NumberLiteral,
)
from .location import Position

__all__ = [
    "Assignment",
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Identifier",
    "NumberLiteral",
    "Position",
]
