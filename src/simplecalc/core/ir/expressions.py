"""
Expression types for the simplecalc IR.

This module defines the typed expression AST produced by the parser and
consumed by the evaluator.

Supports:
- Number literals: 42, 3.14, 5e-9
- Identifiers: x, total_2, _tmp
- Arithmetic: +, -, *, /
- Comparison: ==, <, <=, >, >=
- Assignment: name = expr (outermost form only)
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from simplecalc.core.ir.location import Position

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    # Comparison
    EQ = "=="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @property
    def is_comparison(self) -> bool:
        return self in _COMPARISON_OPS


_COMPARISON_OPS = frozenset({BinaryOp.EQ, BinaryOp.LT, BinaryOp.LE, BinaryOp.GT, BinaryOp.GE})


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")
    position: Position = Field(default_factory=Position)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class Identifier(BaseModel):
    """Reference to a variable in the environment."""

    name: str = Field(description="Variable name")
    position: Position = Field(default_factory=Position)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class BinaryExpr(BaseModel):
    """Binary operation: left op right. Positioned at the operator."""

    op: BinaryOp
    left: Expr
    right: Expr
    position: Position = Field(default_factory=Position)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class Assignment(BaseModel):
    """
    Assignment: name = value.

    Positioned at the assigned identifier. Only ever the root of a tree.
    """

    name: str = Field(description="Variable being assigned")
    position: Position = Field(default_factory=Position)
    value: Expr = Field(description="Right-hand side")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name} = {self.value}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLiteral | Identifier | BinaryExpr | Assignment

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
Assignment.model_rebuild()
