"""
Recursive descent parser for the simplecalc expression language.

Grammar (precedence low to high):
    expr        → IDENT "=" comparison | comparison
    comparison  → addition (("==" | "<" | "<=" | ">" | ">=") addition)*
    addition    → multiply (("+" | "-") multiply)*
    multiply    → primary (("*" | "/") primary)*
    primary     → NUMBER | IDENT | "(" comparison ")"

Every binary level is left-associative, including comparison:
``1 < 2 < 3`` parses as ``(1 < 2) < 3``.

Binary chains are built with loops, so only parentheses add recursion
depth. Groups nested deeper than MAX_NESTING_DEPTH are a ParseError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from simplecalc.core.errors import ParseError
from simplecalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from simplecalc.core.ir.expressions import (
    Assignment,
    BinaryExpr,
    BinaryOp,
    Expr,
    Identifier,
    NumberLiteral,
)

logger = logging.getLogger(__name__)

_ADDITIVE = frozenset({BinaryOp.ADD, BinaryOp.SUB})
_MULTIPLICATIVE = frozenset({BinaryOp.MUL, BinaryOp.DIV})
MAX_NESTING_DEPTH = 100

_PRIMARY_START = (TokenKind.NUMBER, TokenKind.IDENTIFIER, TokenKind.LEFT_PAREN)


class _Parser:
    """Recursive descent parser for expressions."""

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.END_OF_INPUT:
            raise ValueError("token sequence must end with an EndOfInput token")
        self.tokens = tokens
        self.pos = 0
        self.depth = 0  # open parentheses

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int = 0) -> Token:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return self.tokens[-1]  # EndOfInput

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, *kinds: TokenKind) -> Token:
        tok = self.current
        if tok.kind not in kinds:
            raise ParseError(tok.position, kinds, tok)
        return self.advance()

    def match_op(self, kind: TokenKind, ops: frozenset[BinaryOp]) -> Token | None:
        """Consume the current token if it is one of ``ops`` of the given kind."""
        tok = self.current
        if tok.kind == kind and BinaryOp(tok.lexeme) in ops:
            return self.advance()
        return None

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """Top-level: assignment or comparison."""
        if self.current.kind == TokenKind.IDENTIFIER and self.peek(1).kind == TokenKind.ASSIGN_OPERATOR:
            return self.parse_assignment()
        return self.parse_comparison()

    def parse_assignment(self) -> Assignment:
        """IDENT '=' comparison"""
        name_tok = self.expect(TokenKind.IDENTIFIER)
        self.expect(TokenKind.ASSIGN_OPERATOR)
        value = self.parse_comparison()
        return Assignment(name=name_tok.lexeme, position=name_tok.position, value=value)

    def parse_comparison(self) -> Expr:
        """addition (comp_op addition)*"""
        left = self.parse_addition()
        while self.current.kind == TokenKind.COMPARISON_OPERATOR:
            op_tok = self.advance()
            right = self.parse_addition()
            left = BinaryExpr(
                op=BinaryOp(op_tok.lexeme), left=left, right=right, position=op_tok.position
            )
        return left

    def parse_addition(self) -> Expr:
        """multiply (('+' | '-') multiply)*"""
        left = self.parse_multiply()
        while op_tok := self.match_op(TokenKind.ARITHMETIC_OPERATOR, _ADDITIVE):
            right = self.parse_multiply()
            left = BinaryExpr(
                op=BinaryOp(op_tok.lexeme), left=left, right=right, position=op_tok.position
            )
        return left

    def parse_multiply(self) -> Expr:
        """primary (('*' | '/') primary)*"""
        left = self.parse_primary()
        while op_tok := self.match_op(TokenKind.ARITHMETIC_OPERATOR, _MULTIPLICATIVE):
            right = self.parse_primary()
            left = BinaryExpr(
                op=BinaryOp(op_tok.lexeme), left=left, right=right, position=op_tok.position
            )
        return left

    def parse_primary(self) -> Expr:
        """NUMBER | IDENT | '(' comparison ')'"""
        tok = self.current

        # Parenthesized expression
        if tok.kind == TokenKind.LEFT_PAREN:
            if self.depth >= MAX_NESTING_DEPTH:
                raise ParseError(
                    tok.position,
                    _PRIMARY_START,
                    tok,
                    f"Parentheses nested deeper than {MAX_NESTING_DEPTH} levels",
                )
            self.advance()
            self.depth += 1
            expr = self.parse_comparison()
            self.expect(TokenKind.RIGHT_PAREN)
            self.depth -= 1
            return expr

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            assert tok.number is not None
            return NumberLiteral(value=tok.number, position=tok.position)

        if tok.kind == TokenKind.IDENTIFIER:
            self.advance()
            return Identifier(name=tok.lexeme, position=tok.position)

        raise ParseError(tok.position, _PRIMARY_START, tok)


def parse_tokens(tokens: Iterable[Token]) -> Expr:
    """Parse a token sequence ending in EndOfInput into an AST.

    Raises:
        ParseError: If the tokens do not form exactly one expression.
    """
    parser = _Parser(list(tokens))
    expr = parser.parse_expr()

    # Ensure all tokens consumed
    parser.expect(TokenKind.END_OF_INPUT)

    logger.debug(f"Parsed {len(parser.tokens)} tokens into {type(expr).__name__}")
    return expr


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "x = 2 + 3 * 4")

    Returns:
        Parsed expression AST.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the expression is invalid.
    """
    return parse_tokens(tokenize(source))
