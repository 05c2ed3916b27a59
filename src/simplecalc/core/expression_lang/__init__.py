"""
simplecalc expression language.

Tokenizer, parser, evaluator and renderer for single-line arithmetic,
comparison and assignment expressions.

Usage:
    from simplecalc.core.expression_lang import parse_expr, evaluate

    env = {}
    expr = parse_expr("x = 2 + 3 * 4")
    result = evaluate(expr, env)
    # result == 14.0, env == {"x": 14.0}
"""

from simplecalc.core.expression_lang.evaluator import Evaluator, evaluate
from simplecalc.core.expression_lang.parser import parse_expr, parse_tokens
from simplecalc.core.expression_lang.tokenizer import Lexer, Token, TokenKind, tokenize

__all__ = [
    "Evaluator",
    "Lexer",
    "Token",
    "TokenKind",
    "evaluate",
    "parse_expr",
    "parse_tokens",
    "tokenize",
]
