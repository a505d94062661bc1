"""Core exprcalc functionality: lexer, parse tree, parser, evaluator, graph export."""

from . import ir
from .errors import (
    ArithmeticOverflowError,
    CalcError,
    ConfigError,
    DivisionByZeroError,
    ErrorContext,
    EvalError,
    GraphExportError,
    LexerError,
    LiteralOverflowError,
    NegativeExponentError,
    ParserError,
)
from .evaluator import calculate, evaluate
from .lexer import Token, TokenKind, lex, scan
from .parser import parse, parse_expr

__all__ = [
    "ir",
    "ArithmeticOverflowError",
    "CalcError",
    "ConfigError",
    "DivisionByZeroError",
    "ErrorContext",
    "EvalError",
    "GraphExportError",
    "LexerError",
    "LiteralOverflowError",
    "NegativeExponentError",
    "ParserError",
    "Token",
    "TokenKind",
    "calculate",
    "evaluate",
    "lex",
    "parse",
    "parse_expr",
    "scan",
]
