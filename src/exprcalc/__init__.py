"""
exprcalc - integer arithmetic expression parser and evaluator.

Usage:
    from exprcalc import lex, parse, evaluate

    tree = parse(lex("(2+3)*4"))
    result = evaluate(tree)
    # result == 20
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import CalcError, EvalError, LexerError, ParserError
from .core.evaluator import calculate, evaluate
from .core.lexer import lex
from .core.parser import parse, parse_expr

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "EvalError",
    "LexerError",
    "ParserError",
    "calculate",
    "evaluate",
    "lex",
    "parse",
    "parse_expr",
]
