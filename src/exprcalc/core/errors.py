"""
Error types for exprcalc lexing, parsing, and evaluation.

The three failure families are kept apart: a ``LexerError`` is never a
``ParserError`` and neither is an ``EvalError``. They share ``CalcError`` as a
common base so callers can catch everything the pipeline raises in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from exprcalc.core.ir import Operator

if TYPE_CHECKING:
    from exprcalc.core.ir import ParseNode
    from exprcalc.core.lexer import Token


class CalcError(Exception):
    """Base exception for all exprcalc errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class LexerError(CalcError):
    """
    Raised when the input contains a character that starts no token.

    Attributes:
        position: 1-based scan step of the offending character
        tokens: Tokens produced before the fault
        column: 0-based character offset of the offending character
    """

    def __init__(
        self,
        message: str,
        position: int,
        tokens: list[Token],
        column: int,
        context: ErrorContext | None = None,
    ):
        self.position = position
        self.tokens = list(tokens)
        self.column = column
        super().__init__(message, context)


class LiteralOverflowError(LexerError):
    """Raised when an integer literal does not fit in a signed 64-bit integer."""

    pass


class ParserError(CalcError):
    """
    Raised when a token sequence does not form an expression.

    Examples:
    - Unexpected token
    - Unexpected end of input
    - Unbalanced parentheses
    - Trailing input after a complete expression

    When the failure originated in the lexer, ``tokens`` holds the lexer's
    partial token sequence and ``column`` the offending character's offset.
    """

    def __init__(
        self,
        message: str,
        position: int,
        tokens: list[Token],
        column: int | None = None,
        from_lexer: bool = False,
        context: ErrorContext | None = None,
    ):
        self.position = position
        self.tokens = list(tokens)
        self.column = column
        self.from_lexer = from_lexer
        super().__init__(message, context)

    @classmethod
    def from_lexer_error(cls, err: LexerError) -> ParserError:
        """Carry a lexer failure over unchanged as a parser failure."""
        return cls(
            err.message,
            err.position,
            err.tokens,
            column=err.column,
            from_lexer=True,
            context=err.context,
        )


class EvalError(CalcError):
    """
    Raised when a well-formed tree cannot be reduced to an integer.

    Attributes:
        node: The branch whose operator failed
    """

    def __init__(self, message: str, node: ParseNode | None = None):
        self.node = node
        super().__init__(message)


class DivisionByZeroError(EvalError):
    """Raised for ``/`` or ``%`` with a zero right operand."""

    def __init__(self, op: Operator, node: ParseNode | None = None):
        self.op = op
        label = "Modulo" if op == Operator.MOD else "Division"
        super().__init__(f"{label} by zero", node)


class ArithmeticOverflowError(EvalError):
    """Raised when a result leaves the signed 64-bit range."""

    pass


class NegativeExponentError(EvalError):
    """Raised for ``^`` with a negative exponent."""

    pass


class ConfigError(CalcError):
    """Raised when a configuration file cannot be loaded."""

    pass


class GraphExportError(CalcError):
    """Raised when the tree graph cannot be written or rendered."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error within a single line of input.

    Attributes:
        source: The input line the error refers to
        column: Column number (0-indexed) of the fault
    """

    source: str
    column: int

    def format(self, indent: str = "    ") -> str:
        """
        Format the input line with a caret under the faulting column.

        Returns:
            The input line and a caret line below it, e.g. "2+@" over "--^"
        """
        column = max(0, min(self.column, len(self.source)))
        return f"{indent}{self.source}\n{indent}{'-' * column}^"
