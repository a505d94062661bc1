"""
User-facing rendering of lexer and parser errors.

Reconstructs where in the input line an error happened and draws a caret
under it.
"""

from __future__ import annotations

from exprcalc.core.errors import ErrorContext, LexerError, ParserError
from exprcalc.core.lexer import scan


def error_column(err: LexerError | ParserError, source: str) -> int:
    """Return the 0-based column of the input character an error refers to."""
    if err.column is not None:
        return err.column

    # Parser errors refer to a token index; the source lexed cleanly, so
    # scanning it again recovers each token's column
    columns = [column for column, _ in scan(source)]
    if err.position < len(columns):
        return columns[err.position]
    return len(source)


def format_error(err: LexerError | ParserError, source: str) -> str:
    """
    Format an error with the input line and a position marker.

    Example:
        Token 3: Unexpected character '@'.
            2+@
            --^
    """
    context = ErrorContext(source=source, column=error_column(err, source))
    return f"Token {err.position}: {err.message}.\n{context.format()}"
