"""
Lexer for exprcalc arithmetic expressions.

Converts an expression string into a flat sequence of tokens.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from exprcalc.core.errors import LexerError, LiteralOverflowError

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Operators
    ADD = auto()
    SUB = auto()
    MOD = auto()
    MULT = auto()
    DIV = auto()
    EXP = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Literals
    NUMBER = auto()


_SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "%": TokenKind.MOD,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "^": TokenKind.EXP,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_TEXT: dict[TokenKind, str] = {kind: symbol for symbol, kind in _SYMBOLS.items()}

_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class Token:
    """A single token. ``value`` is set for NUMBER tokens only."""

    kind: TokenKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind == TokenKind.NUMBER and self.value is None:
            raise ValueError("a NUMBER token needs a value")
        if self.kind != TokenKind.NUMBER and self.value is not None:
            raise ValueError(f"a {self.kind.name} token carries no value")

    @classmethod
    def number(cls, value: int) -> Token:
        return cls(TokenKind.NUMBER, value)

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return str(self.value)
        return _TEXT[self.kind]

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind}, {self.value})"
        return f"Token({self.kind})"

    @property
    def width(self) -> int:
        """Number of source characters this token was read from."""
        return len(str(self))


def scan(source: str) -> Iterator[tuple[int, Token]]:
    """Yield ``(column, token)`` pairs, left to right.

    Raises:
        LexerError: On the first character that starts no token.
        LiteralOverflowError: On an integer literal outside the 64-bit range.
    """
    produced: list[Token] = []
    step = 0
    i = 0
    n = len(source)

    while i < n:
        c = source[i]
        step += 1

        if c == " ":
            i += 1
            continue

        # Digit runs are consumed greedily; str.isdigit() would accept
        # non-ASCII digits, so match ASCII explicitly
        if "0" <= c <= "9":
            m = _NUMBER_RE.match(source, i)
            assert m is not None
            value = int(m.group(0))
            if value > INT64_MAX:
                raise LiteralOverflowError(
                    f"Integer literal {m.group(0)} does not fit in 64 bits",
                    step,
                    produced,
                    i,
                )
            tok = Token.number(value)
            produced.append(tok)
            yield i, tok
            i = m.end()
            continue

        kind = _SYMBOLS.get(c)
        if kind is None:
            raise LexerError(f"Unexpected character {c!r}", step, produced, i)

        tok = Token(kind)
        produced.append(tok)
        yield i, tok
        i += 1


def lex(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Args:
        source: Expression string (e.g., "(2+3)*4")

    Returns:
        The tokens in source order. Spaces produce no token.

    Raises:
        LexerError: If the input contains an unexpected character.
    """
    tokens = [tok for _, tok in scan(source)]
    logger.debug("Lexed %d token(s) from %r", len(tokens), source)
    return tokens
