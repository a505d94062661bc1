"""
Recursive descent parser for exprcalc arithmetic expressions.

Grammar (precedence low to high):
    expression  → term (("+" | "-" | "%") term)*
    term        → factor (("*" | "/") factor)*
    factor      → exponent ("^" factor)?
    exponent    → NUMBER | "(" expression ")"

All binary operators are left-associative except "^", which is
right-associative. One token of lookahead, no backtracking.

Each "(" and each "^" opens one nesting level. Parsing recurses once per
level, so nesting beyond MAX_NESTING is rejected with a ParserError rather
than running into the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from exprcalc.core.errors import LexerError, ParserError
from exprcalc.core.ir import Operator, ParseNode, branch, leaf, paren
from exprcalc.core.lexer import Token, TokenKind, lex

logger = logging.getLogger(__name__)

MAX_NESTING = 200

_EXPRESSION_OPS: dict[TokenKind, Operator] = {
    TokenKind.ADD: Operator.SUM,
    TokenKind.SUB: Operator.SUB,
    TokenKind.MOD: Operator.MOD,
}

_TERM_OPS: dict[TokenKind, Operator] = {
    TokenKind.MULT: Operator.MULT,
    TokenKind.DIV: Operator.DIV,
}


def _describe(tok: Token | None) -> str:
    if tok is None:
        return "end of input"
    return repr(str(tok))


class _Parser:
    """Recursive descent parser over a token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.pos = 0
        self.nesting = 0

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def error(self, message: str) -> ParserError:
        return ParserError(message, self.pos, self.tokens)

    def enter(self) -> None:
        self.nesting += 1
        if self.nesting > MAX_NESTING:
            raise self.error(f"Expression nested too deeply (more than {MAX_NESTING} levels)")

    def leave(self) -> None:
        self.nesting -= 1

    def expect(self, kind: TokenKind, text: str) -> Token:
        tok = self.current
        if tok is None or tok.kind != kind:
            raise self.error(f"Expected {text!r}, found {_describe(tok)}")
        return self.advance()

    def match(self, ops: dict[TokenKind, Operator]) -> Operator | None:
        tok = self.current
        if tok is not None and tok.kind in ops:
            self.advance()
            return ops[tok.kind]
        return None

    # -- Grammar rules --

    def parse_expression(self) -> ParseNode:
        """term (('+' | '-' | '%') term)*"""
        left = self.parse_term()
        while (op := self.match(_EXPRESSION_OPS)) is not None:
            right = self.parse_term()
            # Fold into a new root so the chain groups left to right
            left = branch(op, left, right)
        return left

    def parse_term(self) -> ParseNode:
        """factor (('*' | '/') factor)*"""
        left = self.parse_factor()
        while (op := self.match(_TERM_OPS)) is not None:
            right = self.parse_factor()
            left = branch(op, left, right)
        return left

    def parse_factor(self) -> ParseNode:
        """exponent ('^' factor)?"""
        base = self.parse_exponent()
        tok = self.current
        if tok is not None and tok.kind == TokenKind.EXP:
            self.enter()
            self.advance()
            power = self.parse_factor()
            self.leave()
            return branch(Operator.EXP, base, power)
        return base

    def parse_exponent(self) -> ParseNode:
        """NUMBER | '(' expression ')'"""
        tok = self.current

        if tok is None:
            raise self.error("Unexpected end of input")

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            assert tok.value is not None
            return leaf(tok.value)

        if tok.kind == TokenKind.LPAREN:
            self.enter()
            self.advance()
            inner = self.parse_expression()
            self.expect(TokenKind.RPAREN, ")")
            self.leave()
            return paren(inner)

        raise self.error(f"Unexpected token {_describe(tok)}")


def parse(tokens: Sequence[Token]) -> ParseNode:
    """Parse a token sequence into a tree.

    Args:
        tokens: Output of :func:`exprcalc.core.lexer.lex`.

    Returns:
        Root of the parsed tree.

    Raises:
        ParserError: If the tokens do not form exactly one expression.
    """
    parser = _Parser(tokens)
    node = parser.parse_expression()

    # Ensure all tokens consumed
    if not parser.at_end:
        raise parser.error(f"Expected end of input, found {_describe(parser.current)}")

    logger.debug("Parsed %d token(s) into a tree of depth %d", len(parser.tokens), node.depth)
    return node


def parse_expr(source: str) -> ParseNode:
    """Lex and parse an expression string.

    A lexer failure is re-raised as a ``ParserError`` carrying the same
    message, position, and partial token sequence.

    Raises:
        ParserError: If the expression is invalid.
    """
    try:
        tokens = lex(source)
    except LexerError as e:
        raise ParserError.from_lexer_error(e) from e
    return parse(tokens)
