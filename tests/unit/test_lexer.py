"""Tests for the exprcalc lexer."""

from __future__ import annotations

import pytest

from exprcalc.core.errors import LexerError, LiteralOverflowError
from exprcalc.core.lexer import INT64_MAX, Token, TokenKind, lex, scan


class TestLexer:
    """Lexer produces correct token sequences."""

    def test_integer(self) -> None:
        tokens = lex("42")
        assert tokens == [Token(TokenKind.NUMBER, 42)]

    def test_digit_run_is_one_token(self) -> None:
        tokens = lex("18290")
        assert len(tokens) == 1
        assert tokens[0].value == 18290

    def test_operators(self) -> None:
        tokens = lex("+-%*/^()")
        assert [t.kind for t in tokens] == [
            TokenKind.ADD,
            TokenKind.SUB,
            TokenKind.MOD,
            TokenKind.MULT,
            TokenKind.DIV,
            TokenKind.EXP,
            TokenKind.LPAREN,
            TokenKind.RPAREN,
        ]

    def test_operator_tokens_have_no_value(self) -> None:
        assert all(t.value is None for t in lex("+-%*/^()"))

    def test_complex_expression(self) -> None:
        tokens = lex("(18+29) / 50*611+ 41^12")
        assert [str(t) for t in tokens] == [
            "(", "18", "+", "29", ")", "/", "50", "*", "611", "+", "41", "^", "12",
        ]

    def test_whitespace_insensitive(self) -> None:
        assert lex("1 + 2") == lex("1+2")
        assert lex("  ( 3 *4 )  ") == lex("(3*4)")

    def test_empty_input(self) -> None:
        assert lex("") == []
        assert lex("   ") == []

    def test_leading_zeros(self) -> None:
        assert lex("007") == [Token.number(7)]

    def test_largest_literal(self) -> None:
        assert lex(str(INT64_MAX)) == [Token.number(INT64_MAX)]

    def test_tokens_are_immutable(self) -> None:
        tok = lex("1")[0]
        with pytest.raises(AttributeError):
            tok.value = 2  # type: ignore[misc]

    def test_token_str(self) -> None:
        assert str(Token(TokenKind.EXP)) == "^"
        assert str(Token.number(12)) == "12"
        assert Token.number(12).width == 2

    def test_number_token_requires_value(self) -> None:
        with pytest.raises(ValueError, match="needs a value"):
            Token(TokenKind.NUMBER)

    def test_operator_token_rejects_value(self) -> None:
        with pytest.raises(ValueError, match="carries no value"):
            Token(TokenKind.ADD, 1)


class TestLexerErrors:
    """Lexer stops at the first bad character."""

    def test_unexpected_character(self) -> None:
        with pytest.raises(LexerError, match="Unexpected character '@'") as exc_info:
            lex("2+@")
        err = exc_info.value
        assert err.position == 3
        assert err.column == 2
        assert err.tokens == [Token.number(2), Token(TokenKind.ADD)]

    def test_position_counts_scan_steps(self) -> None:
        # "12" is one step, each space is one step
        with pytest.raises(LexerError) as exc_info:
            lex("12 + x")
        assert exc_info.value.position == 5
        assert exc_info.value.column == 5

    def test_stops_at_first_fault(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            lex("1+a+b")
        assert exc_info.value.message == "Unexpected character 'a'"
        assert len(exc_info.value.tokens) == 2

    def test_tab_is_rejected(self) -> None:
        with pytest.raises(LexerError):
            lex("1\t+2")

    def test_non_ascii_digit_is_rejected(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            lex("1+٣")
        assert exc_info.value.position == 3

    def test_multibyte_character_position(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            lex("é+1")
        assert exc_info.value.position == 1
        assert exc_info.value.tokens == []

    def test_literal_overflow(self) -> None:
        with pytest.raises(LiteralOverflowError, match="does not fit") as exc_info:
            lex(f"1+{INT64_MAX + 1}")
        err = exc_info.value
        assert isinstance(err, LexerError)
        assert err.position == 3
        assert err.tokens == [Token.number(1), Token(TokenKind.ADD)]


class TestScan:
    """scan() reports each token's column."""

    def test_columns(self) -> None:
        assert [(col, str(tok)) for col, tok in scan(" 12 *(3)")] == [
            (1, "12"),
            (4, "*"),
            (5, "("),
            (6, "3"),
            (7, ")"),
        ]
