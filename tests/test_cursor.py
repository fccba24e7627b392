"""Tests for CharCursor and TokenCursor primitives."""

from __future__ import annotations

import pytest

from plclang.cursor import CharCursor, TokenCursor
from plclang.tokens import Token, TokenType, is_digit, is_letter, none_of


class TestCharCursorHas:
    def test_has_within_input(self):
        chars = CharCursor("ab")
        assert chars.has(0)
        assert chars.has(1)
        assert not chars.has(2)

    def test_empty_input(self):
        assert not CharCursor("").has(0)


class TestCharCursorPeek:
    def test_literal_pattern(self):
        chars = CharCursor("//x")
        assert chars.peek("/")
        assert chars.peek("/", "/")
        assert not chars.peek("/", "x")

    def test_predicate_pattern(self):
        chars = CharCursor("a1")
        assert chars.peek(is_letter, is_digit)
        assert not chars.peek(is_digit)

    def test_negated_class(self):
        chars = CharCursor("\n")
        assert not chars.peek(none_of("\n\r"))

    def test_peek_does_not_consume(self):
        chars = CharCursor("abc")
        chars.peek("a", "b")
        assert chars.index == 0

    def test_insufficient_input_is_false(self):
        chars = CharCursor("a")
        assert not chars.peek("a", "b")

    def test_multi_character_pattern_rejected(self):
        chars = CharCursor("//")
        with pytest.raises(ValueError, match="single character"):
            chars.peek("//")


class TestCharCursorMatchEmit:
    def test_match_advances(self):
        chars = CharCursor("abc")
        assert chars.match("a", "b")
        assert chars.index == 2

    def test_failed_match_does_not_advance(self):
        chars = CharCursor("abc")
        assert not chars.match("a", "x")
        assert chars.index == 0

    def test_emit_returns_matched_text(self):
        chars = CharCursor("let x")
        while chars.match(is_letter):
            pass
        assert chars.emit() == "let"

    def test_emit_resets_span(self):
        chars = CharCursor("ab")
        chars.match("a")
        assert chars.emit() == "a"
        assert chars.emit() == ""
        chars.match("b")
        assert chars.emit() == "b"
        assert chars.start == chars.index == 2


def _tokens() -> list[Token]:
    return [
        Token(TokenType.IDENTIFIER, "LET", 0),
        Token(TokenType.IDENTIFIER, "x", 4),
        Token(TokenType.OPERATOR, ";", 5),
    ]


class TestTokenCursor:
    def test_peek_by_type_and_literal(self):
        tokens = TokenCursor(_tokens())
        assert tokens.peek(TokenType.IDENTIFIER)
        assert tokens.peek("LET")
        assert tokens.peek("LET", TokenType.IDENTIFIER, ";")
        assert not tokens.peek(TokenType.OPERATOR)

    def test_peek_past_end(self):
        tokens = TokenCursor(_tokens())
        assert not tokens.peek("LET", "x", ";", ";")

    def test_match_and_get_previous(self):
        tokens = TokenCursor(_tokens())
        assert tokens.match("LET", TokenType.IDENTIFIER)
        assert tokens.get(-1).lexeme == "x"
        assert tokens.get(0).lexeme == ";"

    def test_get_out_of_range(self):
        tokens = TokenCursor(_tokens())
        with pytest.raises(IndexError):
            tokens.get(3)

    def test_next_token_at_end(self):
        tokens = TokenCursor(_tokens())
        tokens.match("LET", "x", ";")
        assert not tokens.has(0)
        assert tokens.next_token() is None

    def test_invalid_pattern_type(self):
        tokens = TokenCursor(_tokens())
        with pytest.raises(TypeError):
            tokens.peek(42)
