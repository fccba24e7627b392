"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from plclang.lexer import tokenize
from plclang.parser import parse
from plclang.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def lex_pairs():
    """Return a helper that tokenizes source into (type, lexeme) pairs."""

    def _lex(source: str) -> list[tuple[TokenType, str]]:
        return [(t.type, t.lexeme) for t in tokenize(source)]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses a whole program."""

    def _parse(source: str):
        return parse(source, "source")

    return _parse


@pytest.fixture
def parse_stmt():
    """Return a helper that parses a single statement."""

    def _parse(source: str):
        return parse(source, "stmt")

    return _parse


@pytest.fixture
def parse_expr():
    """Return a helper that parses a single expression."""

    def _parse(source: str):
        return parse(source, "expr")

    return _parse
