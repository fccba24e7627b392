"""plclang: lexer and recursive descent parser for the PLC scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plclang.ast import Expr, Source, Stmt
    from plclang.parser import Rule
    from plclang.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str) -> list[Token]:
    """Lex source text into tokens, discarding whitespace and comments."""
    from plclang.lexer import tokenize as _tokenize

    return _tokenize(source)


def parse(source: str, rule: Rule | str = "source") -> Source | Stmt | Expr:
    """Lex and parse source text with the given entry rule (source, stmt or expr)."""
    from plclang.parser import parse as _parse

    return _parse(source, rule)
