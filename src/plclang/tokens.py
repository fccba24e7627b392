"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    IDENTIFIER = auto()  # [A-Za-z_][A-Za-z0-9_-]*, keywords included
    INTEGER = auto()  # 5, -12, 3e4
    DECIMAL = auto()  # 5.31, +1.0e-2
    CHARACTER = auto()  # 'c', '\n'
    STRING = auto()  # "text"
    OPERATOR = auto()  # any other single character, or <= >= != ==


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its type and the exact source text it was built from.

    ``offset`` is where the lexeme starts in the source. It is kept for
    diagnostics only and does not take part in equality.
    """

    type: TokenType
    lexeme: str
    offset: int = field(default=0, compare=False)


def position_at(source: str, offset: int) -> Position:
    """Return the line/column position of *offset* within *source*."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)


# ----------------------------------------------------------------------
# Character classes used as CharCursor patterns
# ----------------------------------------------------------------------

CharPattern = str | Callable[[str], bool]

_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \b\n\r\t")


def is_letter(ch: str) -> bool:
    return ch in _ASCII_LETTERS


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def is_nonzero_digit(ch: str) -> bool:
    return ch in _DIGITS and ch != "0"


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier."""
    return is_letter(ch) or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_letter(ch) or is_digit(ch) or ch in "_-"


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE


def is_sign(ch: str) -> bool:
    return ch in "+-"


def is_exponent(ch: str) -> bool:
    return ch in "eE"


def any_char(ch: str) -> bool:
    return True


def one_of(chars: str) -> Callable[[str], bool]:
    """Return a predicate matching any single character in *chars*."""
    allowed = frozenset(chars)
    return lambda ch: ch in allowed


def none_of(chars: str) -> Callable[[str], bool]:
    """Return a predicate matching any single character not in *chars*."""
    excluded = frozenset(chars)
    return lambda ch: ch not in excluded
