"""plclang lexer: converts source text into a flat token stream.

:meth:`Lexer.lex` skips whitespace and ``//`` comments and otherwise calls
:meth:`Lexer._lex_token`, which picks the token kind from the next one or two
characters and delegates to the matching scanner. Scanners work through the
:class:`~plclang.cursor.CharCursor` ``peek``/``match`` primitives and finish
with ``emit()``, so every lexeme is exactly the text that was consumed.
"""

from __future__ import annotations

from plclang.cursor import CharCursor
from plclang.errors import LexError
from plclang.tokens import (
    Token,
    TokenType,
    any_char,
    is_digit,
    is_exponent,
    is_ident_char,
    is_ident_start,
    is_nonzero_digit,
    is_sign,
    is_whitespace,
    none_of,
    one_of,
)

_ESCAPABLE = one_of("bnrt'\"\\")
_CHARACTER_BODY = none_of("'\n\r")
_STRING_BODY = none_of("\n\r")
_NOT_NEWLINE = none_of("\n\r")
_COMPARISON_START = one_of("<>!=")


class Lexer:
    """Tokenize plclang source text into a list of Token objects."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._chars = CharCursor(source)

    def lex(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        tokens: list[Token] = []
        while self._chars.has(0):
            if self._chars.peek(is_whitespace):
                self._lex_whitespace()
            elif self._chars.peek("/", "/"):
                self._lex_comment()
            else:
                tokens.append(self._lex_token())
        return tokens

    def _error(self, message: str, offset: int | None = None) -> LexError:
        if offset is None:
            offset = self._chars.index
        return LexError(message, offset, self._source)

    def _token(self, tt: TokenType) -> Token:
        start = self._chars.start
        return Token(tt, self._chars.emit(), start)

    # ------------------------------------------------------------------
    # Skipped spans
    # ------------------------------------------------------------------

    def _lex_whitespace(self) -> None:
        while self._chars.match(is_whitespace):
            pass
        self._chars.emit()

    def _lex_comment(self) -> None:
        self._chars.match("/", "/")
        while self._chars.match(_NOT_NEWLINE):
            pass
        self._chars.emit()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_token(self) -> Token:
        chars = self._chars
        if chars.peek(is_ident_start):
            return self._lex_identifier()
        if chars.peek(is_nonzero_digit) or chars.peek(is_sign, is_nonzero_digit):
            return self._lex_number()
        if self._at_lone_zero():
            return self._lex_number()
        if chars.peek("'"):
            return self._lex_character()
        if chars.peek('"'):
            return self._lex_string()
        return self._lex_operator()

    def _at_lone_zero(self) -> bool:
        """A zero integer part is only valid as the single digit ``0``."""
        chars = self._chars
        if chars.peek("0"):
            return not chars.peek("0", is_digit)
        if chars.peek(is_sign, "0"):
            return not chars.peek(is_sign, "0", is_digit)
        return False

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _lex_identifier(self) -> Token:
        self._chars.match(is_ident_start)
        while self._chars.match(is_ident_char):
            pass
        return self._token(TokenType.IDENTIFIER)

    def _lex_number(self) -> Token:
        chars = self._chars
        chars.match(is_sign)
        if not chars.match("0"):
            chars.match(is_nonzero_digit)
            while chars.match(is_digit):
                pass

        tt = TokenType.INTEGER
        if chars.match(".", is_digit):
            tt = TokenType.DECIMAL
            while chars.match(is_digit):
                pass

        # The exponent is only taken when at least one digit follows it
        if chars.match(is_exponent, is_sign, is_digit) or chars.match(is_exponent, is_digit):
            while chars.match(is_digit):
                pass

        return self._token(tt)

    def _lex_character(self) -> Token:
        chars = self._chars
        chars.match("'")
        if chars.peek("\\"):
            self._lex_escape()
        elif not chars.match(_CHARACTER_BODY):
            raise self._error("invalid character literal")

        if not chars.match("'"):
            raise self._error("unterminated character literal")
        return self._token(TokenType.CHARACTER)

    def _lex_string(self) -> Token:
        chars = self._chars
        chars.match('"')
        while not chars.match('"'):
            if chars.peek("\\"):
                self._lex_escape()
            elif not chars.match(_STRING_BODY):
                # End of input or a raw line break
                raise self._error("unterminated string literal")
        return self._token(TokenType.STRING)

    def _lex_escape(self) -> None:
        self._chars.match("\\")
        if not self._chars.match(_ESCAPABLE):
            raise self._error("invalid escape sequence")

    def _lex_operator(self) -> Token:
        if not self._chars.match(_COMPARISON_START, "="):
            self._chars.match(any_char)
        return self._token(TokenType.OPERATOR)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).lex()
