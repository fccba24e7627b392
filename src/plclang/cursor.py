"""Cursors over characters and tokens, with non-consuming peek and consuming match."""

from __future__ import annotations

from collections.abc import Sequence

from plclang.tokens import CharPattern, Token, TokenType

TokenPattern = TokenType | str


def _char_matches(pattern: CharPattern, ch: str) -> bool:
    if isinstance(pattern, str):
        if len(pattern) != 1:
            raise ValueError(f"character pattern must be a single character: {pattern!r}")
        return ch == pattern
    return pattern(ch)


class CharCursor:
    """Position-tracked view over source text.

    Characters matched since the last :meth:`emit` lie between ``start`` and
    ``index``; ``emit`` returns that slice and moves ``start`` up to ``index``.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0
        self.start = 0

    def has(self, offset: int = 0) -> bool:
        """Return True if a character exists at index + offset."""
        return 0 <= self.index + offset < len(self.source)

    def peek(self, *patterns: CharPattern) -> bool:
        """Return True if the next characters match their patterns, one pattern per character."""
        if not self.has(len(patterns) - 1):
            return False
        for offset, pattern in enumerate(patterns):
            if not _char_matches(pattern, self.source[self.index + offset]):
                return False
        return True

    def match(self, *patterns: CharPattern) -> bool:
        """Equivalent to peek, but also advances past the matched characters."""
        if not self.peek(*patterns):
            return False
        self.index += len(patterns)
        return True

    def emit(self) -> str:
        """Return the text matched since the last emit and start a new span."""
        text = self.source[self.start : self.index]
        self.start = self.index
        return text


class TokenCursor:
    """Position-tracked view over a token sequence.

    A pattern is either a :class:`TokenType`, matching tokens of that type, or
    a ``str``, matching tokens with that exact lexeme. ``Token(IDENTIFIER,
    "LET")`` is matched by both ``IDENTIFIER`` and ``"LET"``.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self.index = 0

    def has(self, offset: int = 0) -> bool:
        """Return True if there is a token at index + offset."""
        return 0 <= self.index + offset < len(self._tokens)

    def get(self, offset: int = 0) -> Token:
        """Return the token at index + offset."""
        if not self.has(offset):
            raise IndexError(f"no token at offset {offset} from index {self.index}")
        return self._tokens[self.index + offset]

    def next_token(self) -> Token | None:
        """Return the next token, or None at end of input."""
        return self._tokens[self.index] if self.has(0) else None

    def peek(self, *patterns: TokenPattern) -> bool:
        if not self.has(len(patterns) - 1):
            return False
        for offset, pattern in enumerate(patterns):
            token = self._tokens[self.index + offset]
            if isinstance(pattern, TokenType):
                if token.type is not pattern:
                    return False
            elif isinstance(pattern, str):
                if token.lexeme != pattern:
                    return False
            else:
                raise TypeError(f"token pattern must be a TokenType or str: {pattern!r}")
        return True

    def match(self, *patterns: TokenPattern) -> bool:
        """Equivalent to peek, but also advances past the matched tokens."""
        if not self.peek(*patterns):
            return False
        self.index += len(patterns)
        return True
