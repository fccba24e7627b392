"""Error types with formatted source context."""

from __future__ import annotations

from plclang.tokens import Position, Token, position_at


def _render(message: str, position: Position, width: int, source: str, filename: str) -> str:
    """Render a compiler-style diagnostic with a caret under the offending text."""
    lines = source.split("\n")
    line_idx = position.line - 1
    col = position.column

    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\r")
    else:
        source_line = ""

    carets = "^" * max(1, width)
    pad = " " * (col - 1)

    line_num = str(position.line)
    gutter_width = len(line_num) + 1
    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{position.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class LexError(Exception):
    """Raised on the first lexing error, at the cursor offset where scanning failed."""

    def __init__(self, message: str, offset: int, source: str) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        super().__init__(self.format())

    @property
    def position(self) -> Position:
        return position_at(self.source, self.offset)

    def format(self, filename: str = "input.plc") -> str:
        return _render(self.message, self.position, 1, self.source, filename)


class ParseError(Exception):
    """Raised on the first parse error.

    ``token`` is the offending token, or ``None`` when the token stream ran
    out before the expected construct was found.
    """

    def __init__(self, message: str, token: Token | None, source: str = "") -> None:
        self.message = message
        self.token = token
        self.source = source
        super().__init__(self.format())

    @property
    def at_end(self) -> bool:
        return self.token is None

    @property
    def offset(self) -> int:
        if self.token is None:
            return len(self.source)
        return self.token.offset

    @property
    def position(self) -> Position:
        return position_at(self.source, self.offset)

    def format(self, filename: str = "input.plc") -> str:
        if self.token is None:
            message = f"{self.message} at end of input"
            width = 1
        else:
            message = f"{self.message}, found {self.token.lexeme!r}"
            width = len(self.token.lexeme)
        return _render(message, self.position, width, self.source, filename)
