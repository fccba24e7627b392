"""Conversion of literal lexemes into Python values."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

_ESCAPES = {
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "'": "'",
    '"': '"',
    "\\": "\\",
}


def unescape(body: str) -> str:
    """Resolve backslash escapes in the body of a character or string literal.

    The lexer has already rejected unknown escapes, so every backslash here is
    followed by one of ``b n r t ' " \\``.
    """
    if "\\" not in body:
        return body
    out: list[str] = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            out.append(_ESCAPES[next(chars)])
        else:
            out.append(ch)
    return "".join(out)


def character_value(lexeme: str) -> str:
    """``'a'`` -> ``a``; ``'\\n'`` -> newline."""
    return unescape(lexeme[1:-1])


def string_value(lexeme: str) -> str:
    """``"a\\tb"`` -> ``a<TAB>b``."""
    return unescape(lexeme[1:-1])


# Integral exponent forms whose value has at least this many digits stay
# Decimal instead of being expanded into an int.
MAX_EXPANDED_DIGITS = 4300


def integer_value(lexeme: str) -> int | Decimal:
    """Return the value of an INTEGER lexeme.

    An exponent is applied, so ``5e3`` is ``5000``. A negative exponent that
    leaves a fractional part (``5e-1``) yields a :class:`Decimal`, and so does
    an exponent that would expand to :data:`MAX_EXPANDED_DIGITS` digits or
    more (``1e99999999``). Plain digit runs are always an ``int``.
    """
    try:
        value = Decimal(lexeme)
    except InvalidOperation as exc:
        raise AssertionError(f"lexer produced malformed integer {lexeme!r}") from exc
    if not value.is_finite():
        raise AssertionError(f"lexer produced malformed integer {lexeme!r}")
    if "e" not in lexeme and "E" not in lexeme:
        return int(value)
    if value != value.to_integral_value():
        return value
    if value and value.adjusted() >= MAX_EXPANDED_DIGITS:
        return value
    return int(value)


def decimal_value(lexeme: str) -> Decimal:
    try:
        return Decimal(lexeme)
    except InvalidOperation as exc:
        raise AssertionError(f"lexer produced malformed decimal {lexeme!r}") from exc
