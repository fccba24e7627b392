"""Tests for literal lexeme conversion."""

from __future__ import annotations

from decimal import Decimal

import pytest

from plclang.strings import (
    MAX_EXPANDED_DIGITS,
    character_value,
    decimal_value,
    integer_value,
    string_value,
    unescape,
)


class TestUnescape:
    @pytest.mark.parametrize(
        ("body", "value"),
        [
            ("plain", "plain"),
            ("\\b", "\b"),
            ("\\n", "\n"),
            ("\\r", "\r"),
            ("\\t", "\t"),
            ("\\'", "'"),
            ('\\"', '"'),
            ("\\\\", "\\"),
            ("a\\\\nb", "a\\nb"),
        ],
    )
    def test_escape(self, body, value):
        assert unescape(body) == value

    def test_character(self):
        assert character_value("'\\t'") == "\t"

    def test_string(self):
        assert string_value('"Hello,\\nWorld"') == "Hello,\nWorld"


class TestNumbers:
    def test_integer(self):
        assert integer_value("+12") == 12

    def test_integer_exponent(self):
        assert integer_value("2E2") == 200
        assert isinstance(integer_value("2E2"), int)

    def test_integer_negative_exponent(self):
        assert integer_value("25e-1") == Decimal("2.5")

    def test_long_integer_is_int(self):
        value = integer_value("1" * 5000)
        assert isinstance(value, int)
        assert value % 10**12 == 111111111111

    def test_large_exponent_stays_decimal(self):
        value = integer_value("1e99999999")
        assert value == Decimal("1E+99999999")
        assert isinstance(value, Decimal)

    def test_exponent_below_expansion_limit_is_int(self):
        assert integer_value(f"3e{MAX_EXPANDED_DIGITS - 1}") == 3 * 10 ** (MAX_EXPANDED_DIGITS - 1)

    def test_zero_with_large_exponent_is_int(self):
        assert integer_value("0e99999999") == 0
        assert isinstance(integer_value("0e99999999"), int)


    def test_decimal_keeps_precision(self):
        assert decimal_value("0.10") == Decimal("0.10")
        assert str(decimal_value("0.10")) == "0.10"

    def test_malformed_integer_is_internal_error(self):
        with pytest.raises(AssertionError):
            integer_value("1.2.3")

    def test_malformed_decimal_is_internal_error(self):
        with pytest.raises(AssertionError):
            decimal_value("abc")
