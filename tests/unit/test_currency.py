"""Tests for fixed-rate conversion and money formatting."""
from decimal import Decimal

import pytest

from asset_tracker.currency import CurrencyConverter, convert, format_money


@pytest.mark.parametrize(
    "code,expected",
    [("USD", "100.00"), ("GBP", "74.00"), ("SEK", "853.00"), ("INR", "7452.00"), ("ZZZ", "100.00")],
)
def test_convert_builtin_rates(code, expected):
    assert convert(100, code) == Decimal(expected)


def test_convert_rounds_to_cents():
    # 19.99 * 0.74 = 14.7926
    assert convert(Decimal("19.99"), "GBP") == Decimal("14.79")
    # 0.5 * 8.53 = 4.265 rounds half up
    assert convert(Decimal("0.5"), "SEK") == Decimal("4.27")


def test_convert_code_is_case_insensitive():
    assert convert(100, "gbp") == Decimal("74.00")


def test_convert_accepts_float_without_binary_noise():
    assert convert(0.1, "USD") == Decimal("0.10")


def test_converter_custom_rates():
    converter = CurrencyConverter({"EUR": "0.92"})
    assert converter.convert(100, "EUR") == Decimal("92.00")
    # Not in this table, so identity
    assert converter.convert(100, "GBP") == Decimal("100.00")
    assert converter.rate_for("eur") == Decimal("0.92")


def test_format_money_uses_currency_symbol():
    assert format_money(Decimal("1234"), "USD") == "$1,234.00"
    assert format_money(Decimal("913.16"), "GBP") == "£913.16"
    assert format_money(Decimal("10526.02"), "SEK") == "10,526.02 kr"
    assert format_money(Decimal("91959.68"), "INR") == "₹91,959.68"


def test_format_money_unknown_code():
    assert format_money(Decimal("5"), "XYZ") == "5.00 XYZ"


def test_format_money_none():
    assert format_money(None, "USD") == "—"
