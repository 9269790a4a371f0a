from decimal import Decimal

import pytest

from tradeparser.app.extraction.errors import MalformedNumber
from tradeparser.app.extraction.numbers import (
    amounts_in,
    format_number,
    is_amount,
    is_number,
    normalize,
    try_normalize,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1.234,56", Decimal("1234.56")),
        ("547,80", Decimal("547.80")),
        ("4,29-", Decimal("-4.29")),
        ("-0,5", Decimal("-0.5")),
        ("+12,00", Decimal("12.00")),
        ("  1.000.000,01  ", Decimal("1000000.01")),
        ("10", Decimal("10")),
        ("6,9666", Decimal("6.9666")),
        ("1 234,56", Decimal("1234.56")),
    ],
)
def test_normalize_comma_decimal(raw, expected):
    assert normalize(raw) == expected


def test_normalize_dot_decimal():
    assert normalize("1,234.56", decimal_separator=".") == Decimal("1234.56")


def test_normalize_keeps_decimal_input():
    value = Decimal("3.14")
    assert normalize(value) is value


@pytest.mark.parametrize(
    "raw", ["", "EUR", "-", "abc,de", "1,2,3", "1.23.4,5x", None, "1.5", "12.34,00", "1.2345,00"]
)
def test_normalize_rejects_non_numbers(raw):
    with pytest.raises(MalformedNumber):
        normalize(raw)


def test_try_normalize_degrades_to_none():
    assert try_normalize(None) is None
    assert try_normalize("EUR") is None
    assert try_normalize("12,50") == Decimal("12.50")


@pytest.mark.parametrize("raw", ["1.234,56", "4,29-", "0,01", "123.456.789,1234", "7"])
def test_normalize_is_idempotent_through_format(raw):
    """normalize(format(normalize(s))) == normalize(s)"""
    value = normalize(raw)
    assert normalize(format_number(value)) == value


def test_format_number():
    assert format_number(Decimal("1234.5")) == "1.234,5"
    assert format_number(Decimal("-4.29")) == "-4,29"
    assert format_number(Decimal("1234.5"), decimal_separator=".") == "1,234.5"


def test_amount_shapes():
    assert is_amount("547,80")
    assert is_amount("1.234,56")
    assert is_amount("4,29-")
    assert not is_amount("EUR")
    assert not is_amount("10")
    assert not is_amount("15.03.2021")
    assert is_number("10")
    assert is_number("6,9666")
    assert not is_number("A0RPWH")


def test_amounts_in_line():
    assert amounts_in("Kurswert : EUR 789,90") == ["789,90"]
    assert amounts_in("Kapitalertragsteuer 25 % auf 11,88 EUR") == ["11,88"]
    assert amounts_in("keine Beträge") == []
    assert amounts_in(None) == []


def test_badly_grouped_thousands_are_malformed():
    """A dot that does not separate a group of three is not a thousands separator."""
    assert try_normalize("1.5") is None
    assert try_normalize("1,5", decimal_separator=".") is None
    assert normalize("12.345,6") == Decimal("12345.6")
