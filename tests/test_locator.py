from tradeparser.app.extraction.locator import (
    any_of,
    contains,
    date_in,
    document_contains,
    equals,
    find_anchor,
    find_first_isin,
    find_last_anchor,
    flatten,
    is_currency_code,
    is_date,
    is_isin,
    is_time,
    is_wkn,
    read_at,
    read_first,
    read_until,
    scan,
    starts_with,
    value_after,
)
from tradeparser.app.extraction.numbers import is_amount

LINES = [
    "Wertpapierabrechnung",
    "Kauf",
    "Kurswert",
    "EUR",
    "654,30",
    "Provision",
    "4,95",
    "Kurswert",
    "1,00",
]


def test_predicates():
    assert contains("wert")("Kurswert")
    assert not contains("WERT")("Kurswert")
    assert contains("WERT", ignore_case=True)("Kurswert")
    assert equals("Kauf")("Kauf")
    assert not equals("Kauf")("Verkauf")
    assert equals("kauf", ignore_case=True)("KAUF")
    assert starts_with("Kapital")("Kapitalertragsteuer")
    assert any_of("Provision", equals("Kauf"))("Kauf")


def test_find_anchor_first_and_last():
    assert find_anchor(LINES, "Kurswert") == 2
    assert find_anchor(LINES, "Kurswert", start=3) == 7
    assert find_last_anchor(LINES, "Kurswert") == 7
    assert find_anchor(LINES, "Ausmachender Betrag") is None


def test_read_at_bounds():
    assert read_at(LINES, 2, 2) == "654,30"
    assert read_at(LINES, 0, -1) is None
    assert read_at(LINES, 8, 1) is None
    assert read_at(LINES, None, 1) is None


def test_read_first_uses_fallback_offsets():
    """The first offset whose line has the requested shape wins."""
    assert read_first(LINES, 2, (1, 2), is_amount) == "654,30"
    assert read_first(LINES, 2, (1,), is_amount) is None
    assert value_after(LINES, "Provision") == "4,95"
    assert value_after(LINES, "Dividende") is None


def test_scan_with_step_and_limit():
    assert scan(LINES, 2, is_amount) == 4
    assert scan(LINES, 2, is_amount, step=2) == 4
    assert scan(LINES, 5, equals("Kauf"), step=-1) == 1
    assert scan(LINES, 2, equals("Provision"), limit=2) is None
    assert scan(LINES, None, is_amount) is None


def test_read_until():
    assert read_until(LINES, 2, "Provision") == ["EUR", "654,30"]
    assert read_until(LINES, 2, "Provision", include_stop=True) == ["EUR", "654,30", "Provision"]
    assert read_until(LINES, 2, "Steuer") is None


def test_shapes():
    assert is_date("04.06.2020")
    assert not is_date("32.01.2020")
    assert not is_date("04.06.20")
    assert is_time("16:22:22")
    assert not is_time("16:22")
    assert is_time("16:22", with_seconds=False)
    assert is_currency_code("USD")
    assert not is_currency_code("usd")
    assert is_isin("US0378331005")
    assert is_isin("IE00B3RBWM25")
    assert not is_isin("ORDERABRECHNUNG")
    assert not is_isin("ABCDEFGHIJKL")
    assert is_wkn("A0RPWH")
    assert not is_wkn("A0RPW")


def test_date_in_line():
    assert date_in("Valuta 08.06.2020 Kurs") == "08.06.2020"
    assert date_in("keine Angabe") is None
    assert date_in(None) is None


def test_document_helpers():
    pages = [["Seite 1", "US0378331005"], ["Seite 2"]]
    assert flatten(pages) == ["Seite 1", "US0378331005", "Seite 2"]
    assert document_contains(pages, "Seite 2")
    assert not document_contains(pages, "Seite 3")
    assert find_first_isin(flatten(pages)) == 1
