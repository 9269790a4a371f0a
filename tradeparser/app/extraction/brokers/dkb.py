"""
DKB: securities statements. Fee and tax lines can spread over several pages.

Order confirmations, cancellations and execution notices are recognized but
not extracted (status UNSUPPORTED_VARIANT).
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from .. import money
from ..dates import compose
from ..errors import FieldNotFound, StatusCode
from ..locator import (
    contains,
    date_in,
    document_contains,
    equals,
    find_anchor,
    find_first_isin,
    find_last_anchor,
    flatten,
    is_currency_code,
    is_time,
    read_at,
)
from ..models import ActivityType, ParseResult
from ..numbers import try_normalize
from .base import BaseBrokerParser, Candidate, Pages, extract_single

logger = logging.getLogger(__name__)

BROKER = "dkb"

IGNORED_DOCUMENTS = ("Auftragsbestätigung", "Streichungsbestätigung", "Ausführungsanzeige")
FEE_LINES = (
    "Provision",
    "Abwicklungskosten Börse",
    "Transaktionsentgelt Börse",
    "Übertragungs-/Liefergebühr",
)
# Trailing space: "Kapitalertragsteuer 25 % auf ..." and not "Berechnungsgrundlage für die Kapitalertragsteuer".
TAX_LINES = ("Kapitalertragsteuer ", "Solidaritätszuschlag", "Kirchensteuer")


def is_buy(lines: Sequence[str]) -> bool:
    return any(
        "Wertpapier Abrechnung Kauf" in line or "Wertpapier Abrechnung Ausgabe Investmentfonds" in line
        for line in lines
    )


def is_sell(lines: Sequence[str]) -> bool:
    return any(
        "Wertpapier Abrechnung Verkauf" in line or "Wertpapier Abrechnung Rücknahme" in line
        for line in lines
    )


def is_dividend(lines: Sequence[str]) -> bool:
    return any("Dividendengutschrift" in line or "Ausschüttung Investmentfonds" in line for line in lines)


def is_ignored(lines: Sequence[str]) -> bool:
    return any(marker in line for line in lines for marker in IGNORED_DOCUMENTS)


def _values_after(lines: Sequence[str], label: str) -> list[Decimal]:
    """First token of the line after every occurrence of the label, as absolute values."""
    values = []
    idx = find_anchor(lines, label)
    while idx is not None:
        line = read_at(lines, idx, 1)
        value = try_normalize(line.split()[0]) if line else None
        if value is not None:
            values.append(abs(value))
        idx = find_anchor(lines, label, idx + 1)
    return values


def find_fee(lines: Sequence[str]) -> Decimal:
    return money.total(*(value for label in FEE_LINES for value in _values_after(lines, label)))


def find_withholding_tax(lines: Sequence[str]) -> Decimal:
    # Only counts when a bare "EUR" follows two lines down; otherwise it was offset elsewhere.
    result = money.ZERO
    predicate = lambda line: line.startswith("Anrechenbare Quellensteuer") and line.endswith("EUR")
    idx = find_anchor(lines, predicate)
    while idx is not None:
        if read_at(lines, idx, 2) == "EUR":
            value = try_normalize(read_at(lines, idx, 1))
            result += abs(value) if value is not None else money.ZERO
        idx = find_anchor(lines, predicate, idx + 1)
    return result


def find_tax(lines: Sequence[str]) -> Decimal:
    taxes = money.total(*(value for label in TAX_LINES for value in _values_after(lines, label)))
    return taxes + find_withholding_tax(lines)


def find_trade_date(lines: Sequence[str]) -> str | None:
    # Closing date first, then the fx rate date, then the document date.
    for label in ("Schlusstag", "Devisenkursdatum"):
        line = read_at(lines, find_anchor(lines, label), 1)
        if line:
            return line.split()[0]

    fx_line = read_at(lines, find_anchor(lines, "Devisenkurs "))
    if date_in(fx_line):
        return date_in(fx_line)

    line = read_at(lines, find_anchor(lines, "Datum"), 1)
    return line.split()[0] if line else None


def find_trade_time(lines: Sequence[str]) -> str | None:
    line = read_at(lines, find_anchor(lines, "-Zeit"), 1)
    if not line:
        return None
    tokens = line.split()
    if len(tokens) > 1 and is_time(tokens[1]):
        return tokens[1]
    return None


def find_gross_value(lines: Sequence[str]) -> Decimal | None:
    # Debits carry a trailing minus ("1.050,00- EUR").
    line = read_at(lines, find_anchor(lines, "Kurswert"), 1)
    value = try_normalize(line.split()[0]) if line else None
    return abs(value) if value is not None else None


def find_payout(lines: Sequence[str]) -> Decimal | None:
    idx = find_anchor(lines, equals("Ausschüttung"))
    if idx is None:
        idx = find_last_anchor(lines, equals("Dividendengutschrift"))
    if idx is None:
        return None
    line = read_at(lines, idx, 1) if read_at(lines, idx, 2) == "EUR" else read_at(lines, idx, 3)
    return try_normalize(line.split()[0]) if line else None


def find_dividend_date(lines: Sequence[str]) -> str | None:
    line = read_at(lines, find_anchor(lines, "Zahlbarkeitstag"), 1)
    return line.split()[0] if line else None


def find_fx(lines: Sequence[str]) -> tuple[Decimal | None, str | None]:
    """Exchange rate and foreign currency, only when the currency differs from the booking currency."""
    rate = currency = None
    idx = find_anchor(lines, equals("Devisenkurs"))
    if idx is not None:
        # Devisenkurs / EUR / USD / 1,1011
        pair = read_at(lines, idx, 1) or ""
        if "/" in pair:
            currency = pair.split("/")[1].strip()
        rate = try_normalize(read_at(lines, idx, 2))
    else:
        # Devisenkurs (EUR/CAD) 1,5268 vom 14.04.2020
        line = read_at(lines, find_anchor(lines, "Devisenkurs "))
        if line is not None and "/" in line:
            tokens = line.split()
            currency = line.split("/")[1][:3]
            rate = try_normalize(tokens[2]) if len(tokens) > 2 else None

    base = read_at(lines, find_anchor(lines, equals("Ausmachender Betrag")), 2)
    if rate is None or not is_currency_code(currency) or currency == base:
        return None, None
    return rate, currency


def parse_block(lines: Sequence[str]) -> Candidate:
    piece_idx = find_anchor(lines, contains("Stück"))
    if piece_idx is None:
        raise FieldNotFound("shares", "Stück")

    tokens = lines[piece_idx].split()
    shares = try_normalize(tokens[1]) if len(tokens) > 1 else None
    isin_idx = find_first_isin(lines, piece_idx)
    isin = read_at(lines, isin_idx)
    company = " ".join(lines[piece_idx + 1:isin_idx]).strip() if isin_idx is not None else None

    fee = find_fee(lines)
    tax = find_tax(lines)
    fx_rate, foreign_currency = find_fx(lines)

    if is_buy(lines) or is_sell(lines):
        activity_type = ActivityType.BUY if is_buy(lines) else ActivityType.SELL
        gross = find_gross_value(lines)
        date, datetime = compose(find_trade_date(lines), find_trade_time(lines))
        if activity_type is ActivityType.BUY:
            amount = money.buy_amount(gross, fee)
        else:
            amount = money.sell_amount(gross, fee, tax)
    elif is_dividend(lines):
        activity_type = ActivityType.DIVIDEND
        gross = amount = find_payout(lines)
        date, datetime = compose(find_dividend_date(lines))
    else:
        raise FieldNotFound("type", "Wertpapier Abrechnung/Dividendengutschrift")

    return {
        "broker": BROKER,
        "type": activity_type,
        "date": date,
        "datetime": datetime,
        "isin": isin,
        "company": company,
        "shares": shares,
        "price": money.price_per_share(gross, shares),
        "amount": amount,
        "fee": fee,
        "tax": tax,
        "fx_rate": fx_rate,
        "foreign_currency": foreign_currency,
    }


class DkbParser(BaseBrokerParser):
    broker = BROKER
    single_transaction = True

    def identify(self, pages: Pages, extension: str) -> bool:
        if not pages or not pages[0]:
            return False
        first = pages[0]
        issued = document_contains(pages, "BIC BYLADEM1001") or first[0] == "10919 Berlin"
        return issued and (is_buy(first) or is_sell(first) or is_dividend(first) or is_ignored(first))

    def extract_pages(self, pages: Pages) -> ParseResult:
        if is_ignored(flatten(pages)):
            logger.info(f"[{self.broker}] Known document variant without activities, skipped")
            return ParseResult.failed(StatusCode.UNSUPPORTED_VARIANT)
        return extract_single(self.broker, parse_block, pages, all_pages=True)
