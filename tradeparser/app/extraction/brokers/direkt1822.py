"""
1822direkt: statement collections with one transaction per page.

Fees and taxes are not printed; they are the difference between the gross
value and the settled total ("Ausmachender Betrag", trailing minus for debits).
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from .. import money
from ..dates import compose
from ..errors import FieldNotFound
from ..locator import document_contains, equals, find_anchor, read_at, value_after
from ..models import ActivityType, ParseResult
from ..numbers import try_normalize
from .base import BaseBrokerParser, Candidate, Pages, extract_each, page_blocks

logger = logging.getLogger(__name__)

BROKER = "1822direkt"


def is_buy(lines: Sequence[str]) -> bool:
    return any(
        "Wertpapier Abrechnung Kauf" in line or "Wertpapier Abrechnung Ausgabe Investmentfonds" in line
        for line in lines
    )


def is_sell(lines: Sequence[str]) -> bool:
    return any("Wertpapier Abrechnung Verkauf" in line for line in lines)


def is_dividend(lines: Sequence[str]) -> bool:
    return any("Ausschüttung Investmentfonds" in line for line in lines)


def _unsigned(line: str | None) -> Decimal | None:
    value = try_normalize(line)
    return abs(value) if value is not None else None


def find_settled_total(lines: Sequence[str]) -> Decimal | None:
    return _unsigned(value_after(lines, "Ausmachender Betrag"))


def find_payout(lines: Sequence[str]) -> Decimal | None:
    """Gross payout: the amount printed above the first "EUR" line of the payout table."""
    idx = find_anchor(lines, equals("Ausschüttung"))
    if idx is None:
        idx = find_anchor(lines, "Ausschüttung")
    while idx is not None:
        marker = read_at(lines, idx, 2)
        if marker is None:
            return None
        if "EUR" in marker:
            return _unsigned(read_at(lines, idx, 1))
        idx += 2
    return None


def find_order_date(lines: Sequence[str]) -> str | None:
    line = value_after(lines, "Schlusstag")
    return line.split()[0] if line else None


def parse_block(lines: Sequence[str]) -> Candidate:
    piece = find_anchor(lines, "Stück")
    if piece is None:
        raise FieldNotFound("shares", "Stück")
    tokens = lines[piece].split()
    shares = try_normalize(tokens[1]) if len(tokens) > 1 else None
    company = read_at(lines, piece, 1)
    isin = value_after(lines, "ISIN", (5,))
    settled = find_settled_total(lines)

    if is_buy(lines) or is_sell(lines):
        gross = _unsigned(value_after(lines, "Kurswert"))
        date_token = find_order_date(lines)
        fee = money.fee_from_totals(settled, gross)
        tax = money.ZERO
        if is_buy(lines):
            activity_type = ActivityType.BUY
            amount = money.buy_amount(gross, fee)
        else:
            activity_type = ActivityType.SELL
            amount = money.sell_amount(gross, fee, tax)
    elif is_dividend(lines):
        activity_type = ActivityType.DIVIDEND
        gross = amount = find_payout(lines)
        date_token = value_after(lines, "Zahlbarkeitstag")
        fee = money.ZERO
        tax = money.dividend_tax(gross, settled)
    else:
        raise FieldNotFound("type", "Wertpapier Abrechnung/Ausschüttung Investmentfonds")

    date, _ = compose(date_token)
    return {
        "broker": BROKER,
        "type": activity_type,
        "date": date,
        "isin": isin,
        "company": company,
        "shares": shares,
        "price": money.price_per_share(gross, shares),
        "amount": amount,
        "fee": fee,
        "tax": tax,
    }


class Direkt1822Parser(BaseBrokerParser):
    broker = BROKER
    single_transaction = False

    def identify(self, pages: Pages, extension: str) -> bool:
        if not document_contains(pages, "1822direkt"):
            return False
        return any(is_buy(page) or is_sell(page) or is_dividend(page) for page in pages)

    def extract_pages(self, pages: Pages) -> ParseResult:
        return extract_each(self.broker, parse_block, page_blocks(pages))
