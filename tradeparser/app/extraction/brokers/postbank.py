"""
Postbank: statements laid out as a table anchored on the "Stück" line.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from .. import money
from ..dates import compose
from ..errors import FieldNotFound
from ..locator import find_anchor, is_isin, read_at, value_after
from ..models import ActivityType, ParseResult
from ..numbers import try_normalize
from .base import BaseBrokerParser, Candidate, Pages, extract_single

logger = logging.getLogger(__name__)

BROKER = "postbank"

# Offsets relative to the "Stück" line of the security table.
SHARES_OFFSET = 0
COMPANY_OFFSET = 1
ISIN_OFFSET = 3


def is_buy(lines: Sequence[str]) -> bool:
    return any(
        "Wertpapier Abrechnung Kauf" in line or "Wertpapier Abrechnung Ausgabe Investmentfonds" in line
        for line in lines
    )


def is_sell(lines: Sequence[str]) -> bool:
    return any("Wertpapier Abrechnung Verkauf" in line for line in lines)


def is_dividend(lines: Sequence[str]) -> bool:
    return any("Dividendengutschrift" in line or "Ausschüttung Investmentfonds" in line for line in lines)


def _first_token(line: str | None) -> str | None:
    if not line:
        return None
    return line.split()[0]


def _first_amount_after(lines: Sequence[str], label: str) -> Decimal | None:
    value = try_normalize(_first_token(value_after(lines, label)))
    return abs(value) if value is not None else None


def parse_block(lines: Sequence[str]) -> Candidate:
    table = find_anchor(lines, "Stück")
    if table is None:
        raise FieldNotFound("shares", "Stück")

    tokens = (read_at(lines, table, SHARES_OFFSET) or "").split()
    shares = try_normalize(tokens[1]) if len(tokens) > 1 else None
    company = read_at(lines, table, COMPANY_OFFSET)
    isin = read_at(lines, table, ISIN_OFFSET)
    isin = isin.strip() if is_isin(isin) else None

    if is_buy(lines) or is_sell(lines):
        activity_type = ActivityType.BUY if is_buy(lines) else ActivityType.SELL
        date_token = _first_token(value_after(lines, "Schlusstag"))
        gross = _first_amount_after(lines, "Kurswert")
        fee = _first_amount_after(lines, "Provision")
        fee = abs(fee) if fee is not None else money.ZERO
        tax = money.ZERO
        if activity_type is ActivityType.BUY:
            amount = money.buy_amount(gross, fee)
        else:
            amount = money.sell_amount(gross, fee, tax)
    elif is_dividend(lines):
        activity_type = ActivityType.DIVIDEND
        date_token = _first_token(value_after(lines, "Zahlbarkeitstag"))
        gross = amount = _first_amount_after(lines, "Ausmachender Betrag")
        fee = tax = money.ZERO
    else:
        raise FieldNotFound("type", "Wertpapier Abrechnung/Dividendengutschrift")

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


class PostbankParser(BaseBrokerParser):
    broker = BROKER
    single_transaction = True

    def identify(self, pages: Pages, extension: str) -> bool:
        if not pages:
            return False
        first = pages[0]
        return any("BIC PBNKDEFFXXX" in line for line in first) and (
            is_buy(first) or is_sell(first) or is_dividend(first)
        )

    def extract_pages(self, pages: Pages) -> ParseResult:
        return extract_single(self.broker, parse_block, pages)
