"""
comdirect bank: purchase, sale and dividend statements (one transaction per document).
"""
from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Sequence

from .. import money
from ..dates import compose
from ..errors import FieldNotFound
from ..locator import date_in, document_contains, find_anchor, is_wkn, read_at
from ..models import ActivityType, ParseResult
from ..numbers import try_normalize
from .base import BaseBrokerParser, Candidate, Pages, extract_single

logger = logging.getLogger(__name__)

BROKER = "comdirect"

_DIVIDEND_SHARES_RE = re.compile(r"STK\s+([\d.,]+)")


def _is_buy(lines: Sequence[str]) -> bool:
    return any("Wertpapierkauf" in line for line in lines)


def _is_sell(lines: Sequence[str]) -> bool:
    return any("Wertpapierverkauf" in line for line in lines)


def _is_dividend(lines: Sequence[str]) -> bool:
    return any("Ertragsgutschrift" in line or "Dividendengutschrift" in line for line in lines)


def find_isin(lines: Sequence[str], offset: int) -> str | None:
    line = read_at(lines, find_anchor(lines, "/ISIN"), offset)
    if line is None:
        return None
    return line.strip()[-12:]


def find_company_and_wkn(lines: Sequence[str], offset: int) -> tuple[str | None, str | None]:
    # Buy/sell statements print the WKN at the end of the company line.
    line = read_at(lines, find_anchor(lines, "/ISIN"), offset)
    if line is None:
        return None, None
    line = line.strip()
    if offset == 2 or not is_wkn(line[-6:]):
        return line, None
    return line[:-6].strip(), line[-6:]


def find_trade_date(lines: Sequence[str]) -> str | None:
    return date_in(read_at(lines, find_anchor(lines, "Valuta"), 1))


def find_dividend_date(lines: Sequence[str]) -> str | None:
    line = read_at(lines, find_anchor(lines, "zahlbar ab"))
    if line is None:
        return None
    return date_in(line.split("zahlbar ab", 1)[1])


def find_shares(lines: Sequence[str]) -> Decimal | None:
    line = read_at(lines, find_anchor(lines, "Nennwert"), 1)
    if line is None:
        return None
    tokens = line.split()
    for idx, token in enumerate(tokens):
        if "St." in token and idx + 1 < len(tokens):
            return try_normalize(tokens[idx + 1])
    return None


def find_dividend_shares(lines: Sequence[str]) -> Decimal | None:
    line = read_at(lines, find_anchor(lines, "STK"))
    if line is None:
        return None
    match = _DIVIDEND_SHARES_RE.search(line)
    return try_normalize(match.group(1)) if match else None


def find_gross_value(lines: Sequence[str]) -> Decimal | None:
    start = find_anchor(lines, "Kurswert")
    if start is None:
        return None
    line = read_at(lines, find_anchor(lines, "EUR", start))
    if line is None:
        return None
    tokens = line.split("EUR", 1)[1].split()
    return try_normalize(tokens[0]) if tokens else None


def find_stated_total(lines: Sequence[str]) -> Decimal | None:
    line = read_at(lines, find_anchor(lines, "Zu Ihren"), 1)
    if line is None:
        return None
    return try_normalize(line.split("EUR")[-1].strip())


def find_payout(lines: Sequence[str]) -> Decimal | None:
    line = read_at(lines, find_anchor(lines, "Gunsten"), 1)
    if line is None:
        return None
    return try_normalize(line.split("EUR")[-1].strip())


def find_purchase_reduction(lines: Sequence[str]) -> Decimal:
    """Reduktion Kaufaufschlag in EUR, converted with the preceding rate line when quoted in a foreign currency."""
    idx = find_anchor(lines, "Reduktion Kaufaufschlag")
    if idx is None:
        return money.ZERO
    value = try_normalize(lines[idx].split()[-1])
    if value is None:
        return money.ZERO
    rate = Decimal(1)
    if "EUR" not in lines[idx]:
        previous = read_at(lines, idx, -1) or ""
        tokens = previous.split()
        if len(tokens) > 3:
            rate = try_normalize(tokens[3]) or rate
    return abs(value) / rate


def parse_block(lines: Sequence[str]) -> Candidate:
    if _is_buy(lines) or _is_sell(lines):
        activity_type = ActivityType.BUY if _is_buy(lines) else ActivityType.SELL
        isin = find_isin(lines, 2)
        company, wkn = find_company_and_wkn(lines, 1)
        date, _ = compose(find_trade_date(lines))
        shares = find_shares(lines)
        gross = find_gross_value(lines)
        stated_total = find_stated_total(lines)

        if activity_type is ActivityType.BUY:
            reduction = find_purchase_reduction(lines)
            gross, fee = money.apply_reduction(gross, stated_total, reduction)
            amount = money.buy_amount(gross, fee)
        else:
            fee = money.fee_from_totals(stated_total, gross)
            amount = money.sell_amount(gross, fee, money.ZERO)
        tax = money.ZERO
    elif _is_dividend(lines):
        activity_type = ActivityType.DIVIDEND
        isin = find_isin(lines, 3)
        company, wkn = find_company_and_wkn(lines, 2)
        date, _ = compose(find_dividend_date(lines))
        shares = find_dividend_shares(lines)
        gross = amount = find_payout(lines)
        fee = tax = money.ZERO
    else:
        raise FieldNotFound("type", "Wertpapierkauf/Wertpapierverkauf/Ertragsgutschrift")

    return {
        "broker": BROKER,
        "type": activity_type,
        "date": date,
        "isin": isin,
        "wkn": wkn,
        "company": company,
        "shares": shares,
        "price": money.price_per_share(gross, shares),
        "amount": amount,
        "fee": fee,
        "tax": tax,
    }


class ComdirectParser(BaseBrokerParser):
    broker = BROKER
    single_transaction = True

    def identify(self, pages: Pages, extension: str) -> bool:
        if not pages:
            return False
        first = pages[0]
        return document_contains(pages, "comdirect bank") and (
            _is_buy(first) or _is_sell(first) or _is_dividend(first)
        )

    def extract_pages(self, pages: Pages) -> ParseResult:
        return extract_single(self.broker, parse_block, pages)
