"""
onvista bank: statement collections with one transaction per page.

The helpers are shared with smartbroker, whose documents come from the same
back office and only differ in the bank line and the tax block.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Sequence

from .. import money
from ..dates import compose
from ..errors import FieldNotFound
from ..locator import (
    contains,
    document_contains,
    find_anchor,
    is_date,
    read_at,
    read_first,
    scan,
    value_after,
)
from ..models import ActivityType, ParseResult
from ..numbers import try_normalize
from .base import BaseBrokerParser, Candidate, Pages, extract_each, page_blocks

logger = logging.getLogger(__name__)

BROKER = "onvista"

ONVISTA_MARKER = "BELEGDRUCK=J"
# Printed by smartbroker only.
SMARTBROKER_BANK_LINE = "BNP Paribas S.A. Niederlassung Deutschland"


def _is_withheld(line: str) -> bool:
    return line.startswith("einbehaltene ") or line.startswith("einbehaltener ")


def _is_tax_label(line: str) -> bool:
    lowered = line.lower()
    return "steuer" in lowered or "zuschlag" in lowered


def is_buy(lines: Sequence[str]) -> bool:
    return any("Wir haben für Sie gekauft" in line for line in lines)


def is_sell(lines: Sequence[str]) -> bool:
    return any("Wir haben für Sie verkauft" in line for line in lines)


def is_dividend(lines: Sequence[str]) -> bool:
    return any("Erträgnisgutschrift" in line or "Dividendengutschrift" in line for line in lines)


def find_isin(lines: Sequence[str]) -> str | None:
    return value_after(lines, "ISIN")


def find_company(lines: Sequence[str]) -> str | None:
    idx = find_anchor(lines, "ISIN")
    company = read_at(lines, idx, -1)
    if company == "Gattungsbezeichnung":
        company = read_at(lines, idx, -2)
    return company


def find_trade_date(lines: Sequence[str]) -> str | None:
    return read_first(lines, find_anchor(lines, "Handelstag"), (1, -1), is_date)


def find_dividend_date(lines: Sequence[str]) -> str | None:
    return value_after(lines, "Zahltag", (1,), is_date)


def find_shares(lines: Sequence[str]) -> Decimal | None:
    line = read_at(lines, find_anchor(lines, "STK"))
    if line is None:
        return None
    tokens = line.split()
    return try_normalize(tokens[1]) if len(tokens) > 1 else None


def find_gross_value(lines: Sequence[str]) -> Decimal | None:
    return try_normalize(value_after(lines, "Kurswert", (2,)))


def find_tax(lines: Sequence[str]) -> Decimal:
    """Withheld taxes plus creditable withholding tax; older layouts list them between Kurswert and Handelstag."""
    withheld = find_anchor(lines, _is_withheld)
    trade_day = find_anchor(lines, "Handelstag")

    if withheld is None and trade_day is not None:
        result = money.ZERO
        idx = find_anchor(lines, "Kurswert")
        if idx is None:
            return result
        idx += 3
        while idx < trade_day:
            if _is_tax_label(lines[idx]):
                value = try_normalize(read_at(lines, idx, 2))
                result += abs(value) if value is not None else money.ZERO
            idx += 4
        return result

    result = money.ZERO
    idx = withheld
    while idx is not None and _is_withheld(lines[idx]):
        value = try_normalize(read_at(lines, idx, 2))
        result += abs(value) if value is not None else money.ZERO
        idx = idx + 3 if idx + 3 < len(lines) else None

    creditable = try_normalize(value_after(lines, "davon anrechenbare", (2,)))
    if creditable is not None:
        result += abs(creditable)
    return result


def find_fee(lines: Sequence[str]) -> Decimal | None:
    """Difference between the settled total and the gross value."""
    gross = find_gross_value(lines)
    total_idx = find_anchor(lines, "Betrag zu Ihren ")
    eur_idx = scan(lines, total_idx + 1 if total_idx is not None else None, contains("EUR"))
    stated_total = try_normalize(read_at(lines, eur_idx, 1))
    if stated_total is None:
        return None

    first_tax = find_anchor(lines, lambda line: _is_tax_label(line) and not line.lower().startswith("steuer"))
    if first_tax is not None and first_tax < total_idx:
        # Older documents settle the total net of taxes.
        stated_total += find_tax(lines)
    return money.fee_from_totals(stated_total, gross)


def build_candidate(
    broker: str,
    lines: Sequence[str],
    activity_type: ActivityType,
    date_token: str | None,
    gross: Decimal | None,
    amount: Decimal | None,
    fee: Decimal | None,
    tax: Decimal | None,
) -> Candidate:
    shares = find_shares(lines)
    date, _ = compose(date_token)
    return {
        "broker": broker,
        "type": activity_type,
        "date": date,
        "isin": find_isin(lines),
        "company": find_company(lines),
        "shares": shares,
        "price": money.price_per_share(gross, shares),
        "amount": amount,
        "fee": fee,
        "tax": tax,
    }


def parse_trade(
    lines: Sequence[str],
    broker: str = BROKER,
    tax_finder: Callable[[Sequence[str]], Decimal] = find_tax,
) -> Candidate:
    """Purchase or sale page; the tax block differs between the two banks."""
    activity_type = ActivityType.BUY if is_buy(lines) else ActivityType.SELL
    gross = find_gross_value(lines)
    fee = find_fee(lines)
    if activity_type is ActivityType.BUY:
        tax = money.ZERO
        amount = money.buy_amount(gross, fee)
    else:
        tax = tax_finder(lines)
        amount = money.sell_amount(gross, fee, tax)
    return build_candidate(broker, lines, activity_type, find_trade_date(lines), gross, amount, fee, tax)


def parse_block(lines: Sequence[str]) -> Candidate:
    if is_buy(lines) or is_sell(lines):
        return parse_trade(lines)
    if not is_dividend(lines):
        raise FieldNotFound("type", "Wir haben für Sie gekauft/verkauft")

    tax = find_tax(lines)
    net = try_normalize(value_after(lines, "Betrag zu Ihren Gunsten", (2,)))
    gross = money.total(net, tax) if net is not None else None
    return build_candidate(
        BROKER, lines, ActivityType.DIVIDEND, find_dividend_date(lines), gross, gross, money.ZERO, tax
    )


class OnvistaParser(BaseBrokerParser):
    broker = BROKER
    single_transaction = False

    def identify(self, pages: Pages, extension: str) -> bool:
        if not document_contains(pages, ONVISTA_MARKER):
            return False
        if document_contains(pages, SMARTBROKER_BANK_LINE):
            return False
        return any(is_buy(page) or is_sell(page) or is_dividend(page) for page in pages)

    def extract_pages(self, pages: Pages) -> ParseResult:
        return extract_each(self.broker, parse_block, page_blocks(pages))
