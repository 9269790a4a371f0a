"""
Smartbroker: same statement layout as onvista, with its own tax and payout lines.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from .. import money
from ..errors import FieldNotFound
from ..locator import document_contains, equals, find_anchor, read_at, value_after
from ..models import ActivityType, ParseResult
from ..numbers import try_normalize
from . import onvista
from .base import BaseBrokerParser, Candidate, Pages, extract_single

logger = logging.getLogger(__name__)

BROKER = "smartbroker"

SMARTBROKER_MARKER = "Landsberger Straße 300"
TAX_LINES = ("Kapitalertragsteuer", "Solidaritätszuschlag", "Kirchensteuer")


def find_tax(lines: Sequence[str]) -> Decimal:
    result = money.ZERO
    for label in TAX_LINES:
        value = try_normalize(value_after(lines, label, (2,)))
        if value is not None:
            result += abs(value)
    withholding = try_normalize(value_after(lines, "-Quellensteuer", (5,)))
    if withholding is not None:
        result += abs(withholding)
    return result


def find_payout(lines: Sequence[str]) -> Decimal | None:
    idx = find_anchor(lines, equals("Steuerpflichtiger Ausschüttungsbetrag"))
    if idx is None:
        idx = find_anchor(lines, equals("ausländische Dividende"))
    return try_normalize(read_at(lines, idx, 2))


def parse_block(lines: Sequence[str]) -> Candidate:
    if onvista.is_buy(lines) or onvista.is_sell(lines):
        return onvista.parse_trade(lines, BROKER, find_tax)
    if not onvista.is_dividend(lines):
        raise FieldNotFound("type", "Wir haben für Sie gekauft/verkauft")

    gross = find_payout(lines)
    return onvista.build_candidate(
        BROKER,
        lines,
        ActivityType.DIVIDEND,
        onvista.find_dividend_date(lines),
        gross,
        gross,
        money.ZERO,
        find_tax(lines),
    )


class SmartbrokerParser(BaseBrokerParser):
    broker = BROKER
    single_transaction = True

    def identify(self, pages: Pages, extension: str) -> bool:
        if not pages or not document_contains(pages, SMARTBROKER_MARKER):
            return False
        first = pages[0]
        return onvista.is_buy(first) or onvista.is_sell(first) or onvista.is_dividend(first)

    def extract_pages(self, pages: Pages) -> ParseResult:
        return extract_single(self.broker, parse_block, pages)
