"""
Consorsbank: order statements (current and pre-2015 layout) and dividend statements.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from .. import money
from ..dates import compose
from ..errors import FieldNotFound
from ..locator import (
    any_of,
    contains,
    date_in,
    document_contains,
    equals,
    find_anchor,
    find_first_isin,
    is_amount_line,
    is_currency_code,
    is_time,
    read_at,
    read_first,
    scan,
)
from ..models import ActivityType, ParseResult
from ..numbers import is_amount, try_normalize
from .base import BaseBrokerParser, Candidate, Pages, extract_single

logger = logging.getLogger(__name__)

BROKER = "consorsbank"

_HEADLINE = any_of(equals("orderabrechnung", ignore_case=True), equals("wertpapierabrechnung", ignore_case=True))
_DIVIDEND = any_of(equals("ertragsgutschrift", ignore_case=True), equals("dividendengutschrift", ignore_case=True))


def _headline_index(lines: Sequence[str]) -> int | None:
    return find_anchor(lines, _HEADLINE)


def _is_trade(lines: Sequence[str], side: str) -> bool:
    line = read_at(lines, _headline_index(lines), 1)
    return line is not None and line.lower() == side


def is_buy(lines: Sequence[str]) -> bool:
    return _is_trade(lines, "kauf")


def is_sell(lines: Sequence[str]) -> bool:
    return _is_trade(lines, "verkauf")


def is_dividend(lines: Sequence[str]) -> bool:
    return find_anchor(lines, _DIVIDEND) is not None


def find_isin(lines: Sequence[str]) -> str | None:
    return read_at(lines, find_first_isin(lines))


def find_wkn(lines: Sequence[str]) -> str | None:
    old = find_anchor(lines, "WKN: ")
    if old is not None:
        tokens = lines[old].split()
        position = tokens.index("WKN:") if "WKN:" in tokens else -1
        if 0 <= position < len(tokens) - 1:
            return tokens[position + 1]
        return None

    label = find_anchor(lines, equals("WKN"))
    isin_idx = find_first_isin(lines, label) if label is not None else None
    if isin_idx is None:
        return None
    return read_at(lines, isin_idx, -1)


def find_company(lines: Sequence[str]) -> str | None:
    label = find_anchor(lines, equals("ISIN"))
    if label is None:
        # Older documents only carry a WKN.
        return read_at(lines, find_anchor(lines, "WKN: "), 1)

    name = read_at(lines, label, 1)
    isin_idx = find_first_isin(lines, label)
    # Long names wrap onto a second line in the newer layout.
    if name is not None and isin_idx is not None and isin_idx - label > 3:
        return f"{name} {lines[label + 2]}"
    return name


def find_trade_date_time(lines: Sequence[str]) -> tuple[str | None, str | None]:
    idx = _headline_index(lines)
    if idx is None:
        return None, None
    marker = read_at(lines, idx, 2)
    offset = 1 if marker is not None and marker.lower() == "am" else 0
    date = date_in(read_at(lines, idx, 2 + offset))
    time = read_at(lines, idx, 4 + offset)
    return date, time if is_time(time) else None


def find_shares(lines: Sequence[str]) -> Decimal | None:
    return try_normalize(read_at(lines, find_anchor(lines, equals("umsatz", ignore_case=True)), 2))


def find_gross_value(lines: Sequence[str]) -> Decimal | None:
    idx = find_anchor(lines, equals("Kurswert"))
    if idx is None:
        idx = find_anchor(lines, equals("Nettoinventarwert"))
    # Documents before 12/2020 print the currency on its own line first.
    return try_normalize(read_first(lines, idx, (1, 2), is_amount))


def _number_after(lines: Sequence[str], term: str) -> Decimal:
    idx = find_anchor(lines, contains(term, ignore_case=True))
    line = read_at(lines, idx, 1)
    if line is not None and is_currency_code(line):
        line = read_at(lines, idx, 2)
    return try_normalize(line) or money.ZERO


def find_fee(lines: Sequence[str]) -> Decimal:
    brokerage = _number_after(lines, "provision")
    base = _number_after(lines, "grundgebühr")
    issue = money.ZERO
    if find_anchor(lines, "Ausgabegebühr 0,00%") is None:
        issue = _number_after(lines, "ausgabegebühr")
    return abs(money.total(brokerage, base, issue))


def find_sell_tax(lines: Sequence[str]) -> Decimal:
    kapst = read_at(lines, find_anchor(lines, equals("kapst", ignore_case=True)), 3)
    solz = read_at(lines, find_anchor(lines, equals("solz", ignore_case=True)), 3)
    return abs(money.total(try_normalize(kapst), try_normalize(solz)))


def find_dividend_gross(lines: Sequence[str]) -> Decimal | None:
    # "Brutto in EUR" only appears for payouts in a foreign currency.
    idx = find_anchor(lines, equals("Brutto in EUR"))
    if idx is None:
        idx = find_anchor(lines, equals("Brutto"))
    if idx is not None:
        line = read_at(lines, idx, 1)
        return try_normalize(line.split()[0]) if line else None

    old = find_anchor(lines, "BRUTTO")
    if old is not None:
        tokens = lines[old].split()
        return try_normalize(tokens[2]) if len(tokens) > 2 else None
    return None


def find_dividend_net(lines: Sequence[str]) -> Decimal | None:
    idx = find_anchor(lines, any_of(equals("Netto zugunsten"), equals("Netto zulasten")))
    if idx is not None:
        line = read_at(lines, scan(lines, idx + 1, is_amount_line, limit=5))
        return try_normalize(line.split()[0]) if line else None

    old = find_anchor(lines, "WERT")
    if old is not None:
        tokens = lines[old].split()
        return try_normalize(tokens[3]) if len(tokens) > 3 else None
    return None


def find_dividend_shares(lines: Sequence[str]) -> Decimal | None:
    idx = find_anchor(lines, equals("bestand", ignore_case=True))
    if idx is not None:
        line = read_at(lines, idx, 1)
        return try_normalize(line.split()[0]) if line else None

    old = read_at(lines, find_anchor(lines, equals("DIVIDENDENGUTSCHRIFT")), 1)
    if old is not None:
        tokens = old.split()
        return try_normalize(tokens[1]) if len(tokens) > 1 else None
    return None


def find_dividend_date(lines: Sequence[str]) -> str | None:
    for keyword in ("valuta", "ex-tag"):
        line = read_at(lines, find_anchor(lines, contains(keyword, ignore_case=True)))
        if line is not None:
            return date_in(line)
    return None


def find_fx(lines: Sequence[str]) -> tuple[Decimal | None, str | None]:
    line = read_at(lines, find_anchor(lines, "Devisenkurs"), 1)
    if line is None:
        return None, None
    tokens = line.split()
    if len(tokens) < 2 or not is_currency_code(tokens[1]):
        return None, None
    return try_normalize(tokens[0]), tokens[1]


def parse_block(lines: Sequence[str]) -> Candidate:
    fx_rate = foreign_currency = None
    time = None

    if is_buy(lines) or is_sell(lines):
        activity_type = ActivityType.BUY if is_buy(lines) else ActivityType.SELL
        date_token, time = find_trade_date_time(lines)
        shares = find_shares(lines)
        gross = find_gross_value(lines)
        fee = find_fee(lines)
        if activity_type is ActivityType.BUY:
            tax = money.ZERO
            amount = money.buy_amount(gross, fee)
        else:
            tax = find_sell_tax(lines)
            amount = money.sell_amount(gross, fee, tax)
    elif is_dividend(lines):
        activity_type = ActivityType.DIVIDEND
        date_token = find_dividend_date(lines)
        shares = find_dividend_shares(lines)
        gross = amount = find_dividend_gross(lines)
        fee = money.ZERO
        tax = money.dividend_tax(gross, find_dividend_net(lines))
        fx_rate, foreign_currency = find_fx(lines)
    else:
        raise FieldNotFound("type", "Orderabrechnung/Ertragsgutschrift")

    date, datetime = compose(date_token, time)
    logger.debug(f"[{BROKER}] {activity_type.value} on {date}, gross {gross}, fee {fee}, tax {tax}")

    return {
        "broker": BROKER,
        "type": activity_type,
        "date": date,
        "datetime": datetime,
        "isin": find_isin(lines),
        "wkn": find_wkn(lines),
        "company": find_company(lines),
        "shares": shares,
        "price": money.price_per_share(gross, shares),
        "amount": amount,
        "fee": fee,
        "tax": tax,
        "fx_rate": fx_rate,
        "foreign_currency": foreign_currency,
    }


class ConsorsbankParser(BaseBrokerParser):
    broker = BROKER
    single_transaction = True

    def identify(self, pages: Pages, extension: str) -> bool:
        if not pages or not document_contains(pages, contains("consorsbank", ignore_case=True)):
            return False
        first = pages[0]
        return is_buy(first) or is_sell(first) or is_dividend(first)

    def extract_pages(self, pages: Pages) -> ParseResult:
        return extract_single(self.broker, parse_block, pages)
