"""
ING: purchase, sale and dividend statements.
"""
from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Sequence

from .. import money
from ..dates import compose
from ..errors import FieldNotFound
from ..locator import document_contains, is_isin, is_time, read_at, value_after
from ..models import ActivityType, ParseResult
from ..numbers import try_normalize
from .base import BaseBrokerParser, Candidate, Pages, extract_single

logger = logging.getLogger(__name__)

BROKER = "ing"

TAX_PREFIXES = ("kapitalertragsteuer", "solidaritätszuschlag", "kirchensteuer")
# "QuSt 15,00 % (EUR 0,41)": withholding tax converted to EUR inside the line.
_QUST_EUR_RE = re.compile(r"\(\s*[A-Z]{3}\s+([\d.,]+)\s*\)")


def is_sell(lines: Sequence[str]) -> bool:
    return any("Wertpapierabrechnung" in line for line in lines) and any(
        "Verkauf" in line for line in lines
    )


def is_buy(lines: Sequence[str]) -> bool:
    # Case sensitive, "Kauf" does not occur in "Verkauf".
    return any("Wertpapierabrechnung" in line for line in lines) and any(
        "Kauf" in line for line in lines
    )


def is_dividend(lines: Sequence[str]) -> bool:
    return any("Dividendengutschrift" in line or "Ertragsgutschrift" in line for line in lines)


def _first_token(line: str | None) -> str | None:
    if not line:
        return None
    return line.split()[0]


def find_isin(lines: Sequence[str]) -> str | None:
    token = _first_token(value_after(lines, "ISIN"))
    return token if is_isin(token) else None


def find_company(lines: Sequence[str]) -> str | None:
    line = value_after(lines, "Wertpapierbezeichnung")
    return line.split(" -")[0].strip() if line else None


def find_taxes(lines: Sequence[str]) -> Decimal:
    result = money.ZERO
    for idx, line in enumerate(lines):
        lowered = line.lower()
        if lowered.startswith("qust"):
            match = _QUST_EUR_RE.search(line)
            value = try_normalize(match.group(1)) if match else try_normalize(read_at(lines, idx, 2))
        elif lowered.startswith(TAX_PREFIXES):
            offset = 2 if line.endswith("%") else 3
            candidate = read_at(lines, idx, offset)
            value = try_normalize(candidate) if candidate and "," in candidate else None
        else:
            continue
        if value is not None:
            result += abs(value)
    return result


def parse_block(lines: Sequence[str]) -> Candidate:
    isin = find_isin(lines)
    company = find_company(lines)

    if is_sell(lines) or is_buy(lines):
        activity_type = ActivityType.SELL if is_sell(lines) else ActivityType.BUY
        shares = try_normalize(value_after(lines, "Stück"))
        date_token = _first_token(value_after(lines, "Ausführungstag", (2,)))
        time_token = value_after(lines, "Ausführungszeit", (1, 2), is_time)
        gross = try_normalize(value_after(lines, "Kurswert", (2,)))
        fee = abs(try_normalize(value_after(lines, "Provision", (2,))) or money.ZERO)
        if activity_type is ActivityType.BUY:
            tax = money.ZERO
            amount = money.buy_amount(gross, fee)
        else:
            tax = find_taxes(lines)
            amount = money.sell_amount(gross, fee, tax)
    elif is_dividend(lines):
        activity_type = ActivityType.DIVIDEND
        shares = try_normalize(_first_token(value_after(lines, "Nominale")))
        date_token = value_after(lines, "Zahltag")
        time_token = None
        fee = money.ZERO
        net = try_normalize(value_after(lines, "Gesamtbetrag zu Ihren Gunsten", (2,)))
        gross = try_normalize(value_after(lines, "Brutto", (2,)))
        if gross is None and net is not None:
            tax = find_taxes(lines)
            gross = net + tax
        else:
            tax = money.dividend_tax(gross, net)
        amount = gross
    else:
        raise FieldNotFound("type", "Wertpapierabrechnung/Dividendengutschrift")

    date, datetime = compose(date_token, time_token)
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
    }


class IngParser(BaseBrokerParser):
    broker = BROKER
    single_transaction = True

    def identify(self, pages: Pages, extension: str) -> bool:
        if not pages or not document_contains(pages, "BIC: INGDDEFFXX"):
            return False
        first = pages[0]
        return is_buy(first) or is_sell(first) or is_dividend(first)

    def extract_pages(self, pages: Pages) -> ParseResult:
        return extract_single(self.broker, parse_block, pages)
