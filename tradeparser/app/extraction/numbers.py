"""
Locale-aware conversion of numeric tokens into exact Decimal values.

Brokerage documents print numbers with comma decimals and dot thousands
("1.234,56"), negative values with a trailing minus ("4,29-").
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
import re

from .errors import MalformedNumber

_GROUPED_RE = {
    ",": re.compile(r"(?:\d{1,3}(?:\.\d{3})+|\d+)(?:,\d+)?"),
    ".": re.compile(r"(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?"),
}
_AMOUNT_RE = re.compile(r"^[-+]?(?:\d{1,3}(?:\.\d{3})+|\d+),\d{2,}-?$")
_NUMBER_RE = re.compile(r"^[-+]?(?:\d{1,3}(?:\.\d{3})+|\d+)(?:,\d+)?-?$")
_AMOUNT_IN_TEXT_RE = re.compile(r"(?<![\d.,])-?(?:\d{1,3}(?:\.\d{3})+|\d+),\d{2,}-?(?![\d,])")


def normalize(raw: str, decimal_separator: str = ",") -> Decimal:
    """
    Converts a locale formatted token into Decimal.

    Args:
        raw: Token such as "1.234,56", "4,29-" or "-0,5".
        decimal_separator: "," (default, dot thousands) or "." (comma thousands).

    Returns:
        Decimal: exact value, negative when a leading or trailing minus is present.

    Raises:
        MalformedNumber: no digit present, token not numeric or its thousands
            groups are not three digits wide.
    """
    if isinstance(raw, Decimal):
        return raw
    if raw is None:
        raise MalformedNumber(raw)

    text = str(raw).strip().replace(" ", "").replace("\u00a0", "")
    if not any(ch.isdigit() for ch in text):
        raise MalformedNumber(raw)

    negative = False
    if text.endswith("-"):
        negative = True
        text = text[:-1]
    if text.startswith("-"):
        negative = True
        text = text[1:]
    elif text.startswith("+"):
        text = text[1:]

    # "1.5" is a broken thousands group, not 15
    if not _GROUPED_RE["," if decimal_separator == "," else "."].fullmatch(text):
        raise MalformedNumber(raw)
    thousands = "." if decimal_separator == "," else ","
    text = text.replace(thousands, "").replace(decimal_separator, ".")

    try:
        value = Decimal(text)
    except InvalidOperation as exc:  # pragma: no cover - regex already guards
        raise MalformedNumber(raw) from exc
    return -value if negative else value


def try_normalize(raw: str | None, decimal_separator: str = ",") -> Decimal | None:
    """Same as normalize, but a missing or malformed token becomes None."""
    if raw is None:
        return None
    try:
        return normalize(raw, decimal_separator)
    except MalformedNumber:
        return None


def format_number(value: Decimal, decimal_separator: str = ",") -> str:
    """Canonical locale string for a Decimal, e.g. Decimal("1234.5") -> "1.234,5"."""
    thousands = "." if decimal_separator == "," else ","
    text = format(abs(value), "f")
    int_part, _, frac = text.partition(".")
    grouped = f"{int(int_part):,}".replace(",", thousands)
    result = f"{grouped}{decimal_separator}{frac}" if frac else grouped
    return f"-{result}" if value < 0 else result


def is_amount(token: str | None) -> bool:
    """True for money-shaped tokens: "547,80", "1.234,56", "4,29-"."""
    return bool(token) and bool(_AMOUNT_RE.match(token.strip()))


def is_number(token: str | None) -> bool:
    """True for any locale number token, with or without decimals ("10", "6,9666")."""
    return bool(token) and bool(_NUMBER_RE.match(token.strip()))


def amounts_in(line: str | None) -> list[str]:
    """Money-shaped tokens found inside a free text line, in order."""
    if not line:
        return []
    return _AMOUNT_IN_TEXT_RE.findall(line)


__all__ = [
    "normalize",
    "try_normalize",
    "format_number",
    "is_amount",
    "is_number",
    "amounts_in",
]
