"""
Generic text locators: find an anchor line, read a related line.

Anchors drift between document revisions, so a parser declares an ordered
list of fallback offsets and a shape the value must have; the first offset
whose line has the expected shape wins. Nothing here raises, a lookup that
fails returns None.
"""
from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence, Union

from .numbers import is_amount

Predicate = Callable[[str], bool]
Anchor = Union[str, Predicate]

_DATE_RE = re.compile(r"^(0[1-9]|[12]\d|3[01])\.(0[1-9]|1[0-2])\.\d{4}$")
_DATE_IN_TEXT_RE = re.compile(r"(?<!\d)(?:0[1-9]|[12]\d|3[01])\.(?:0[1-9]|1[0-2])\.\d{4}(?!\d)")
_TIME_RE = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d:[0-5]\d$")
_TIME_NO_SECONDS_RE = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d(?::[0-5]\d)?$")
_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
_ISIN_RE = re.compile(r"^[A-Z]{2}(?![A-Z]{10})[A-Z0-9]{10}$")
_WKN_RE = re.compile(r"^[A-Z0-9]{6}$")


# Anchor predicates

def contains(phrase: str, ignore_case: bool = False) -> Predicate:
    if ignore_case:
        needle = phrase.lower()
        return lambda line: needle in line.lower()
    return lambda line: phrase in line


def equals(phrase: str, ignore_case: bool = False) -> Predicate:
    if ignore_case:
        needle = phrase.lower()
        return lambda line: line.lower() == needle
    return lambda line: line == phrase


def starts_with(phrase: str, ignore_case: bool = False) -> Predicate:
    if ignore_case:
        needle = phrase.lower()
        return lambda line: line.lower().startswith(needle)
    return lambda line: line.startswith(phrase)


def any_of(*anchors: Anchor) -> Predicate:
    predicates = [_as_predicate(a) for a in anchors]
    return lambda line: any(p(line) for p in predicates)


def _as_predicate(anchor: Anchor) -> Predicate:
    if isinstance(anchor, str):
        return contains(anchor)
    return anchor


# Shapes

def is_date(token: str | None) -> bool:
    return bool(token) and bool(_DATE_RE.match(token.strip()))


def is_time(token: str | None, with_seconds: bool = True) -> bool:
    if not token:
        return False
    pattern = _TIME_RE if with_seconds else _TIME_NO_SECONDS_RE
    return bool(pattern.match(token.strip()))


def is_currency_code(token: str | None) -> bool:
    return bool(token) and bool(_CURRENCY_RE.match(token.strip()))


def is_isin(token: str | None) -> bool:
    return bool(token) and bool(_ISIN_RE.match(token.strip()))


def is_wkn(token: str | None) -> bool:
    return bool(token) and bool(_WKN_RE.match(token.strip()))


def has_date(line: str | None) -> bool:
    return date_in(line) is not None


def date_in(line: str | None) -> str | None:
    """First dd.mm.yyyy token inside a line."""
    if not line:
        return None
    match = _DATE_IN_TEXT_RE.search(line)
    return match.group(0) if match else None


def is_amount_line(line: str | None) -> bool:
    """Line whose first token is money-shaped ("12,34" or "12,34 EUR")."""
    if not line:
        return False
    return is_amount(line.split()[0])


# Lookups

def find_anchor(lines: Sequence[str], anchor: Anchor, start: int = 0) -> int | None:
    """Index of the first line (from `start`, top to bottom) satisfying the anchor."""
    predicate = _as_predicate(anchor)
    for idx in range(max(start, 0), len(lines)):
        if predicate(lines[idx]):
            return idx
    return None


def find_last_anchor(lines: Sequence[str], anchor: Anchor) -> int | None:
    predicate = _as_predicate(anchor)
    for idx in range(len(lines) - 1, -1, -1):
        if predicate(lines[idx]):
            return idx
    return None


def read_at(lines: Sequence[str], anchor_index: int | None, offset: int = 0) -> str | None:
    """Line at anchor_index + offset, None when the anchor is missing or out of range."""
    if anchor_index is None:
        return None
    idx = anchor_index + offset
    if idx < 0 or idx >= len(lines):
        return None
    return lines[idx]


def read_first(
    lines: Sequence[str],
    anchor_index: int | None,
    offsets: Iterable[int],
    shape: Predicate | None = None,
) -> str | None:
    """Tries the offsets in order and returns the first line matching `shape`."""
    for offset in offsets:
        value = read_at(lines, anchor_index, offset)
        if value is None:
            continue
        if shape is None or shape(value):
            return value
    return None


def value_after(
    lines: Sequence[str],
    anchor: Anchor,
    offsets: Iterable[int] = (1,),
    shape: Predicate | None = None,
) -> str | None:
    """find_anchor + read_first in one call."""
    return read_first(lines, find_anchor(lines, anchor), offsets, shape)


def scan(
    lines: Sequence[str],
    start: int | None,
    predicate: Predicate,
    step: int = 1,
    limit: int | None = None,
) -> int | None:
    """Index of the first line from `start` (stepping by `step`) satisfying the predicate."""
    if start is None or step == 0:
        return None
    idx = start
    visited = 0
    while 0 <= idx < len(lines):
        if limit is not None and visited >= limit:
            return None
        if predicate(lines[idx]):
            return idx
        idx += step
        visited += 1
    return None


def read_until(
    lines: Sequence[str],
    anchor_index: int | None,
    stop: Anchor,
    include_stop: bool = False,
) -> list[str] | None:
    """Lines after the anchor up to the stop line; None when no stop line follows."""
    if anchor_index is None:
        return None
    stop_idx = find_anchor(lines, stop, anchor_index + 1)
    if stop_idx is None:
        return None
    end = stop_idx + 1 if include_stop else stop_idx
    return list(lines[anchor_index + 1:end])


def find_first_isin(lines: Sequence[str], start: int = 0) -> int | None:
    return find_anchor(lines, is_isin, start)


def flatten(pages: Sequence[Sequence[str]]) -> list[str]:
    return [line for page in pages for line in page]


def document_contains(pages: Sequence[Sequence[str]], anchor: Anchor) -> bool:
    predicate = _as_predicate(anchor)
    return any(predicate(line) for page in pages for line in page)


__all__ = [
    "contains",
    "equals",
    "starts_with",
    "any_of",
    "is_date",
    "is_time",
    "is_currency_code",
    "is_isin",
    "is_wkn",
    "has_date",
    "date_in",
    "is_amount_line",
    "find_anchor",
    "find_last_anchor",
    "read_at",
    "read_first",
    "value_after",
    "scan",
    "read_until",
    "find_first_isin",
    "flatten",
    "document_contains",
]
