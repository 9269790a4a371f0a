"""
Boundary check that every candidate record passes before it is emitted.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from tradeparser.app.config import get_settings
from .errors import InvalidRecord
from .models import Activity
from .money import reconciles

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("broker", "type", "date", "company", "shares", "price", "amount", "fee", "tax")


def _is_present(value: Any) -> bool:
    # Zero is a legitimate fee or tax, False / None / "" are not values.
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return True
    return bool(value)


def check_activity(candidate: Mapping[str, Any]) -> Activity:
    """
    Builds an Activity from a candidate dict or raises InvalidRecord.

    Raises:
        InvalidRecord: required field missing, type constraint violated or the
            amount does not reconcile with price, shares, fee and tax.
    """
    missing = [name for name in REQUIRED_FIELDS if not _is_present(candidate.get(name))]
    if missing:
        raise InvalidRecord(missing)

    try:
        activity = Activity.model_validate(dict(candidate))
    except ValidationError as exc:
        fields = []
        for error in exc.errors():
            loc = ".".join(str(part) for part in error["loc"]) or "record"
            if loc not in fields:
                fields.append(loc)
        raise InvalidRecord(fields, reason="constraint violated") from exc

    tolerance = get_settings().amount_tolerance
    if not reconciles(
        activity.type, activity.price, activity.shares, activity.amount,
        activity.fee, activity.tax, tolerance,
    ):
        raise InvalidRecord(["amount"], reason="amount does not reconcile")
    return activity


def validate_activity(
    candidate: Mapping[str, Any],
    source_lines: Sequence[str] | None = None,
) -> Activity | None:
    """
    Same as check_activity, but logs and returns None on rejection.
    """
    try:
        return check_activity(candidate)
    except InvalidRecord as exc:
        broker = candidate.get("broker") or "unknown"
        logger.error(f"[{broker}] Rejected activity: {exc}")
        if source_lines is not None:
            logger.debug(f"[{broker}] Source lines: {list(source_lines)}")
        return None


__all__ = ["REQUIRED_FIELDS", "check_activity", "validate_activity"]
