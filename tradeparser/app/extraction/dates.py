"""
Composes ISO-8601 dates and UTC timestamps from locale date/time tokens.
"""
from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo
import logging

from tradeparser.app.config import get_settings
from .locator import is_time

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d.%m.%Y"
DATETIME_FORMAT = "%d.%m.%Y %H:%M:%S"


def parse_date(token: str | None, date_format: str = DATE_FORMAT) -> str | None:
    """dd.mm.yyyy -> yyyy-mm-dd, None when the token does not match the format."""
    if not token:
        return None
    try:
        return datetime.strptime(token.strip(), date_format).date().isoformat()
    except ValueError:
        logger.debug(f"Date token {token!r} does not match {date_format!r}")
        return None


def compose(
    date_token: str | None,
    time_token: str | None = None,
    date_format: str = DATE_FORMAT,
    datetime_format: str = DATETIME_FORMAT,
    tz: str | None = None,
) -> tuple[str | None, str | None]:
    """
    Builds the (date, datetime) pair of an activity.

    Args:
        date_token: Date as printed, e.g. "04.06.2020".
        time_token: Optional time as printed, e.g. "16:22:22". Only used when it
            passes the strict time check.
        date_format: strptime format of the date token.
        datetime_format: strptime format of "<date> <time>".
        tz: Zone the document prints local times in. Defaults to Settings.document_timezone.

    Returns:
        tuple: ISO date ("2020-06-04") and UTC ISO timestamp ("2020-06-04T14:22:22Z").
        The timestamp is None when no valid time is available; the date is None
        when the date token is invalid.
    """
    iso_date = parse_date(date_token, date_format)
    if iso_date is None:
        return None, None
    if not is_time(time_token):
        return iso_date, None

    try:
        local = datetime.strptime(f"{date_token.strip()} {time_token.strip()}", datetime_format)
    except ValueError:
        logger.debug(f"Time token {time_token!r} does not match {datetime_format!r}")
        return iso_date, None

    zone = ZoneInfo(tz or get_settings().document_timezone)
    utc = local.replace(tzinfo=zone).astimezone(timezone.utc)
    return iso_date, utc.strftime("%Y-%m-%dT%H:%M:%SZ")


__all__ = ["DATE_FORMAT", "DATETIME_FORMAT", "parse_date", "compose"]
