"""Date/time helpers. All stored and derived timestamps are UTC-aware."""

from datetime import date, datetime
from typing import Any, Optional

import pytz
from dateutil import parser as date_parser

UTC = pytz.UTC


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Naive values from the store are already UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_datetime_utc(value: str) -> datetime:
    """
    Parse a datetime string and return it in UTC.

    If no timezone is provided in the string, assumes UTC.
    """
    return to_utc(date_parser.parse(value))


def coerce_datetime(value: Any) -> Optional[datetime]:
    """Best-effort conversion to an aware UTC datetime; None when unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return UTC.localize(datetime(value.year, value.month, value.day))
    if isinstance(value, str):
        try:
            return parse_datetime_utc(value)
        except (ValueError, OverflowError):
            return None
    return None


def month_key(dt: datetime) -> str:
    """Return the YYYY-MM bucket of a datetime (UTC)."""
    return to_utc(dt).strftime("%Y-%m")


def month_start(dt: datetime) -> datetime:
    """Return midnight UTC on the first day of dt's month."""
    dt = to_utc(dt)
    return UTC.localize(datetime(dt.year, dt.month, 1))
