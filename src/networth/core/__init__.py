"""Core utilities and shared functionality."""

from networth.core.timezone import (
    now_utc,
    to_utc,
    parse_datetime_utc,
    coerce_datetime,
    month_key,
    month_start,
    UTC,
)
from networth.core.numbers import coerce_decimal, normalize_symbol
from networth.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    StoreUnavailableError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_datetime_utc",
    "coerce_datetime",
    "month_key",
    "month_start",
    "UTC",
    "coerce_decimal",
    "normalize_symbol",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "StoreUnavailableError",
]
