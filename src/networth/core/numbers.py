"""Numeric coercion for store records."""

from decimal import Decimal, InvalidOperation, getcontext
from typing import Any, Optional


def _exponent_limit() -> int:
    # Products and ratios of two coerced values must stay inside the context
    return getcontext().Emax // 8


def coerce_decimal(value: Any) -> Optional[Decimal]:
    """
    Convert a store value to Decimal.

    Returns None for missing, non-numeric or non-finite input rather than raising.
    Magnitudes so large or so small that aggregation arithmetic on them would
    overflow the decimal context are treated as malformed too.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None
    if not result.is_finite():
        return None
    if not result.is_zero() and abs(result.adjusted()) > _exponent_limit():
        return None
    return result


def normalize_symbol(s: Optional[str]) -> Optional[str]:
    """Normalize symbol: strip whitespace and uppercase; None or empty -> None."""
    if s is None:
        return None
    stripped = str(s).strip().upper()
    return stripped if stripped else None
