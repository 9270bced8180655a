"""Enumerations for domain models."""

from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Kinds of accounts a user can keep."""

    BANK = "bank"
    CRYPTO = "crypto"
    CREDIT = "credit"
    SAVINGS = "savings"
    INVESTMENT = "investment"


class InvestmentTransactionType(str, Enum):
    """Transaction types allowed on investment accounts."""

    BUY = "buy"
    SELL = "sell"
    DIVIDEND = "dividend"
    CONTRIBUTION = "contribution"
    WITHDRAWAL = "withdrawal"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["InvestmentTransactionType"]:
        """Case-insensitive lookup; None for free-form or missing types."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


# Investment types that never move a position
NON_POSITION_TYPES = frozenset(
    {
        InvestmentTransactionType.DIVIDEND,
        InvestmentTransactionType.CONTRIBUTION,
        InvestmentTransactionType.WITHDRAWAL,
    }
)


# Account types whose outflows count as spending
SPENDING_ACCOUNT_TYPES = frozenset(
    {
        AccountType.BANK,
        AccountType.CREDIT,
        AccountType.SAVINGS,
    }
)


class TimeRange(str, Enum):
    """Trailing reporting windows."""

    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    TWO_YEARS = "2Y"
    ALL = "ALL"

    @property
    def months(self) -> Optional[int]:
        """Window length in calendar months; None when unbounded."""
        return _TIME_RANGE_MONTHS[self]


_TIME_RANGE_MONTHS = {
    TimeRange.THREE_MONTHS: 3,
    TimeRange.SIX_MONTHS: 6,
    TimeRange.ONE_YEAR: 12,
    TimeRange.TWO_YEARS: 24,
    TimeRange.ALL: None,
}


class NetWorthGranularity(str, Enum):
    """Point density of a net worth series."""

    TRANSACTION = "transaction"
    MONTH = "month"


class BudgetFrequency(str, Enum):
    """Length of the period a budget limit applies to."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ScheduleFrequency(str, Enum):
    """Repeat interval of a recurring schedule."""

    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"
