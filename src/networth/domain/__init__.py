"""Domain layer - pure business models with no persistence dependencies."""

from networth.domain.models import (
    Account,
    Transaction,
    AccountType,
    InvestmentTransactionType,
    NetWorthGranularity,
    TimeRange,
)

__all__ = [
    "Account",
    "Transaction",
    "AccountType",
    "InvestmentTransactionType",
    "NetWorthGranularity",
    "TimeRange",
]
