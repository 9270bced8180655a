"""Domain models package."""

from networth.domain.models.enums import (
    AccountType,
    InvestmentTransactionType,
    NetWorthGranularity,
    TimeRange,
    BudgetFrequency,
    ScheduleFrequency,
    NON_POSITION_TYPES,
    SPENDING_ACCOUNT_TYPES,
)
from networth.domain.models.account import Account
from networth.domain.models.transaction import Transaction
from networth.domain.models.budget import Budget, parse_categories
from networth.domain.models.recurring_schedule import RecurringSchedule

__all__ = [
    "AccountType",
    "InvestmentTransactionType",
    "NetWorthGranularity",
    "TimeRange",
    "BudgetFrequency",
    "ScheduleFrequency",
    "NON_POSITION_TYPES",
    "SPENDING_ACCOUNT_TYPES",
    "Account",
    "Transaction",
    "Budget",
    "parse_categories",
    "RecurringSchedule",
]
