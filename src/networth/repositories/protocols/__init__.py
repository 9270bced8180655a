"""Repository protocol definitions (interfaces)."""

from networth.repositories.protocols.account_repo import AccountRepository
from networth.repositories.protocols.transaction_repo import TransactionRepository
from networth.repositories.protocols.budget_repo import BudgetRepository
from networth.repositories.protocols.schedule_repo import ScheduleRepository

__all__ = [
    "AccountRepository",
    "TransactionRepository",
    "BudgetRepository",
    "ScheduleRepository",
]
