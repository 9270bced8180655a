"""Repository layer - data access abstractions and implementations."""

from networth.repositories.protocols import (
    AccountRepository,
    TransactionRepository,
    BudgetRepository,
    ScheduleRepository,
)

__all__ = [
    "AccountRepository",
    "TransactionRepository",
    "BudgetRepository",
    "ScheduleRepository",
]
