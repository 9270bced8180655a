"""SQLAlchemy repository implementations."""

from networth.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from networth.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from networth.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from networth.repositories.sqlalchemy.budget_repo import SqlAlchemyBudgetRepository
from networth.repositories.sqlalchemy.schedule_repo import SqlAlchemyScheduleRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyBudgetRepository",
    "SqlAlchemyScheduleRepository",
]
