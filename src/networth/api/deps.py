"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from networth.config.settings import get_settings
from networth.repositories.sqlalchemy.database import get_db
from networth.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyBudgetRepository,
    SqlAlchemyScheduleRepository,
)
from networth.services import LedgerService, AnalysisService, BudgetService, ScheduleService


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_budget_repo(db: Session = Depends(get_db)) -> SqlAlchemyBudgetRepository:
    """Provide BudgetRepository instance."""
    return SqlAlchemyBudgetRepository(db)


def get_schedule_repo(db: Session = Depends(get_db)) -> SqlAlchemyScheduleRepository:
    """Provide ScheduleRepository instance."""
    return SqlAlchemyScheduleRepository(db)


def get_ledger_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> LedgerService:
    """Provide LedgerService instance."""
    return LedgerService(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
        default_currency=get_settings().default_currency,
    )


def get_analysis_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> AnalysisService:
    """Provide AnalysisService instance."""
    settings = get_settings()
    return AnalysisService(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
        spending_top_n=settings.spending_top_n,
        uncategorized_label=settings.uncategorized_label,
    )


def get_budget_service(
    budget_repo: SqlAlchemyBudgetRepository = Depends(get_budget_repo),
) -> BudgetService:
    """Provide BudgetService instance."""
    return BudgetService(budget_repo=budget_repo)


def get_schedule_service(
    schedule_repo: SqlAlchemyScheduleRepository = Depends(get_schedule_repo),
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> ScheduleService:
    """Provide ScheduleService instance."""
    return ScheduleService(schedule_repo=schedule_repo, account_repo=account_repo)
