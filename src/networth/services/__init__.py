"""Service layer - business logic orchestration."""

from networth.services import aggregator
from networth.services.ledger_service import LedgerService, TransactionCreate, TransactionUpdate
from networth.services.analysis_service import AnalysisService
from networth.services.budget_service import BudgetService, BudgetUpdate
from networth.services.schedule_service import ScheduleService, ScheduleCreate, ScheduleUpdate

__all__ = [
    "aggregator",
    "LedgerService",
    "TransactionCreate",
    "TransactionUpdate",
    "AnalysisService",
    "BudgetService",
    "BudgetUpdate",
    "ScheduleService",
    "ScheduleCreate",
    "ScheduleUpdate",
]
