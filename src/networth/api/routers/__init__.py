"""API routers package."""

from networth.api.routers.accounts import router as accounts_router
from networth.api.routers.transactions import router as transactions_router
from networth.api.routers.analysis import router as analysis_router
from networth.api.routers.budgets import router as budgets_router
from networth.api.routers.schedules import router as schedules_router

__all__ = [
    "accounts_router",
    "transactions_router",
    "analysis_router",
    "budgets_router",
    "schedules_router",
]
