"""Pydantic schemas for API request/response."""

from networth.api.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountListResponse,
)
from networth.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
    TransactionListResponse,
)
from networth.api.schemas.analysis import (
    BalancePointResponse,
    BalanceResponse,
    NetWorthPointResponse,
    NetWorthResponse,
    HoldingResponse,
    HoldingsResponse,
    CategoryTotalResponse,
    SpendingResponse,
    MonthlyCashFlowResponse,
    CashFlowResponse,
    PerformanceResponse,
)
from networth.api.schemas.budget import (
    BudgetCreateRequest,
    BudgetUpdateRequest,
    BudgetResponse,
    BudgetListResponse,
    BudgetProgressResponse,
    BudgetProgressListResponse,
)
from networth.api.schemas.schedule import (
    ScheduleCreateRequest,
    ScheduleUpdateRequest,
    ScheduleResponse,
    ScheduleListResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AccountListResponse",
    "TransactionCreateRequest",
    "TransactionUpdateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "BalancePointResponse",
    "BalanceResponse",
    "NetWorthPointResponse",
    "NetWorthResponse",
    "HoldingResponse",
    "HoldingsResponse",
    "CategoryTotalResponse",
    "SpendingResponse",
    "MonthlyCashFlowResponse",
    "CashFlowResponse",
    "PerformanceResponse",
    "BudgetCreateRequest",
    "BudgetUpdateRequest",
    "BudgetResponse",
    "BudgetListResponse",
    "BudgetProgressResponse",
    "BudgetProgressListResponse",
    "ScheduleCreateRequest",
    "ScheduleUpdateRequest",
    "ScheduleResponse",
    "ScheduleListResponse",
]
