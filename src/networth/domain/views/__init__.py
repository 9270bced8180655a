"""View models for service outputs."""

from networth.domain.views.aggregates import (
    BalancePoint,
    NetWorthPoint,
    Holding,
    CategoryTotal,
    MonthlyCashFlow,
    PerformanceView,
    BudgetProgress,
    ScheduleView,
)

__all__ = [
    "BalancePoint",
    "NetWorthPoint",
    "Holding",
    "CategoryTotal",
    "MonthlyCashFlow",
    "PerformanceView",
    "BudgetProgress",
    "ScheduleView",
]
