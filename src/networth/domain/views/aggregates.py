"""View models for derived metrics."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class BalancePoint:
    """Running balance after one transaction."""

    date: datetime
    balance: Decimal


@dataclass
class NetWorthPoint:
    """Combined balance across accounts at a point in time."""

    date: datetime
    net_worth: Decimal


@dataclass
class Holding:
    """
    Derived position in one symbol within an investment account.

    Valued at the last transaction price seen for the symbol, not a live quote.
    """

    symbol: str
    quantity: Decimal = field(default_factory=lambda: Decimal("0"))
    average_cost: Decimal = field(default_factory=lambda: Decimal("0"))
    total_cost: Decimal = field(default_factory=lambda: Decimal("0"))
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    gain: Decimal = field(default_factory=lambda: Decimal("0"))
    gain_percent: Optional[Decimal] = None
    last_price: Optional[Decimal] = None


@dataclass
class CategoryTotal:
    """Spending total for one category."""

    category: str
    total_amount: Decimal


@dataclass
class MonthlyCashFlow:
    """Income and spending within one calendar month."""

    month: str
    income: Decimal = field(default_factory=lambda: Decimal("0"))
    spending: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def net(self) -> Decimal:
        return self.income - self.spending


@dataclass
class PerformanceView:
    """Contribution-based return summary for an investment account."""

    total_contributions: Decimal = field(default_factory=lambda: Decimal("0"))
    total_withdrawals: Decimal = field(default_factory=lambda: Decimal("0"))
    net_contributions: Decimal = field(default_factory=lambda: Decimal("0"))
    total_dividends: Decimal = field(default_factory=lambda: Decimal("0"))
    current_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    total_gain: Decimal = field(default_factory=lambda: Decimal("0"))
    total_gain_percent: Optional[Decimal] = None


@dataclass
class BudgetProgress:
    """
    Spending against a budget for the period containing "now".

    remaining goes negative once the budget is overspent. progress_percent is
    capped at 100 and is None when the budget amount is not positive.
    """

    budget_id: str
    name: str
    categories: list[str]
    frequency: str
    budget_amount: Decimal
    period_start: datetime
    period_end: datetime
    spent: Decimal = field(default_factory=lambda: Decimal("0"))
    remaining: Decimal = field(default_factory=lambda: Decimal("0"))
    progress_percent: Optional[Decimal] = None


@dataclass
class ScheduleView:
    """A recurring schedule with its state relative to a given day."""

    schedule_id: str
    account_id: str
    frequency: str
    start_date: date
    amount: Decimal
    end_date: Optional[date] = None
    merchant: Optional[str] = None
    category: Optional[str] = None
    is_active: bool = False
    next_occurrence: Optional[date] = None
