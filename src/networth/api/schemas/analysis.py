"""Pydantic schemas for analysis endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from networth.domain.models.enums import NetWorthGranularity, TimeRange


class BalancePointResponse(BaseModel):
    """A single point of a balance history."""

    model_config = {"from_attributes": True}

    date: datetime
    balance: Decimal


class BalanceResponse(BaseModel):
    """Current balance plus history for one account."""

    account_id: str
    balance: Decimal
    points: list[BalancePointResponse]


class NetWorthPointResponse(BaseModel):
    """A single point of a net worth series."""

    model_config = {"from_attributes": True}

    date: datetime
    net_worth: Decimal


class NetWorthResponse(BaseModel):
    """Net worth series across accounts."""

    granularity: NetWorthGranularity
    time_range: TimeRange
    points: list[NetWorthPointResponse]


class HoldingResponse(BaseModel):
    """Response schema for a single holding."""

    model_config = {"from_attributes": True}

    symbol: str
    quantity: Decimal
    average_cost: Decimal
    total_cost: Decimal
    total_value: Decimal
    gain: Decimal
    gain_percent: Optional[Decimal] = None
    last_price: Optional[Decimal] = None


class HoldingsResponse(BaseModel):
    """Response schema for holdings of one investment account."""

    account_id: str
    holdings: list[HoldingResponse]
    total_cost: Decimal
    total_value: Decimal


class CategoryTotalResponse(BaseModel):
    """Spending total for one category."""

    model_config = {"from_attributes": True}

    category: str
    total_amount: Decimal


class SpendingResponse(BaseModel):
    """Top spending categories."""

    time_range: TimeRange
    categories: list[CategoryTotalResponse]
    total: Decimal


class MonthlyCashFlowResponse(BaseModel):
    """Income/spending split for one month."""

    model_config = {"from_attributes": True}

    month: str
    income: Decimal
    spending: Decimal


class CashFlowResponse(BaseModel):
    """Monthly income/spending series."""

    time_range: TimeRange
    months: list[MonthlyCashFlowResponse]


class PerformanceResponse(BaseModel):
    """Contribution-based performance of an investment account."""

    model_config = {"from_attributes": True}

    total_contributions: Decimal
    total_withdrawals: Decimal
    net_contributions: Decimal
    total_dividends: Decimal
    current_balance: Decimal
    total_gain: Decimal
    total_gain_percent: Optional[Decimal] = None
