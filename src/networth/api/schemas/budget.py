"""Pydantic schemas for budget endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from networth.domain.models.enums import BudgetFrequency


class BudgetCreateRequest(BaseModel):
    """Request schema for creating a budget."""

    name: str = Field(..., min_length=1, max_length=255)
    categories: list[str] = Field(..., min_length=1, description="Category names the budget covers")
    budget_amount: Decimal = Field(..., gt=0, description="Limit per period")
    frequency: BudgetFrequency = Field(default=BudgetFrequency.MONTHLY)


class BudgetUpdateRequest(BaseModel):
    """Request schema for editing a budget (partial update)."""

    name: Optional[str] = Field(default=None, max_length=255)
    categories: Optional[list[str]] = None
    budget_amount: Optional[Decimal] = Field(default=None, gt=0)
    frequency: Optional[BudgetFrequency] = None


class BudgetResponse(BaseModel):
    """Response schema for a single budget."""

    model_config = {"from_attributes": True}

    budget_id: str
    name: str
    categories: list[str]
    budget_amount: Decimal
    frequency: BudgetFrequency
    created_at: Optional[datetime] = None


class BudgetListResponse(BaseModel):
    """Response schema for listing budgets."""

    budgets: list[BudgetResponse]
    count: int


class BudgetProgressResponse(BaseModel):
    """Spending against a budget for its current period."""

    model_config = {"from_attributes": True}

    budget_id: str
    name: str
    categories: list[str]
    frequency: BudgetFrequency
    budget_amount: Decimal
    period_start: datetime
    period_end: datetime
    spent: Decimal
    remaining: Decimal
    progress_percent: Optional[Decimal] = None


class BudgetProgressListResponse(BaseModel):
    """Progress of every budget."""

    budgets: list[BudgetProgressResponse]
    count: int
