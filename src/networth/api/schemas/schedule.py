"""Pydantic schemas for recurring schedule endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from networth.domain.models.enums import ScheduleFrequency


class ScheduleCreateRequest(BaseModel):
    """Request schema for creating a recurring schedule."""

    account_id: str = Field(..., description="Account ID")
    frequency: ScheduleFrequency
    start_date: date
    amount: Decimal = Field(..., description="Signed amount of each occurrence")
    end_date: Optional[date] = None
    merchant: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=100)


class ScheduleUpdateRequest(BaseModel):
    """Request schema for editing a schedule (partial update)."""

    frequency: Optional[ScheduleFrequency] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    amount: Optional[Decimal] = None
    merchant: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=100)


class ScheduleResponse(BaseModel):
    """Response schema for a schedule and its state as of today."""

    model_config = {"from_attributes": True}

    schedule_id: str
    account_id: str
    frequency: ScheduleFrequency
    start_date: date
    amount: Decimal
    end_date: Optional[date] = None
    merchant: Optional[str] = None
    category: Optional[str] = None
    is_active: bool
    next_occurrence: Optional[date] = None


class ScheduleListResponse(BaseModel):
    """Response schema for listing schedules."""

    schedules: list[ScheduleResponse]
    count: int
