"""Pydantic schemas for account endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from networth.domain.models.enums import AccountType


class AccountCreate(BaseModel):
    """Request schema for creating an account."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique account name")
    account_type: AccountType = Field(default=AccountType.BANK, description="Account type")
    institution: Optional[str] = Field(default=None, max_length=255)
    currency: Optional[str] = Field(
        default=None,
        min_length=3,
        max_length=3,
        description="ISO currency code; defaults to the configured currency",
    )


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    account_id: str
    name: str
    account_type: AccountType
    institution: Optional[str] = None
    currency: str
    created_at: Optional[datetime] = None
    balance: Optional[Decimal] = None


class AccountListResponse(BaseModel):
    """Response schema for listing accounts."""

    accounts: list[AccountResponse]
    count: int
