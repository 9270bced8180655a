"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TransactionCreateRequest(BaseModel):
    """Request schema for recording a transaction."""

    account_id: str = Field(..., description="Account ID")
    amount: Decimal = Field(..., description="Signed amount: positive inflow, negative outflow")
    transaction_date: Optional[datetime] = Field(
        default=None,
        description="Effective date/time; defaults to now (UTC)",
    )
    transaction_type: Optional[str] = Field(
        default=None,
        max_length=50,
        description="buy/sell/dividend/contribution/withdrawal for investment accounts",
    )
    ticker_symbol: Optional[str] = Field(default=None, max_length=20)
    quantity: Optional[Decimal] = Field(default=None, gt=0)
    price_per_unit: Optional[Decimal] = Field(default=None, ge=0)
    fee: Optional[Decimal] = Field(default=None, ge=0)
    merchant: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("ticker_symbol")
    @classmethod
    def uppercase_symbol(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v else None


class TransactionUpdateRequest(BaseModel):
    """Request schema for editing a transaction (partial update)."""

    amount: Optional[Decimal] = None
    transaction_date: Optional[datetime] = None
    transaction_type: Optional[str] = Field(default=None, max_length=50)
    ticker_symbol: Optional[str] = Field(default=None, max_length=20)
    quantity: Optional[Decimal] = Field(default=None, gt=0)
    price_per_unit: Optional[Decimal] = Field(default=None, ge=0)
    fee: Optional[Decimal] = Field(default=None, ge=0)
    merchant: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("ticker_symbol")
    @classmethod
    def uppercase_symbol(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v else None


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    transaction_id: str
    account_id: str
    transaction_date: datetime
    amount: Decimal
    transaction_type: Optional[str] = None
    ticker_symbol: Optional[str] = None
    quantity: Optional[Decimal] = None
    price_per_unit: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    merchant: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    currency: Optional[str] = None


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    transactions: list[TransactionResponse]
    count: int
