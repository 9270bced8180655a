"""SQLAlchemy ORM model definitions."""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Date,
    DateTime,
    Text,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from networth.repositories.sqlalchemy.database import Base
from networth.domain.models.enums import AccountType, BudgetFrequency, ScheduleFrequency


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    account_id = Column(String(36), primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    account_type = Column(SqlEnum(AccountType), nullable=False, default=AccountType.BANK)
    institution = Column(String(255), nullable=True)
    currency = Column(String(3), nullable=False, default="CAD")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    transactions = relationship(
        "TransactionORM",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    schedules = relationship(
        "RecurringScheduleORM",
        back_populates="account",
        cascade="all, delete-orphan",
    )


class TransactionORM(Base):
    """SQLAlchemy model for Transaction (ledger entry)."""

    __tablename__ = "transactions"

    transaction_id = Column(String(36), primary_key=True)
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False, index=True)
    transaction_date = Column(DateTime(timezone=True), nullable=False, index=True)
    amount = Column(Numeric(precision=16, scale=8), nullable=False)
    transaction_type = Column(String(50), nullable=True)
    ticker_symbol = Column(String(20), nullable=True)
    quantity = Column(Numeric(precision=16, scale=6), nullable=True)
    price_per_unit = Column(Numeric(precision=16, scale=4), nullable=True)
    fee = Column(Numeric(precision=12, scale=2), nullable=True)
    merchant = Column(String(255), nullable=True)
    category = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    currency = Column(String(3), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    account = relationship("AccountORM", back_populates="transactions")


class BudgetORM(Base):
    """SQLAlchemy model for Budget."""

    __tablename__ = "budgets"

    budget_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    # Comma-separated category names
    categories = Column(Text, nullable=False)
    budget_amount = Column(Numeric(precision=12, scale=2), nullable=False)
    frequency = Column(SqlEnum(BudgetFrequency), nullable=False, default=BudgetFrequency.MONTHLY)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class RecurringScheduleORM(Base):
    """SQLAlchemy model for RecurringSchedule."""

    __tablename__ = "recurring_schedules"

    schedule_id = Column(String(36), primary_key=True)
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False, index=True)
    frequency = Column(SqlEnum(ScheduleFrequency), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    amount = Column(Numeric(precision=12, scale=2), nullable=False)
    merchant = Column(String(255), nullable=True)
    category = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    account = relationship("AccountORM", back_populates="schedules")
