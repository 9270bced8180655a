"""SQLAlchemy implementation of TransactionRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from networth.core.timezone import now_utc, to_utc
from networth.domain.models import Transaction
from networth.repositories.sqlalchemy.orm_models import TransactionORM

_COPIED_FIELDS = (
    "account_id",
    "transaction_date",
    "amount",
    "transaction_type",
    "ticker_symbol",
    "quantity",
    "price_per_unit",
    "fee",
    "merchant",
    "category",
    "description",
    "currency",
)


def _decimal_or_none(value) -> Optional[Decimal]:
    return Decimal(str(value)) if value is not None else None


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        orm_txn = self._to_orm(transaction)
        self._db.add(orm_txn)
        self._db.commit()
        self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction_id
        ).first()
        return self._to_domain(orm_txn) if orm_txn else None

    def replace(self, transaction: Transaction) -> Transaction:
        """Overwrite the stored row with the superseding value."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction.transaction_id
        ).first()
        if not orm_txn:
            raise ValueError(f"Transaction not found: {transaction.transaction_id}")

        for name in _COPIED_FIELDS:
            setattr(orm_txn, name, getattr(transaction, name))

        self._db.commit()
        self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def delete(self, transaction_id: str) -> None:
        """Remove a transaction; no-op when absent."""
        self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction_id
        ).delete()
        self._db.commit()

    def list_by_account(self, account_id: str) -> list[Transaction]:
        """List all transactions for an account, ordered by transaction_date."""
        query = (
            self._db.query(TransactionORM)
            .filter(TransactionORM.account_id == account_id)
            .order_by(TransactionORM.transaction_date, TransactionORM.created_at)
        )
        return [self._to_domain(t) for t in query.all()]

    def query(
        self,
        account_ids: Optional[list[str]] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        """Query transactions with filters."""
        query = self._db.query(TransactionORM)

        conditions = []
        if account_ids:
            conditions.append(TransactionORM.account_id.in_(account_ids))
        if start_date:
            conditions.append(TransactionORM.transaction_date >= to_utc(start_date))
        if end_date:
            conditions.append(TransactionORM.transaction_date <= to_utc(end_date))

        if conditions:
            query = query.filter(and_(*conditions))

        query = query.order_by(TransactionORM.transaction_date, TransactionORM.created_at)
        return [self._to_domain(t) for t in query.all()]

    @staticmethod
    def _to_orm(txn: Transaction) -> TransactionORM:
        """Convert domain model to ORM model."""
        return TransactionORM(
            transaction_id=txn.transaction_id,
            created_at=txn.created_at or now_utc(),
            **{name: getattr(txn, name) for name in _COPIED_FIELDS},
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            transaction_id=orm.transaction_id,
            account_id=orm.account_id,
            transaction_date=orm.transaction_date,
            amount=_decimal_or_none(orm.amount),
            transaction_type=orm.transaction_type,
            ticker_symbol=orm.ticker_symbol,
            quantity=_decimal_or_none(orm.quantity),
            price_per_unit=_decimal_or_none(orm.price_per_unit),
            fee=_decimal_or_none(orm.fee),
            merchant=orm.merchant,
            category=orm.category,
            description=orm.description,
            currency=orm.currency,
            created_at=orm.created_at,
        )
