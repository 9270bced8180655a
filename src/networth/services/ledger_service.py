"""Ledger service for account and transaction management."""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from networth.core.exceptions import ValidationError, NotFoundError
from networth.core.numbers import normalize_symbol
from networth.core.timezone import now_utc
from networth.domain.models import (
    Account,
    AccountType,
    InvestmentTransactionType,
    Transaction,
)
from networth.repositories.protocols import AccountRepository, TransactionRepository

logger = logging.getLogger(__name__)


@dataclass
class TransactionCreate:
    """Input data for recording a transaction."""

    account_id: str
    amount: Decimal
    transaction_date: Optional[datetime] = None
    transaction_type: Optional[str] = None
    ticker_symbol: Optional[str] = None
    quantity: Optional[Decimal] = None
    price_per_unit: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    merchant: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None


# Marks a patch field the caller did not touch; None means "clear the field"
UNSET: Any = object()


@dataclass
class TransactionUpdate:
    """Partial update data; UNSET fields keep their recorded values."""

    transaction_date: Optional[datetime] = UNSET
    amount: Optional[Decimal] = UNSET
    transaction_type: Optional[str] = UNSET
    ticker_symbol: Optional[str] = UNSET
    quantity: Optional[Decimal] = UNSET
    price_per_unit: Optional[Decimal] = UNSET
    fee: Optional[Decimal] = UNSET
    merchant: Optional[str] = UNSET
    category: Optional[str] = UNSET
    description: Optional[str] = UNSET


class LedgerService:
    """
    Service for managing accounts and the transaction ledger.

    The ledger is the source of truth; balances and holdings are always derived
    from it. Recorded transactions are never mutated: edits store a new value
    that supersedes the old one under the same ID.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        transaction_repo: TransactionRepository,
        default_currency: str = "CAD",
    ):
        self._account_repo = account_repo
        self._transaction_repo = transaction_repo
        self._default_currency = default_currency

    def create_account(
        self,
        name: str,
        account_type: str = "bank",
        institution: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> Account:
        """
        Create a new account.

        Args:
            name: Unique account name
            account_type: bank, crypto, credit, savings or investment
            institution: Optional institution name
            currency: ISO currency code for all of the account's amounts;
                defaults to the ledger's configured currency

        Returns:
            Created Account instance
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account name is required")
        existing = self._account_repo.get_by_name(name)
        if existing:
            raise ValidationError(f"Account with name '{name}' already exists")
        try:
            parsed_type = AccountType(account_type)
        except ValueError:
            raise ValidationError(f"Unknown account type: {account_type}")

        account = Account(
            account_id=str(uuid.uuid4()),
            name=name,
            account_type=parsed_type,
            institution=institution,
            currency=(currency or self._default_currency).upper(),
            created_at=now_utc(),
        )
        created = self._account_repo.create(account)
        logger.info("Created %s account %s", created.account_type.value, created.account_id)
        return created

    def get_account(self, account_id: str) -> Account:
        """Get account by ID."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return account

    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        return self._account_repo.list_all()

    def delete_account(self, account_id: str) -> None:
        """Delete an account together with its transactions."""
        self.get_account(account_id)
        self._account_repo.delete(account_id)
        logger.info("Deleted account %s", account_id)

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Record a new transaction.

        Validates input against the owning account's type.
        """
        account = self.get_account(data.account_id)
        transaction = Transaction(
            transaction_id=str(uuid.uuid4()),
            account_id=account.account_id,
            transaction_date=data.transaction_date or now_utc(),
            amount=data.amount,
            transaction_type=data.transaction_type,
            ticker_symbol=data.ticker_symbol,
            quantity=data.quantity,
            price_per_unit=data.price_per_unit,
            fee=data.fee,
            merchant=data.merchant,
            category=data.category,
            description=data.description,
            currency=account.currency,
            created_at=now_utc(),
        )
        transaction = self._normalize_for_account(account, transaction)
        self._validate(account, transaction)
        return self._transaction_repo.create(transaction)

    def edit_transaction(
        self,
        transaction_id: str,
        patch: TransactionUpdate,
    ) -> Transaction:
        """Supersede a recorded transaction with an edited value."""
        current = self.get_transaction(transaction_id)
        account = self.get_account(current.account_id)

        changes = {
            name: value
            for name, value in vars(patch).items()
            if value is not UNSET
        }
        superseding = self._normalize_for_account(account, replace(current, **changes))
        self._validate(account, superseding)
        return self._transaction_repo.replace(superseding)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction (idempotent)."""
        self._transaction_repo.delete(transaction_id)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Get transaction by ID."""
        transaction = self._transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def list_transactions(self, account_id: str) -> list[Transaction]:
        """All transactions of one account, oldest first."""
        self.get_account(account_id)
        return self._transaction_repo.list_by_account(account_id)

    def query_transactions(
        self,
        account_ids: Optional[list[str]] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        """Query transactions with filters."""
        return self._transaction_repo.query(
            account_ids=account_ids,
            start_date=start_date,
            end_date=end_date,
        )

    @staticmethod
    def _normalize_for_account(account: Account, transaction: Transaction) -> Transaction:
        """Lower-case investment types so they match the fixed vocabulary."""
        if account.is_investment and transaction.transaction_type:
            return replace(
                transaction,
                transaction_type=transaction.transaction_type.strip().lower(),
            )
        return transaction

    @staticmethod
    def _validate(account: Account, transaction: Transaction) -> None:
        """Validate a transaction against its account."""
        if transaction.amount is None:
            raise ValidationError("Transaction requires a numeric amount")
        if transaction.transaction_date is None:
            raise ValidationError("Transaction requires a valid date")
        if transaction.fee is not None and transaction.fee < 0:
            raise ValidationError("Fees cannot be negative")

        if not account.is_investment:
            return

        txn_type = transaction.investment_type
        if txn_type is None:
            allowed = ", ".join(t.value for t in InvestmentTransactionType)
            raise ValidationError(
                f"Investment transactions must be one of: {allowed}"
            )

        if txn_type in (InvestmentTransactionType.BUY, InvestmentTransactionType.SELL):
            if not normalize_symbol(transaction.ticker_symbol):
                raise ValidationError(f"{txn_type.value} requires a ticker symbol")
            if transaction.quantity is None or transaction.quantity <= 0:
                raise ValidationError(f"{txn_type.value} requires quantity > 0")
            if transaction.price_per_unit is None or transaction.price_per_unit < 0:
                raise ValidationError(f"{txn_type.value} requires price_per_unit >= 0")
