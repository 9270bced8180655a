"""Transaction repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from networth.domain.models import Transaction


class TransactionRepository(Protocol):
    """Interface for transaction (ledger) data access."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        ...

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        ...

    def replace(self, transaction: Transaction) -> Transaction:
        """Store a superseding value for an existing transaction."""
        ...

    def delete(self, transaction_id: str) -> None:
        """Remove a transaction; no-op when absent."""
        ...

    def list_by_account(self, account_id: str) -> list[Transaction]:
        """List all transactions for an account, ordered by transaction_date."""
        ...

    def query(
        self,
        account_ids: Optional[list[str]] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        """Query transactions with filters."""
        ...
