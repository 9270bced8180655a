"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Optional

from networth.core.numbers import coerce_decimal, normalize_symbol
from networth.core.timezone import coerce_datetime
from networth.domain.models.enums import InvestmentTransactionType

_DECIMAL_FIELDS = ("amount", "quantity", "price_per_unit", "fee")


@dataclass(frozen=True)
class Transaction:
    """
    Ledger entry (source of truth).

    Immutable once recorded: an edit produces a new value that supersedes this one.
    - amount is signed: positive = inflow, negative = outflow
    - investment accounts use buy/sell/dividend/contribution/withdrawal
    - other accounts carry a free-form transaction_type plus merchant/category

    Numeric and date fields that cannot be parsed are stored as None.
    """

    transaction_id: str
    account_id: str
    transaction_date: Optional[datetime]
    amount: Optional[Decimal]
    transaction_type: Optional[str] = None
    ticker_symbol: Optional[str] = None
    quantity: Optional[Decimal] = None
    price_per_unit: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    merchant: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    currency: Optional[str] = None
    created_at: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "transaction_date", coerce_datetime(self.transaction_date))
        for name in _DECIMAL_FIELDS:
            object.__setattr__(self, name, coerce_decimal(getattr(self, name)))
        object.__setattr__(self, "ticker_symbol", normalize_symbol(self.ticker_symbol))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Transaction":
        """
        Build a Transaction from a raw store record.

        Dates arrive as ISO strings and numbers as native numbers; neither is trusted.
        """
        return cls(
            transaction_id=str(record.get("id") or record.get("transaction_id") or ""),
            account_id=str(record.get("account_id") or ""),
            transaction_date=record.get("transaction_date"),
            amount=record.get("amount"),
            transaction_type=record.get("transaction_type"),
            ticker_symbol=record.get("ticker_symbol"),
            quantity=record.get("quantity"),
            price_per_unit=record.get("price_per_unit"),
            fee=record.get("fee"),
            merchant=record.get("merchant"),
            category=record.get("category"),
            description=record.get("description"),
            currency=record.get("currency"),
        )

    @property
    def signed_amount(self) -> Decimal:
        """Amount with missing values treated as zero."""
        return self.amount if self.amount is not None else Decimal("0")

    @property
    def investment_type(self) -> Optional[InvestmentTransactionType]:
        """Parsed investment type, or None for free-form types."""
        return InvestmentTransactionType.parse(self.transaction_type)

    @property
    def is_outflow(self) -> bool:
        """Return True if money left the account."""
        return self.signed_amount < 0
