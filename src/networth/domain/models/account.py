"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from networth.domain.models.enums import AccountType, SPENDING_ACCOUNT_TYPES


@dataclass
class Account:
    """
    A user account holding transactions.

    The balance is never stored: it is always the sum of the account's transactions.
    """

    account_id: str
    name: str
    account_type: AccountType = AccountType.BANK
    institution: Optional[str] = None
    currency: str = "CAD"
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.account_type, str):
            self.account_type = AccountType(self.account_type)

    @property
    def is_investment(self) -> bool:
        """Return True for investment accounts."""
        return self.account_type == AccountType.INVESTMENT

    @property
    def tracks_spending(self) -> bool:
        """Return True if outflows of this account count as spending."""
        return self.account_type in SPENDING_ACCOUNT_TYPES
