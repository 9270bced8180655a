"""Budget domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional, Union

from networth.core.numbers import coerce_decimal
from networth.domain.models.enums import BudgetFrequency


def parse_categories(value: Union[str, Iterable[str], None]) -> list[str]:
    """
    Normalize a category list.

    Accepts a comma-separated string or an iterable; blanks and duplicates
    (case-insensitive) are dropped, first spelling wins.
    """
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else value
    seen: set[str] = set()
    categories: list[str] = []
    for item in items:
        name = str(item).strip()
        if name and name.lower() not in seen:
            seen.add(name.lower())
            categories.append(name)
    return categories


@dataclass
class Budget:
    """
    A spending limit over one or more categories for a recurring period.

    Spending is never stored on the budget; it is derived from the ledger
    for the period containing "now".
    """

    budget_id: str
    name: str
    categories: list[str]
    budget_amount: Decimal
    frequency: BudgetFrequency = BudgetFrequency.MONTHLY
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.frequency, str):
            self.frequency = BudgetFrequency(self.frequency)
        self.categories = parse_categories(self.categories)
        amount = coerce_decimal(self.budget_amount)
        self.budget_amount = amount if amount is not None else Decimal("0")
