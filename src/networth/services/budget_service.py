"""Budget service for spending limits per category."""

import logging
import uuid
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional, Union

from networth.core.exceptions import ValidationError, NotFoundError
from networth.core.timezone import now_utc
from networth.domain.models import Budget, BudgetFrequency, parse_categories
from networth.repositories.protocols import BudgetRepository
from networth.services.ledger_service import UNSET

logger = logging.getLogger(__name__)


@dataclass
class BudgetUpdate:
    """Partial update data; UNSET fields keep their stored values."""

    name: Optional[str] = UNSET
    categories: Optional[Union[str, list[str]]] = UNSET
    budget_amount: Optional[Decimal] = UNSET
    frequency: Optional[str] = UNSET


class BudgetService:
    """
    Service for creating and managing budgets.

    Progress against a budget is derived from the ledger by AnalysisService.
    """

    def __init__(self, budget_repo: BudgetRepository):
        self._budget_repo = budget_repo

    def create_budget(
        self,
        name: str,
        categories: Union[str, list[str]],
        budget_amount: Decimal,
        frequency: str = "monthly",
    ) -> Budget:
        """
        Create a new budget.

        Args:
            name: Display name
            categories: Category names, as a list or a comma-separated string
            budget_amount: Positive limit per period
            frequency: daily, weekly, monthly or yearly

        Returns:
            Created Budget instance
        """
        budget = Budget(
            budget_id=str(uuid.uuid4()),
            name=(name or "").strip(),
            categories=parse_categories(categories),
            budget_amount=budget_amount,
            frequency=self._parse_frequency(frequency),
            created_at=now_utc(),
        )
        self._validate(budget)
        created = self._budget_repo.create(budget)
        logger.info("Created %s budget %s", created.frequency.value, created.budget_id)
        return created

    def get_budget(self, budget_id: str) -> Budget:
        """Get budget by ID."""
        budget = self._budget_repo.get_by_id(budget_id)
        if not budget:
            raise NotFoundError("Budget", budget_id)
        return budget

    def list_budgets(
        self,
        frequency: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Budget]:
        """List budgets, newest first, optionally by frequency or covered category."""
        budgets = self._budget_repo.list_all()
        if frequency:
            parsed = self._parse_frequency(frequency)
            budgets = [b for b in budgets if b.frequency == parsed]
        if category:
            needle = category.strip().lower()
            budgets = [
                b for b in budgets
                if any(needle in c.lower() for c in b.categories)
            ]
        return budgets

    def update_budget(self, budget_id: str, patch: BudgetUpdate) -> Budget:
        """Apply a partial update to a budget."""
        current = self.get_budget(budget_id)
        changes = {name: value for name, value in vars(patch).items() if value is not UNSET}
        if "name" in changes:
            changes["name"] = (changes["name"] or "").strip()
        if "categories" in changes:
            changes["categories"] = parse_categories(changes["categories"])
        if "frequency" in changes:
            changes["frequency"] = self._parse_frequency(changes["frequency"])

        updated = replace(current, **changes)
        self._validate(updated)
        return self._budget_repo.update(updated)

    def delete_budget(self, budget_id: str) -> None:
        """Delete a budget (idempotent)."""
        self._budget_repo.delete(budget_id)

    @staticmethod
    def _parse_frequency(frequency: Optional[str]) -> BudgetFrequency:
        try:
            return BudgetFrequency((frequency or "").strip().lower())
        except ValueError:
            allowed = ", ".join(f.value for f in BudgetFrequency)
            raise ValidationError(f"Budget frequency must be one of: {allowed}")

    @staticmethod
    def _validate(budget: Budget) -> None:
        if not budget.name:
            raise ValidationError("Budget name is required")
        if not budget.categories:
            raise ValidationError("Budget requires at least one category")
        if budget.budget_amount <= 0:
            raise ValidationError("Budget amount must be greater than zero")
