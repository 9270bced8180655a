"""Budget repository protocol."""

from typing import Protocol, Optional

from networth.domain.models import Budget


class BudgetRepository(Protocol):
    """Interface for budget data access."""

    def create(self, budget: Budget) -> Budget:
        """Persist a new budget."""
        ...

    def get_by_id(self, budget_id: str) -> Optional[Budget]:
        """Retrieve budget by ID."""
        ...

    def update(self, budget: Budget) -> Budget:
        """Store new values for an existing budget."""
        ...

    def delete(self, budget_id: str) -> None:
        """Remove a budget; no-op when absent."""
        ...

    def list_all(self) -> list[Budget]:
        """List all budgets, newest first."""
        ...
