"""SQLAlchemy implementation of BudgetRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from networth.core.timezone import now_utc
from networth.domain.models import Budget
from networth.repositories.sqlalchemy.orm_models import BudgetORM


class SqlAlchemyBudgetRepository:
    """SQLAlchemy-backed budget repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, budget: Budget) -> Budget:
        """Persist a new budget."""
        orm_budget = BudgetORM(
            budget_id=budget.budget_id,
            name=budget.name,
            categories=",".join(budget.categories),
            budget_amount=budget.budget_amount,
            frequency=budget.frequency,
            created_at=budget.created_at or now_utc(),
        )
        self._db.add(orm_budget)
        self._db.commit()
        self._db.refresh(orm_budget)
        return self._to_domain(orm_budget)

    def get_by_id(self, budget_id: str) -> Optional[Budget]:
        """Retrieve budget by ID."""
        orm_budget = self._get(budget_id)
        return self._to_domain(orm_budget) if orm_budget else None

    def update(self, budget: Budget) -> Budget:
        """Store new values for an existing budget."""
        orm_budget = self._get(budget.budget_id)
        if not orm_budget:
            raise ValueError(f"Budget not found: {budget.budget_id}")

        orm_budget.name = budget.name
        orm_budget.categories = ",".join(budget.categories)
        orm_budget.budget_amount = budget.budget_amount
        orm_budget.frequency = budget.frequency

        self._db.commit()
        self._db.refresh(orm_budget)
        return self._to_domain(orm_budget)

    def delete(self, budget_id: str) -> None:
        """Remove a budget; no-op when absent."""
        self._db.query(BudgetORM).filter(BudgetORM.budget_id == budget_id).delete()
        self._db.commit()

    def list_all(self) -> list[Budget]:
        """List all budgets, newest first."""
        orm_budgets = self._db.query(BudgetORM).order_by(
            BudgetORM.created_at.desc(), BudgetORM.name
        ).all()
        return [self._to_domain(b) for b in orm_budgets]

    def _get(self, budget_id: str) -> Optional[BudgetORM]:
        return self._db.query(BudgetORM).filter(BudgetORM.budget_id == budget_id).first()

    @staticmethod
    def _to_domain(orm: BudgetORM) -> Budget:
        """Convert ORM model to domain model."""
        return Budget(
            budget_id=orm.budget_id,
            name=orm.name,
            categories=orm.categories,
            budget_amount=Decimal(str(orm.budget_amount)),
            frequency=orm.frequency,
            created_at=orm.created_at,
        )
