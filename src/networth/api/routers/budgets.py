"""Budget endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from networth.api.deps import get_analysis_service, get_budget_service
from networth.api.schemas import (
    BudgetCreateRequest,
    BudgetUpdateRequest,
    BudgetResponse,
    BudgetListResponse,
    BudgetProgressResponse,
    BudgetProgressListResponse,
)
from networth.services import AnalysisService, BudgetService, BudgetUpdate

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.post("/", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
def create_budget(
    data: BudgetCreateRequest,
    budgets: BudgetService = Depends(get_budget_service),
) -> BudgetResponse:
    """Create a new budget."""
    budget = budgets.create_budget(
        name=data.name,
        categories=data.categories,
        budget_amount=data.budget_amount,
        frequency=data.frequency.value,
    )
    return BudgetResponse.model_validate(budget)


@router.get("/", response_model=BudgetListResponse)
def list_budgets(
    frequency: Optional[str] = Query(None, description="daily, weekly, monthly or yearly"),
    category: Optional[str] = Query(None, description="Only budgets covering this category"),
    budgets: BudgetService = Depends(get_budget_service),
) -> BudgetListResponse:
    """List budgets, newest first."""
    items = budgets.list_budgets(frequency=frequency, category=category)
    return BudgetListResponse(
        budgets=[BudgetResponse.model_validate(b) for b in items],
        count=len(items),
    )


@router.get("/progress", response_model=BudgetProgressListResponse)
def list_budget_progress(
    budgets: BudgetService = Depends(get_budget_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> BudgetProgressListResponse:
    """Spending against every budget for its current period."""
    progress = analysis.budget_progress(budgets.list_budgets())
    return BudgetProgressListResponse(
        budgets=[BudgetProgressResponse.model_validate(p) for p in progress],
        count=len(progress),
    )


@router.get("/{budget_id}", response_model=BudgetResponse)
def get_budget(
    budget_id: str,
    budgets: BudgetService = Depends(get_budget_service),
) -> BudgetResponse:
    """Get a single budget."""
    return BudgetResponse.model_validate(budgets.get_budget(budget_id))


@router.get("/{budget_id}/progress", response_model=BudgetProgressResponse)
def get_budget_progress(
    budget_id: str,
    budgets: BudgetService = Depends(get_budget_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> BudgetProgressResponse:
    """Spending against one budget for its current period."""
    budget = budgets.get_budget(budget_id)
    progress = analysis.budget_progress([budget])[0]
    return BudgetProgressResponse.model_validate(progress)


@router.patch("/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: str,
    data: BudgetUpdateRequest,
    budgets: BudgetService = Depends(get_budget_service),
) -> BudgetResponse:
    """Change a budget; only fields present in the body change."""
    budget = budgets.update_budget(
        budget_id,
        BudgetUpdate(**data.model_dump(exclude_unset=True)),
    )
    return BudgetResponse.model_validate(budget)


@router.delete("/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget(
    budget_id: str,
    budgets: BudgetService = Depends(get_budget_service),
) -> None:
    """Delete a budget (idempotent)."""
    budgets.delete_budget(budget_id)
