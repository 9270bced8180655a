"""Derived metrics endpoints."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query

from networth.api.deps import get_analysis_service
from networth.api.schemas import (
    BalancePointResponse,
    BalanceResponse,
    NetWorthPointResponse,
    NetWorthResponse,
    HoldingResponse,
    HoldingsResponse,
    CategoryTotalResponse,
    SpendingResponse,
    MonthlyCashFlowResponse,
    CashFlowResponse,
    PerformanceResponse,
)
from networth.domain.models import NetWorthGranularity, TimeRange
from networth.services import AnalysisService

router = APIRouter(prefix="/analysis", tags=["analysis"])


def _split_ids(account_ids: Optional[str]) -> Optional[list[str]]:
    if not account_ids:
        return None
    return [a.strip() for a in account_ids.split(",") if a.strip()]


@router.get("/balance", response_model=BalanceResponse)
def get_balance(
    account_id: str = Query(..., description="Account ID"),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> BalanceResponse:
    """Current balance and running balance history of one account."""
    balance, points = analysis.balance(account_id)
    return BalanceResponse(
        account_id=account_id,
        balance=balance,
        points=[BalancePointResponse.model_validate(p) for p in points],
    )


@router.get("/net-worth", response_model=NetWorthResponse)
def get_net_worth(
    account_ids: Optional[str] = Query(None, description="Comma-separated account IDs (all if empty)"),
    granularity: NetWorthGranularity = Query(NetWorthGranularity.TRANSACTION),
    time_range: TimeRange = Query(TimeRange.ALL),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> NetWorthResponse:
    """Net worth series across accounts."""
    points = analysis.net_worth(
        _split_ids(account_ids),
        granularity=granularity,
        time_range=time_range,
    )
    return NetWorthResponse(
        granularity=granularity,
        time_range=time_range,
        points=[NetWorthPointResponse.model_validate(p) for p in points],
    )


@router.get("/holdings", response_model=HoldingsResponse)
def get_holdings(
    account_id: str = Query(..., description="Investment account ID"),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> HoldingsResponse:
    """Current holdings valued at the last transaction price."""
    holdings = analysis.holdings(account_id)
    return HoldingsResponse(
        account_id=account_id,
        holdings=[HoldingResponse.model_validate(h) for h in holdings],
        total_cost=sum((h.total_cost for h in holdings), Decimal("0")),
        total_value=sum((h.total_value for h in holdings), Decimal("0")),
    )


@router.get("/spending", response_model=SpendingResponse)
def get_spending(
    account_ids: Optional[str] = Query(None, description="Comma-separated account IDs (all if empty)"),
    time_range: TimeRange = Query(TimeRange.ONE_YEAR),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> SpendingResponse:
    """Top spending categories within a trailing window."""
    categories = analysis.spending_by_category(_split_ids(account_ids), time_range=time_range)
    return SpendingResponse(
        time_range=time_range,
        categories=[CategoryTotalResponse.model_validate(c) for c in categories],
        total=sum((c.total_amount for c in categories), Decimal("0")),
    )


@router.get("/cash-flow", response_model=CashFlowResponse)
def get_cash_flow(
    account_ids: Optional[str] = Query(None, description="Comma-separated account IDs (all if empty)"),
    time_range: TimeRange = Query(TimeRange.ALL),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> CashFlowResponse:
    """Monthly income vs spending."""
    months = analysis.monthly_cash_flow(_split_ids(account_ids), time_range=time_range)
    return CashFlowResponse(
        time_range=time_range,
        months=[MonthlyCashFlowResponse.model_validate(m) for m in months],
    )


@router.get("/performance", response_model=PerformanceResponse)
def get_performance(
    account_id: str = Query(..., description="Investment account ID"),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> PerformanceResponse:
    """Contribution-based performance of an investment account."""
    return PerformanceResponse.model_validate(analysis.performance(account_id))
