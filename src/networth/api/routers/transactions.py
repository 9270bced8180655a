"""Transaction ledger endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from networth.api.deps import get_ledger_service
from networth.api.schemas import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
    TransactionListResponse,
)
from networth.services import LedgerService, TransactionCreate, TransactionUpdate

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("/", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    data: TransactionCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Record a new transaction."""
    transaction = ledger.add_transaction(TransactionCreate(**data.model_dump()))
    return TransactionResponse.model_validate(transaction)


@router.get("/", response_model=TransactionListResponse)
def list_transactions(
    account_ids: Optional[str] = Query(None, description="Comma-separated account IDs (all if empty)"),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionListResponse:
    """Query transactions with optional filters, oldest first."""
    account_id_list = account_ids.split(",") if account_ids else None
    transactions = ledger.query_transactions(
        account_ids=account_id_list,
        start_date=start_date,
        end_date=end_date,
    )
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        count=len(transactions),
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Get a single transaction."""
    return TransactionResponse.model_validate(ledger.get_transaction(transaction_id))


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def edit_transaction(
    transaction_id: str,
    data: TransactionUpdateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """
    Supersede a transaction with edited values.

    Only fields present in the body change; an explicit null clears the field.
    """
    transaction = ledger.edit_transaction(
        transaction_id,
        TransactionUpdate(**data.model_dump(exclude_unset=True)),
    )
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> None:
    """Delete a transaction (idempotent)."""
    ledger.delete_transaction(transaction_id)
