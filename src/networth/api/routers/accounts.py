"""Account management endpoints."""

from fastapi import APIRouter, Depends, status

from networth.api.deps import get_ledger_service, get_analysis_service
from networth.api.schemas import AccountCreate, AccountResponse, AccountListResponse
from networth.services import LedgerService, AnalysisService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("/", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    data: AccountCreate,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    """Create a new account."""
    account = ledger.create_account(
        name=data.name,
        account_type=data.account_type.value,
        institution=data.institution,
        currency=data.currency,
    )
    return AccountResponse.model_validate(account)


@router.get("/", response_model=AccountListResponse)
def list_accounts(
    ledger: LedgerService = Depends(get_ledger_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> AccountListResponse:
    """List all accounts with their derived balances."""
    accounts = []
    for account in ledger.list_accounts():
        response = AccountResponse.model_validate(account)
        response.balance, _ = analysis.balance(account.account_id)
        accounts.append(response)
    return AccountListResponse(accounts=accounts, count=len(accounts))


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> AccountResponse:
    """Get account details with derived balance."""
    response = AccountResponse.model_validate(ledger.get_account(account_id))
    response.balance, _ = analysis.balance(account_id)
    return response


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> None:
    """Delete an account and all of its transactions."""
    ledger.delete_account(account_id)
