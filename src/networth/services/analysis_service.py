"""Analysis service: fetch transactions and derive metrics."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from networth.core.exceptions import NotFoundError, StoreUnavailableError
from networth.domain.models import (
    Account,
    Budget,
    NetWorthGranularity,
    TimeRange,
    Transaction,
)
from networth.domain.views import (
    BalancePoint,
    BudgetProgress,
    CategoryTotal,
    Holding,
    MonthlyCashFlow,
    NetWorthPoint,
    PerformanceView,
)
from networth.repositories.protocols import AccountRepository, TransactionRepository
from networth.services import aggregator

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Service for balances, net worth, holdings and spending analytics.

    Every call refetches from the store and recomputes in full; nothing is cached.
    Store failures surface as StoreUnavailableError carrying a readable message.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        transaction_repo: TransactionRepository,
        spending_top_n: int = aggregator.DEFAULT_TOP_N,
        uncategorized_label: str = aggregator.UNCATEGORIZED,
    ):
        self._account_repo = account_repo
        self._transaction_repo = transaction_repo
        self._spending_top_n = spending_top_n
        self._uncategorized_label = uncategorized_label

    def balance(self, account_id: str) -> tuple[Decimal, list[BalancePoint]]:
        """Current balance and balance history of one account."""
        transactions = self._fetch_account(account_id)
        return aggregator.account_balance(transactions), aggregator.running_balance(transactions)

    def net_worth(
        self,
        account_ids: Optional[list[str]] = None,
        granularity: NetWorthGranularity = NetWorthGranularity.TRANSACTION,
        time_range: TimeRange = TimeRange.ALL,
        now: Optional[datetime] = None,
    ) -> list[NetWorthPoint]:
        """
        Net worth across accounts (all accounts when none given).

        Per-transaction series are trimmed to the window after folding, so the
        first visible point still includes everything earlier.
        """
        per_account = [
            self._fetch_account(account_id)
            for account_id in self._resolve_account_ids(account_ids)
        ]
        if granularity == NetWorthGranularity.MONTH:
            return aggregator.monthly_net_worth(per_account, time_range=time_range, now=now)

        points = aggregator.net_worth_series(per_account)
        cutoff = aggregator.window_start(time_range, now)
        if cutoff is None:
            return points
        return [p for p in points if p.date >= cutoff]

    def holdings(self, account_id: str) -> list[Holding]:
        """Current positions of an investment account."""
        return aggregator.compute_holdings(self._fetch_account(account_id))

    def spending_by_category(
        self,
        account_ids: Optional[list[str]] = None,
        time_range: TimeRange = TimeRange.ALL,
        now: Optional[datetime] = None,
    ) -> list[CategoryTotal]:
        """
        Top spending categories across the given accounts.

        Without account_ids only spending accounts (bank, credit, savings) count;
        investment trades are not spending.
        """
        return aggregator.spending_by_category(
            self._fetch_many(account_ids, spending_only=True),
            time_range=time_range,
            now=now,
            limit=self._spending_top_n,
            uncategorized_label=self._uncategorized_label,
        )

    def monthly_cash_flow(
        self,
        account_ids: Optional[list[str]] = None,
        time_range: TimeRange = TimeRange.ALL,
        now: Optional[datetime] = None,
    ) -> list[MonthlyCashFlow]:
        """Monthly income/spending split across the given accounts."""
        return aggregator.monthly_cash_flow(
            self._fetch_many(account_ids),
            time_range=time_range,
            now=now,
        )

    def performance(self, account_id: str) -> PerformanceView:
        """Contribution-based performance of an investment account."""
        return aggregator.investment_performance(self._fetch_account(account_id))

    def budget_progress(
        self,
        budgets: list[Budget],
        now: Optional[datetime] = None,
    ) -> list[BudgetProgress]:
        """Progress of each budget against spending-account outflows this period."""
        if not budgets:
            return []
        transactions = self._fetch_many(None, spending_only=True)
        return [aggregator.budget_progress(b, transactions, now=now) for b in budgets]

    def _get_account(self, account_id: str) -> Account:
        try:
            account = self._account_repo.get_by_id(account_id)
        except SQLAlchemyError as exc:
            logger.error("Failed to load account %s: %s", account_id, exc)
            raise StoreUnavailableError("load account", str(exc)) from exc
        if not account:
            raise NotFoundError("Account", account_id)
        return account

    def _resolve_account_ids(
        self,
        account_ids: Optional[list[str]],
        spending_only: bool = False,
    ) -> list[str]:
        # Explicit ids are honored as given; only the default set is narrowed
        if account_ids:
            return [self._get_account(account_id).account_id for account_id in account_ids]
        try:
            accounts = self._account_repo.list_all()
        except SQLAlchemyError as exc:
            logger.error("Failed to list accounts: %s", exc)
            raise StoreUnavailableError("list accounts", str(exc)) from exc
        return [a.account_id for a in accounts if a.tracks_spending or not spending_only]

    def _fetch_account(self, account_id: str) -> list[Transaction]:
        self._get_account(account_id)
        try:
            transactions = self._transaction_repo.list_by_account(account_id)
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch transactions for %s: %s", account_id, exc)
            raise StoreUnavailableError("fetch transactions", str(exc)) from exc
        logger.debug("Fetched %d transactions for %s", len(transactions), account_id)
        return transactions

    def _fetch_many(
        self,
        account_ids: Optional[list[str]],
        spending_only: bool = False,
    ) -> list[Transaction]:
        transactions: list[Transaction] = []
        for account_id in self._resolve_account_ids(account_ids, spending_only):
            transactions.extend(self._fetch_account(account_id))
        return transactions
