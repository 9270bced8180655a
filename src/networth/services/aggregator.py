"""
Aggregator: pure derivations over transaction lists.

Every function takes plain Transaction values, never touches the store, and
recomputes its result in full. Empty or malformed input yields empty or
zero-valued results instead of exceptions.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import SU, relativedelta

from networth.core.timezone import month_key, month_start, now_utc, to_utc
from networth.domain.models import (
    Budget,
    BudgetFrequency,
    InvestmentTransactionType,
    NON_POSITION_TYPES,
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

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5
UNCATEGORIZED = "Uncategorized"

_ZERO = Decimal("0")


# =============================================================================
# SHARED HELPERS
# =============================================================================


def account_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Current balance: sum of all amounts, missing amounts count as zero."""
    return sum((t.signed_amount for t in transactions), _ZERO)


def sort_chronologically(transactions: Iterable[Transaction]) -> list[Transaction]:
    """
    Stable ascending sort by transaction_date.

    Ties keep input order. Undated transactions cannot be placed and are dropped.
    """
    dated = [t for t in transactions if t.transaction_date is not None]
    return sorted(dated, key=lambda t: t.transaction_date)


def window_start(time_range: TimeRange, now: Optional[datetime] = None) -> Optional[datetime]:
    """Return the inclusive lower bound of a trailing window, or None for ALL."""
    months = TimeRange(time_range).months
    if months is None:
        return None
    return to_utc(now or now_utc()) - relativedelta(months=months)


def filter_by_time_range(
    transactions: Iterable[Transaction],
    time_range: TimeRange = TimeRange.ALL,
    now: Optional[datetime] = None,
) -> list[Transaction]:
    """Keep transactions dated on or after the window start (all for ALL)."""
    cutoff = window_start(time_range, now)
    if cutoff is None:
        return list(transactions)
    return [
        t for t in transactions
        if t.transaction_date is not None and t.transaction_date >= cutoff
    ]


# =============================================================================
# RUNNING BALANCE / NET WORTH
# =============================================================================


def running_balance(transactions: Iterable[Transaction]) -> list[BalancePoint]:
    """
    Balance history: one point per transaction in date order.

    Same-date transactions each produce their own point.
    """
    points: list[BalancePoint] = []
    balance = _ZERO
    for txn in sort_chronologically(transactions):
        balance += txn.signed_amount
        points.append(BalancePoint(date=txn.transaction_date, balance=balance))
    return points


def _merge_accounts(
    account_transactions: Iterable[Sequence[Transaction]],
) -> list[Transaction]:
    merged: list[Transaction] = []
    for transactions in account_transactions:
        merged.extend(transactions)
    return merged


def net_worth_series(
    account_transactions: Iterable[Sequence[Transaction]],
) -> list[NetWorthPoint]:
    """
    Net worth across accounts, one point per transaction.

    Accounts are merged before sorting so transactions interleave by date.
    """
    merged = _merge_accounts(account_transactions)
    return [
        NetWorthPoint(date=p.date, net_worth=p.balance)
        for p in running_balance(merged)
    ]


def monthly_net_worth(
    account_transactions: Iterable[Sequence[Transaction]],
    time_range: TimeRange = TimeRange.ALL,
    now: Optional[datetime] = None,
) -> list[NetWorthPoint]:
    """
    Net worth sampled once per calendar month.

    Each point is dated the first of its month and holds the running total of
    everything dated before the following month. Empty months carry forward.
    The series runs from the first transaction's month (or the window start)
    through the later of the current month and the last transaction's month.
    """
    ordered = sort_chronologically(_merge_accounts(account_transactions))
    if not ordered:
        return []

    now = to_utc(now or now_utc())
    cutoff = window_start(time_range, now)
    first = month_start(cutoff if cutoff is not None else ordered[0].transaction_date)
    last = max(month_start(now), month_start(ordered[-1].transaction_date))

    points: list[NetWorthPoint] = []
    balance = _ZERO
    index = 0
    current = first
    while current <= last:
        next_month = current + relativedelta(months=1)
        while index < len(ordered) and ordered[index].transaction_date < next_month:
            balance += ordered[index].signed_amount
            index += 1
        points.append(NetWorthPoint(date=current, net_worth=balance))
        current = next_month
    return points


# =============================================================================
# HOLDINGS
# =============================================================================


def _refresh_holding(holding: Holding) -> None:
    holding.average_cost = holding.total_cost / holding.quantity
    holding.total_value = holding.quantity * holding.last_price
    holding.gain = holding.total_value - holding.total_cost
    if holding.total_cost != _ZERO:
        holding.gain_percent = holding.gain / holding.total_cost * 100
    else:
        holding.gain_percent = None


def compute_holdings(transactions: Iterable[Transaction]) -> list[Holding]:
    """
    Current positions of one investment account, in first-seen order.

    Transactions are replayed in input order. Buys add quantity and cost; sells
    remove quantity but leave total_cost untouched, so the average-cost basis
    survives partial sells. A position whose quantity drops to zero or below is
    removed; buying the symbol again starts a fresh position with zero basis.
    Value is quantity times the last price seen for the symbol.
    """
    holdings: dict[str, Holding] = {}

    for txn in transactions:
        txn_type = txn.investment_type
        if not txn.ticker_symbol or txn_type in NON_POSITION_TYPES:
            continue
        if not txn.quantity or not txn.price_per_unit:
            continue

        symbol = txn.ticker_symbol
        holding = holdings.get(symbol)
        if holding is None:
            holding = Holding(symbol=symbol)
            holdings[symbol] = holding

        if txn_type == InvestmentTransactionType.BUY:
            holding.quantity += txn.quantity
            holding.total_cost += txn.quantity * txn.price_per_unit
        elif txn_type == InvestmentTransactionType.SELL:
            holding.quantity -= txn.quantity
        holding.last_price = txn.price_per_unit

        if holding.quantity > 0:
            _refresh_holding(holding)
        else:
            logger.debug(
                "Position %s closed by %s; cost basis discarded",
                symbol,
                txn.transaction_id,
            )
            del holdings[symbol]

    return list(holdings.values())


# =============================================================================
# SPENDING / CASH FLOW
# =============================================================================


def spending_by_category(
    transactions: Iterable[Transaction],
    time_range: TimeRange = TimeRange.ALL,
    now: Optional[datetime] = None,
    limit: int = DEFAULT_TOP_N,
    uncategorized_label: str = UNCATEGORIZED,
) -> list[CategoryTotal]:
    """
    Top categories by absolute outflow.

    Only negative amounts count. Categories beyond the limit are dropped, not
    folded into a remainder bucket.
    """
    outflows = [t for t in transactions if t.is_outflow]
    outflows = filter_by_time_range(outflows, time_range, now)

    totals: dict[str, Decimal] = {}
    for txn in outflows:
        category = (txn.category or "").strip() or uncategorized_label
        totals[category] = totals.get(category, _ZERO) + abs(txn.signed_amount)

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryTotal(category=category, total_amount=total)
        for category, total in ranked[:max(limit, 0)]
    ]


def monthly_cash_flow(
    transactions: Iterable[Transaction],
    time_range: TimeRange = TimeRange.ALL,
    now: Optional[datetime] = None,
) -> list[MonthlyCashFlow]:
    """
    Income vs spending per YYYY-MM bucket, ascending.

    Months without transactions are absent. Undated transactions are skipped.
    """
    buckets: dict[str, MonthlyCashFlow] = {}
    for txn in filter_by_time_range(transactions, time_range, now):
        if txn.transaction_date is None:
            continue
        key = month_key(txn.transaction_date)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = MonthlyCashFlow(month=key)
            buckets[key] = bucket
        amount = txn.signed_amount
        if amount > 0:
            bucket.income += amount
        else:
            bucket.spending += abs(amount)
    return [buckets[key] for key in sorted(buckets)]


# =============================================================================
# INVESTMENT PERFORMANCE
# =============================================================================


def investment_performance(
    transactions: Sequence[Transaction],
    current_balance: Optional[Decimal] = None,
) -> PerformanceView:
    """
    Contribution-based return for an investment account.

    Withdrawals are summed by absolute value. The gain percentage is None when
    net contributions are not positive.
    """
    view = PerformanceView()
    for txn in transactions:
        txn_type = txn.investment_type
        if txn_type == InvestmentTransactionType.CONTRIBUTION:
            view.total_contributions += txn.signed_amount
        elif txn_type == InvestmentTransactionType.WITHDRAWAL:
            view.total_withdrawals += abs(txn.signed_amount)
        elif txn_type == InvestmentTransactionType.DIVIDEND:
            view.total_dividends += txn.signed_amount

    view.net_contributions = view.total_contributions - view.total_withdrawals
    view.current_balance = (
        current_balance if current_balance is not None else account_balance(transactions)
    )
    view.total_gain = view.current_balance - view.net_contributions
    if view.net_contributions > 0:
        view.total_gain_percent = view.total_gain / view.net_contributions * 100
    return view


# =============================================================================
# BUDGETS
# =============================================================================


def budget_period(
    frequency: BudgetFrequency, now: Optional[datetime] = None
) -> tuple[datetime, datetime]:
    """
    Half-open UTC interval [start, end) of the budget period containing now.

    Weeks start on Sunday.
    """
    now = to_utc(now) if now is not None else now_utc()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    frequency = BudgetFrequency(frequency)
    if frequency == BudgetFrequency.DAILY:
        return midnight, midnight + relativedelta(days=1)
    if frequency == BudgetFrequency.WEEKLY:
        start = midnight + relativedelta(weekday=SU(-1))
        return start, start + relativedelta(weeks=1)
    if frequency == BudgetFrequency.MONTHLY:
        start = month_start(now)
        return start, start + relativedelta(months=1)
    start = midnight.replace(month=1, day=1)
    return start, start + relativedelta(years=1)


def _matches_budget(txn: Transaction, categories: Sequence[str]) -> bool:
    # Merchant stands in for a missing category
    label = (txn.category or txn.merchant or "").strip().lower()
    if not label:
        return False
    return any(category.lower() in label for category in categories)


def budget_spent(
    budget: Budget,
    transactions: Iterable[Transaction],
    now: Optional[datetime] = None,
) -> Decimal:
    """Absolute outflow matching the budget's categories in the current period."""
    start, end = budget_period(budget.frequency, now)
    spent = _ZERO
    for txn in transactions:
        if not txn.is_outflow or txn.transaction_date is None:
            continue
        if not start <= txn.transaction_date < end:
            continue
        if _matches_budget(txn, budget.categories):
            spent += abs(txn.signed_amount)
    return spent


def budget_progress(
    budget: Budget,
    transactions: Iterable[Transaction],
    now: Optional[datetime] = None,
) -> BudgetProgress:
    """Spent, remaining and capped percentage of one budget for the current period."""
    start, end = budget_period(budget.frequency, now)
    spent = budget_spent(budget, transactions, now)
    amount = budget.budget_amount
    progress = None
    if amount > 0:
        progress = min(Decimal("100"), spent / amount * 100)
    return BudgetProgress(
        budget_id=budget.budget_id,
        name=budget.name,
        categories=list(budget.categories),
        frequency=budget.frequency.value,
        budget_amount=amount,
        period_start=start,
        period_end=end,
        spent=spent,
        remaining=amount - spent,
        progress_percent=progress,
    )
