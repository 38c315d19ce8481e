"""Aggregate transaction history into the figures the projections consume"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Sequence

from finance_forecast.domain.models import (
    Budget,
    BudgetSummary,
    MonthAggregates,
    Transaction,
    TransactionType,
)
from finance_forecast.utils.date_utils import days_remaining_in_month, month_end, month_start, shift_month


def signed_amount(transaction: Transaction) -> float:
    """
    Income counts positive, expenses negative.

    Transfers move money between the household's own accounts (a cash
    withdrawal, say) and count as zero. The spending they fund is recorded
    separately as an expense.
    """
    if transaction.type == TransactionType.INCOME:
        return transaction.amount
    if transaction.type == TransactionType.EXPENSE:
        return -transaction.amount
    return 0.0


def aggregate_month(transactions: Sequence[Transaction], today: date, window_days: int) -> MonthAggregates:
    """
    Split the current month's transactions into projection buckets.

    Buckets:
    - realized: dated between the 1st and today (inclusive)
    - scheduled: dated after today, up to the end of the month
    - discretionary: non-recurring transactions in the trailing window ending today

    The trailing window may reach into the previous month. It shrinks when the
    history is shorter than window_days, and is 0 when nothing happened yet.
    """
    first_day = month_start(today)
    last_day = month_end(today)

    past = [t for t in transactions if first_day <= t.date <= today]
    scheduled = [t for t in transactions if today < t.date <= last_day]

    history_dates = [t.date for t in transactions if t.date <= today]
    if history_dates and window_days > 0:
        window_start = today - timedelta(days=window_days - 1)
        window_start = max(window_start, min(history_dates))
        effective_window = (today - window_start).days + 1
    else:
        window_start = today + timedelta(days=1)
        effective_window = 0

    discretionary = [
        t for t in transactions
        if window_start <= t.date <= today and not t.is_recurring
    ]

    return MonthAggregates(
        month_income=sum(t.amount for t in past if t.type == TransactionType.INCOME),
        month_expenses=sum(t.amount for t in past if t.type == TransactionType.EXPENSE),
        past_net=sum(signed_amount(t) for t in past),
        future_scheduled_net=sum(signed_amount(t) for t in scheduled),
        discretionary_net=sum(signed_amount(t) for t in discretionary),
        remaining_days=days_remaining_in_month(today),
        window_days=effective_window,
    )


def historical_monthly_nets(transactions: Iterable[Transaction], today: date, months: int = 3) -> List[float]:
    """Net of each of the previous `months` months that had activity, most recent first"""
    net_by_month: Dict[tuple[int, int], float] = defaultdict(float)
    for txn in transactions:
        net_by_month[(txn.date.year, txn.date.month)] += signed_amount(txn)

    nets = []
    for offset in range(1, months + 1):
        key = shift_month(today.year, today.month, -offset)
        if key in net_by_month:
            nets.append(net_by_month[key])
    return nets


def summarize_budgets(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    today: date,
) -> BudgetSummary:
    """Count budgets whose category spending this month (to date) exceeds the limit"""
    first_day = month_start(today)

    spent: Dict[str, float] = defaultdict(float)
    for txn in transactions:
        if txn.type == TransactionType.EXPENSE and txn.category_id and first_day <= txn.date <= today:
            spent[txn.category_id] += txn.amount

    return BudgetSummary.from_statuses(spent[b.category_id] > b.limit for b in budgets)
