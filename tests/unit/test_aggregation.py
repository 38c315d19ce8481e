"""Unit tests for transaction aggregation"""

from datetime import date

from finance_forecast.domain.aggregation import (
    aggregate_month,
    historical_monthly_nets,
    signed_amount,
    summarize_budgets,
)
from finance_forecast.domain.models import Budget, BudgetSummary, Transaction, TransactionType


def test_signed_amount():
    """Test income is positive, expenses negative, transfers neutral"""
    day = date(2025, 3, 1)
    assert signed_amount(Transaction("1", day, 100, TransactionType.INCOME)) == 100
    assert signed_amount(Transaction("2", day, 100, TransactionType.EXPENSE)) == -100
    assert signed_amount(Transaction("3", day, 100, TransactionType.TRANSFER)) == 0


def test_aggregate_month_buckets(sample_transactions, today):
    """Test realized, scheduled and discretionary buckets"""
    aggregates = aggregate_month(sample_transactions, today, window_days=7)

    assert aggregates.month_income == 5000
    assert aggregates.month_expenses == 1780
    assert aggregates.past_net == 3220
    assert aggregates.future_scheduled_net == -200
    # Mar 14 - Mar 20, recurring rent excluded
    assert aggregates.discretionary_net == -280
    assert aggregates.window_days == 7
    assert aggregates.remaining_days == 11


def test_aggregate_month_cash_withdrawal_not_counted_twice():
    """Test a transfer to the cash account does not reduce the net, only the cash spending does"""
    transactions = [
        Transaction("salary", date(2025, 3, 1), 1000, TransactionType.INCOME),
        Transaction("atm", date(2025, 3, 5), 300, TransactionType.TRANSFER),
        Transaction("market", date(2025, 3, 6), 300, TransactionType.EXPENSE, category_id="food"),
    ]

    aggregates = aggregate_month(transactions, date(2025, 3, 10), window_days=7)

    assert aggregates.past_net == 700
    assert aggregates.month_expenses == 300
    assert aggregates.discretionary_net == -300
    assert historical_monthly_nets(transactions, date(2025, 4, 10), months=1) == [700]


def test_aggregate_month_window_shrinks_with_short_history():
    """Test the window starts at the first known transaction"""
    transactions = [
        Transaction("1", date(2025, 3, 18), 30, TransactionType.EXPENSE),
        Transaction("2", date(2025, 3, 20), 60, TransactionType.EXPENSE),
    ]

    aggregates = aggregate_month(transactions, date(2025, 3, 20), window_days=7)

    assert aggregates.window_days == 3
    assert aggregates.discretionary_net == -90


def test_aggregate_month_without_history():
    """Test no past transactions gives an empty window"""
    transactions = [Transaction("1", date(2025, 3, 28), 100, TransactionType.EXPENSE, is_recurring=True)]

    aggregates = aggregate_month(transactions, date(2025, 3, 20), window_days=7)

    assert aggregates.window_days == 0
    assert aggregates.past_net == 0
    assert aggregates.future_scheduled_net == -100


def test_aggregate_month_last_day(sample_transactions):
    aggregates = aggregate_month(sample_transactions, date(2025, 3, 31), window_days=7)

    assert aggregates.remaining_days == 0
    assert aggregates.future_scheduled_net == 0
    assert aggregates.past_net == 3020


def test_aggregate_month_ignores_next_month(sample_transactions, today):
    transactions = sample_transactions + [Transaction("apr", date(2025, 4, 1), 5000, TransactionType.INCOME)]

    aggregates = aggregate_month(transactions, today, window_days=7)

    assert aggregates.future_scheduled_net == -200


def test_historical_monthly_nets(sample_transactions, today):
    """Test previous months with activity, most recent first"""
    assert historical_monthly_nets(sample_transactions, today, months=3) == [2000, 1000]
    assert historical_monthly_nets(sample_transactions, today, months=1) == [2000]


def test_historical_monthly_nets_across_year(sample_transactions):
    nets = historical_monthly_nets(sample_transactions, date(2025, 2, 10), months=3)
    assert nets == [1000]


def test_summarize_budgets(sample_transactions, sample_budgets, today):
    """Test food (280 of 250) is over, housing (1500 of 2000) is on track"""
    summary = summarize_budgets(sample_budgets, sample_transactions, today)
    assert summary == BudgetSummary(total=2, on_track=1, over_budget=1)


def test_summarize_budgets_without_spending(today):
    summary = summarize_budgets([Budget("travel", 500)], [], today)
    assert summary == BudgetSummary(total=1, on_track=1, over_budget=0)
