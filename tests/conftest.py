"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import List

from finance_forecast.domain.models import Budget, Transaction, TransactionType


def txn(
    transaction_id: str,
    day: date,
    amount: float,
    type: TransactionType = TransactionType.EXPENSE,
    category_id: str | None = None,
    is_recurring: bool = False,
) -> Transaction:
    return Transaction(
        transaction_id=transaction_id,
        date=day,
        amount=amount,
        type=type,
        category_id=category_id,
        is_recurring=is_recurring,
    )


@pytest.fixture
def today() -> date:
    """Mid-March: 11 days left in the month, 9 full months left in the year"""
    return date(2025, 3, 20)


@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """Three months of history for a household with a monthly salary"""
    income = TransactionType.INCOME
    return [
        # January: net 1000
        txn("jan_salary", date(2025, 1, 1), 5000, income, "salary", is_recurring=True),
        txn("jan_spend", date(2025, 1, 15), 4000, category_id="food"),
        # February: net 2000
        txn("feb_salary", date(2025, 2, 1), 5000, income, "salary", is_recurring=True),
        txn("feb_spend", date(2025, 2, 10), 3000, category_id="food"),
        # March so far
        txn("mar_salary", date(2025, 3, 1), 5000, income, "salary", is_recurring=True),
        txn("mar_rent", date(2025, 3, 5), 1500, category_id="housing", is_recurring=True),
        txn("mar_groceries_1", date(2025, 3, 14), 70, category_id="food"),
        txn("mar_groceries_2", date(2025, 3, 16), 140, category_id="food"),
        txn("mar_dining", date(2025, 3, 19), 70, category_id="food"),
        # Scheduled for later this month
        txn("mar_internet", date(2025, 3, 25), 200, category_id="utilities", is_recurring=True),
    ]


@pytest.fixture
def sample_budgets() -> List[Budget]:
    return [
        Budget(category_id="food", limit=250),
        Budget(category_id="housing", limit=2000),
    ]
