"""Installment plan generation for credit card purchases"""

from datetime import date
from typing import List

from finance_forecast.domain.billing import calculate_bill_date, due_date_for_statement
from finance_forecast.domain.exceptions import InvalidInstallmentPlanError
from finance_forecast.domain.models import Installment
from finance_forecast.domain.rounding import round_half_away
from finance_forecast.utils.date_utils import shift_month


def generate_installments(
    purchase_date: date,
    amount: float,
    installments: int,
    closing_day: int,
    due_day: int,
) -> List[Installment]:
    """
    Split a credit card purchase into monthly statement installments.

    Requirements:
    - Amounts are split in integer cents
    - First installment absorbs the rounding remainder
    - Installment 1 lands on the statement given by calculate_bill_date,
      each following one on the next month's statement

    Args:
        purchase_date: Date of the purchase
        amount: Total purchase amount
        installments: Number of installments (3 for "3x")
        closing_day: Card's statement closing day (1-31)
        due_day: Card's bill due day (1-31)

    Raises:
        InvalidInstallmentPlanError: installments < 1 or amount < 0

    Example:
        100.00 in 3x -> [33.34, 33.33, 33.33]
        10000 cents / 3 = 3333 base, remainder 1
        First installment: 3333 + 1 = 3334
    """
    if installments < 1:
        raise InvalidInstallmentPlanError("installments must be >= 1")
    if amount < 0:
        raise InvalidInstallmentPlanError("amount must be >= 0")

    first_bill = calculate_bill_date(purchase_date, closing_day, due_day)

    total_cents = round_half_away(amount * 100)
    base_cents = total_cents // installments
    remainder = total_cents - base_cents * installments

    plan = []
    for index in range(1, installments + 1):
        year, month = shift_month(first_bill.year, first_bill.month, index - 1)
        cents = base_cents + (remainder if index == 1 else 0)

        plan.append(
            Installment(
                index=index,
                amount=cents / 100,
                statement_month=month,
                statement_year=year,
                due_date=due_date_for_statement(year, month, closing_day, due_day),
                installment_id=f"{purchase_date.isoformat()}-i{index}",
            )
        )

    return plan
