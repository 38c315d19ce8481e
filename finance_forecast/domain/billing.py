"""Credit card statement cycle assignment"""

from datetime import date

from finance_forecast.domain.models import BillDate
from finance_forecast.utils.date_utils import clamped_date, shift_month


def due_date_for_statement(statement_year: int, statement_month: int, closing_day: int, due_day: int) -> date:
    """
    Due date of a statement.

    When due_day < closing_day the payment falls in the month after the
    statement month (closing=20, due=10: the February statement is due March 10).
    """
    year, month = statement_year, statement_month
    if due_day < closing_day:
        year, month = shift_month(year, month, 1)
    return clamped_date(year, month, due_day)


def calculate_bill_date(transaction_date: date, closing_day: int, due_day: int) -> BillDate:
    """
    Determine which statement a credit card transaction belongs to.

    Rules:
    - Purchases on or after the closing day go to the next month's statement
    - Due day is clamped to the last day of the due month
    """
    year, month = transaction_date.year, transaction_date.month
    if transaction_date.day >= closing_day:
        year, month = shift_month(year, month, 1)

    return BillDate(
        month=month,
        year=year,
        due_date=due_date_for_statement(year, month, closing_day, due_day),
    )
