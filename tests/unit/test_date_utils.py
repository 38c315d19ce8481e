"""Unit tests for date helpers"""

from datetime import date

from finance_forecast.utils.date_utils import (
    clamped_date,
    days_remaining_in_month,
    last_day_of_month,
    months_remaining_in_year,
    shift_month,
)


def test_last_day_of_month_leap_years():
    assert last_day_of_month(2024, 2) == 29
    assert last_day_of_month(2025, 2) == 28
    assert last_day_of_month(1900, 2) == 28
    assert last_day_of_month(2000, 2) == 29


def test_clamped_date():
    assert clamped_date(2025, 4, 31) == date(2025, 4, 30)
    assert clamped_date(2025, 5, 31) == date(2025, 5, 31)


def test_shift_month():
    """Test forward and backward month arithmetic with year roll"""
    assert shift_month(2025, 12, 1) == (2026, 1)
    assert shift_month(2025, 1, -1) == (2024, 12)
    assert shift_month(2025, 3, 14) == (2026, 5)


def test_days_remaining_in_month():
    assert days_remaining_in_month(date(2025, 3, 20)) == 11
    assert days_remaining_in_month(date(2025, 2, 28)) == 0


def test_months_remaining_in_year():
    assert months_remaining_in_year(date(2025, 3, 20)) == 9
    assert months_remaining_in_year(date(2025, 12, 1)) == 0
