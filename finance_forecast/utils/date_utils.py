"""Date manipulation utilities"""

import calendar
from datetime import date


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in the given month (28-31)"""
    return calendar.monthrange(year, month)[1]


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping day to the last day of the month"""
    return date(year, month, min(day, last_day_of_month(year, month)))


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move (year, month) forward by a number of months, rolling the year"""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    return day.replace(day=last_day_of_month(day.year, day.month))


def days_remaining_in_month(today: date) -> int:
    """Days left in the month after today (0 on the last day)"""
    return last_day_of_month(today.year, today.month) - today.day


def months_remaining_in_year(today: date) -> int:
    """Full months left in the year after the current one (0 in December)"""
    return 12 - today.month
