"""Recurring transaction date calculation"""

from datetime import date, timedelta
from typing import List, Optional, Union

from finance_forecast.domain.models import RecurrencePattern
from finance_forecast.utils.date_utils import clamped_date, shift_month

MAX_INSTANCES_PER_SERIES = 24

PatternLike = Union[RecurrencePattern, str, None]


def normalize_pattern(pattern: PatternLike) -> RecurrencePattern:
    """Missing or unknown patterns are treated as monthly"""
    if isinstance(pattern, RecurrencePattern):
        return pattern
    try:
        return RecurrencePattern(pattern)
    except ValueError:
        return RecurrencePattern.MONTHLY


def get_next_date(
    anchor_date: date,
    pattern: PatternLike = None,
    fixed_day: Optional[int] = None,
) -> date:
    """
    Calculate the next occurrence of a recurring transaction.

    Rules:
    - weekly: anchor + 7 days (fixed_day has no effect)
    - monthly: next month, on fixed_day or the anchor's day
    - yearly: same month next year, on fixed_day or the anchor's day
    - Days past the end of the target month clamp to its last day
      (Jan 31 -> Feb 28, Feb 29 2024 -> Feb 28 2025)

    fixed_day must be the day pinned on the series' parent record, passed
    unchanged on every call. Passing the previous instance's day instead loses
    the re-expansion after a short month: with fixed_day=31 the series runs
    Jan 31 -> Feb 28 -> Mar 31, without it Jan 31 -> Feb 28 -> Mar 28.
    """
    pattern = normalize_pattern(pattern)

    if pattern is RecurrencePattern.WEEKLY:
        return anchor_date + timedelta(days=7)

    target_day = fixed_day if fixed_day is not None else anchor_date.day

    if pattern is RecurrencePattern.YEARLY:
        return clamped_date(anchor_date.year + 1, anchor_date.month, target_day)

    year, month = shift_month(anchor_date.year, anchor_date.month, 1)
    return clamped_date(year, month, target_day)


def _series_day(start_date: date, pattern: RecurrencePattern, fixed_day: Optional[int]) -> Optional[int]:
    # Pin the parent's day so clamped months re-expand later in the series
    if fixed_day is None and pattern is not RecurrencePattern.WEEKLY:
        return start_date.day
    return fixed_day


def generate_occurrences(
    start_date: date,
    pattern: PatternLike = None,
    fixed_day: Optional[int] = None,
    end_date: Optional[date] = None,
    count: Optional[int] = None,
    max_instances: int = MAX_INSTANCES_PER_SERIES,
) -> List[date]:
    """
    Generate the dates of the instances that follow a recurring parent.

    The parent's own date is not included. The series stops after `count`
    instances when given, otherwise at `end_date` (inclusive, default Dec 31 of
    the start year), and never produces more than `max_instances` dates.
    """
    pattern = normalize_pattern(pattern)
    day = _series_day(start_date, pattern, fixed_day)

    if count is not None:
        limit = min(count, max_instances)
        end_date = None
    else:
        limit = max_instances
        if end_date is None:
            end_date = date(start_date.year, 12, 31)

    occurrences = []
    current = get_next_date(start_date, pattern, day)
    while len(occurrences) < limit and (end_date is None or current <= end_date):
        occurrences.append(current)
        current = get_next_date(current, pattern, day)

    return occurrences


def count_occurrences(
    start_date: date,
    end_date: date,
    pattern: PatternLike = None,
    fixed_day: Optional[int] = None,
) -> int:
    """Number of occurrences between start_date and end_date, both inclusive"""
    if end_date < start_date:
        return 0

    pattern = normalize_pattern(pattern)
    day = _series_day(start_date, pattern, fixed_day)

    total = 1  # start_date itself
    current = get_next_date(start_date, pattern, day)
    while current <= end_date:
        total += 1
        current = get_next_date(current, pattern, day)
    return total


def series_end_date(
    start_date: date,
    count: int,
    pattern: PatternLike = None,
    fixed_day: Optional[int] = None,
) -> date:
    """Date of the count-th occurrence, where occurrence 1 is start_date"""
    pattern = normalize_pattern(pattern)
    day = _series_day(start_date, pattern, fixed_day)

    current = start_date
    for _ in range(count - 1):
        current = get_next_date(current, pattern, day)
    return current
