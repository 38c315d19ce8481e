"""Recurring series expansion for the recurring-transaction store"""

import logging
from datetime import date
from typing import List, Optional

from finance_forecast.config import settings
from finance_forecast.domain.recurrence import PatternLike, generate_occurrences, normalize_pattern

logger = logging.getLogger(__name__)


def expand_series(
    parent_date: date,
    pattern: PatternLike = None,
    fixed_day: Optional[int] = None,
    end_date: Optional[date] = None,
    count: Optional[int] = None,
) -> List[date]:
    """
    Dates for the child instances of a recurring parent transaction.

    `fixed_day` must come from the parent record, never from a previously
    generated instance. At most `settings.max_recurrence_instances` dates
    are returned per call. To continue a truncated series, anchor on the last
    instance and pass the parent's day explicitly as fixed_day.
    """
    limit = settings.max_recurrence_instances
    dates = generate_occurrences(
        parent_date,
        pattern,
        fixed_day,
        end_date=end_date,
        count=count,
        max_instances=limit,
    )

    if len(dates) == limit:
        logger.info(
            "Recurring series reached instance limit",
            extra={
                "parent_date": parent_date.isoformat(),
                "pattern": normalize_pattern(pattern).value,
                "instances": limit,
            },
        )
    return dates


def total_in_series(
    parent_date: date,
    pattern: PatternLike = None,
    fixed_day: Optional[int] = None,
    end_date: Optional[date] = None,
    count: Optional[int] = None,
) -> int:
    """
    Series length including the parent, for "X of Y" numbering.

    An explicit count is taken as is, even past the per-call instance limit.
    """
    if count is not None:
        return count + 1
    return 1 + len(expand_series(parent_date, pattern, fixed_day, end_date=end_date))
