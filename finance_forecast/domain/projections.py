"""Month-end and year-end cash flow projections"""

from statistics import fmean
from typing import Callable, Optional

from finance_forecast.domain.models import (
    MonthProjectionInput,
    ProjectionReason,
    ProjectionResult,
    YearEndProjectionInput,
)
from finance_forecast.domain.rounding import round_money

AmountFormatter = Callable[[float], str]


def default_formatter(amount: float) -> str:
    return f"{amount:,.2f}"


def project_month_net(projection_input: MonthProjectionInput) -> ProjectionResult:
    """
    Project the month-end net from the trailing discretionary trend.

    Formula:
        daily_avg = discretionary_net / window_days
        projected = past_net + future_scheduled_net + daily_avg * remaining_days

    Only the discretionary (non-recurring) flow is extrapolated. Scheduled
    transactions are added once as an exact amount, so they are never counted
    twice through the daily average.

    Fallbacks:
    - remaining_days <= 0: month is over, past_net is the final result
    - window_days <= 0: no trend data, past + scheduled net only
    """
    if projection_input.remaining_days <= 0:
        return ProjectionResult(
            value=projection_input.past_net,
            explanation="Month closed, this is the final result.",
            reason=ProjectionReason.MONTH_CLOSED,
        )

    known_net = projection_input.past_net + projection_input.future_scheduled_net

    if projection_input.window_days <= 0:
        return ProjectionResult(
            value=known_net,
            explanation="Not enough data to project the rest of the month.",
            reason=ProjectionReason.INSUFFICIENT_DATA,
        )

    daily_avg = projection_input.discretionary_net / projection_input.window_days
    projected = known_net + daily_avg * projection_input.remaining_days

    return ProjectionResult(
        value=round_money(projected),
        explanation=f"Based on the average of the last {projection_input.window_days} days.",
        reason=ProjectionReason.TREND,
    )


def project_year_end_impact(
    projection_input: YearEndProjectionInput,
    formatter: Optional[AmountFormatter] = None,
) -> ProjectionResult:
    """
    Project the cumulative net for the rest of the year (conservative).

    With history, the monthly rate is the lesser of the projected month net
    and the historical average, so a bad month or a bad history both pull
    the estimate down. Without history, the projected month net is used alone.

        year_end_impact = monthly_rate * months_remaining

    months_remaining counts full months after the current one.
    """
    fmt = formatter or default_formatter

    if projection_input.months_remaining <= 0:
        return ProjectionResult(
            value=0.0,
            explanation="Year ended, no months remaining.",
            reason=ProjectionReason.YEAR_ENDED,
        )

    history = projection_input.historical_monthly_nets
    if history:
        historical_avg = fmean(history)
        rate = min(projection_input.projected_month_net, historical_avg)
        explanation = (
            f"Conservative estimate: the lower of this month's projection "
            f"({fmt(projection_input.projected_month_net)}) and the average of the last "
            f"{len(history)} months ({fmt(historical_avg)})."
        )
        reason = ProjectionReason.CONSERVATIVE
    else:
        rate = projection_input.projected_month_net
        explanation = "Based on this month's projected pace (no previous history)."
        reason = ProjectionReason.NO_HISTORY

    return ProjectionResult(
        value=round_money(rate * projection_input.months_remaining),
        explanation=explanation,
        reason=reason,
    )
