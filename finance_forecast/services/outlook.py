"""Month outlook - aggregates, projections and diagnosis for the dashboard"""

import logging
import time
from datetime import date
from typing import Any, Dict, Iterable, Optional, Sequence

from finance_forecast.config import settings
from finance_forecast.domain.aggregation import aggregate_month, historical_monthly_nets, summarize_budgets
from finance_forecast.domain.diagnosis import generate_diagnosis
from finance_forecast.domain.exceptions import InvalidTransactionDataError
from finance_forecast.domain.models import (
    Budget,
    DiagnosisInput,
    MonthOutlook,
    MonthProjectionInput,
    Transaction,
    YearEndProjectionInput,
)
from finance_forecast.domain.projections import AmountFormatter, project_month_net, project_year_end_impact
from finance_forecast.infrastructure.observability.logging import log_outlook
from finance_forecast.infrastructure.observability.metrics import (
    invalid_records_counter,
    outlook_duration_histogram,
    record_insights,
    record_projection,
)
from finance_forecast.schemas import parse_budgets, parse_transactions
from finance_forecast.utils.date_utils import months_remaining_in_year

logger = logging.getLogger(__name__)


def settings_formatter(amount: float) -> str:
    """Format amounts with the configured pattern"""
    return settings.amount_format.format(amount)


def build_month_outlook(
    transactions: Sequence[Transaction],
    today: date,
    budgets: Iterable[Budget] = (),
    window_days: Optional[int] = None,
    formatter: Optional[AmountFormatter] = None,
) -> MonthOutlook:
    """
    Build the current month's outlook from transaction history.

    Flow:
    1. Aggregate realized, scheduled and discretionary flows for the month
    2. Project the month-end net
    3. Project the year-end impact against previous months' nets
    4. Summarize budgets and generate the diagnosis
    5. Record metrics and log the outcome

    `transactions` should cover the previous `settings.history_months` months
    through the end of the current month. Budgets are optional.
    """
    start_time = time.time()
    window = settings.projection_window_days if window_days is None else window_days
    budgets = list(budgets)

    with outlook_duration_histogram.time():
        aggregates = aggregate_month(transactions, today, window)

        month_projection = project_month_net(
            MonthProjectionInput(
                past_net=aggregates.past_net,
                discretionary_net=aggregates.discretionary_net,
                remaining_days=aggregates.remaining_days,
                window_days=aggregates.window_days,
                future_scheduled_net=aggregates.future_scheduled_net,
            )
        )

        history = historical_monthly_nets(transactions, today, settings.history_months)
        year_end_projection = project_year_end_impact(
            YearEndProjectionInput(
                projected_month_net=month_projection.value,
                months_remaining=months_remaining_in_year(today),
                historical_monthly_nets=tuple(history),
            ),
            formatter=formatter or settings_formatter,
        )

        budget_summary = summarize_budgets(budgets, transactions, today) if budgets else None
        insights = generate_diagnosis(
            DiagnosisInput(
                month_net=aggregates.past_net,
                month_income=aggregates.month_income,
                projected_month_net=month_projection.value,
                remaining_days=aggregates.remaining_days,
                budget_summary=budget_summary,
            )
        )

    logger.debug(
        "Month aggregates",
        extra={"past_net": aggregates.past_net, "window_days": aggregates.window_days},
    )

    record_projection("month", month_projection)
    record_projection("year_end", year_end_projection)
    record_insights(insights)

    duration_ms = (time.time() - start_time) * 1000
    log_outlook(
        today=today.isoformat(),
        month_reason=month_projection.reason.value,
        year_end_reason=year_end_projection.reason.value,
        insight_count=len(insights),
        transaction_count=len(transactions),
        duration_ms=duration_ms,
    )

    return MonthOutlook(
        aggregates=aggregates,
        month_projection=month_projection,
        year_end_projection=year_end_projection,
        insights=insights,
    )


def build_month_outlook_from_records(
    raw_transactions: Iterable[Dict[str, Any]],
    today: date,
    raw_budgets: Iterable[Dict[str, Any]] = (),
    formatter: Optional[AmountFormatter] = None,
) -> MonthOutlook:
    """
    Validate raw datastore records, then build the outlook.

    Raises:
        InvalidTransactionDataError: a transaction or budget record is malformed
    """
    try:
        transactions = parse_transactions(raw_transactions)
        budgets = parse_budgets(raw_budgets)
    except InvalidTransactionDataError as e:
        invalid_records_counter.inc()
        logger.warning(f"Rejected records: {e}", extra={"today": today.isoformat()})
        raise

    return build_month_outlook(transactions, today, budgets=budgets, formatter=formatter)
