"""Plain-language diagnosis of the current month"""

from typing import List, Optional

from finance_forecast.domain.models import BudgetSummary, DiagnosisInput, DiagnosisInsight, Tone
from finance_forecast.domain.rounding import round_half_away

MAX_INSIGHTS = 3


def savings_rate_insight(month_net: float, month_income: float) -> Optional[DiagnosisInsight]:
    if month_income <= 0:
        return None

    rate = round_half_away(month_net / month_income * 100)
    if rate >= 20:
        return DiagnosisInsight(f"You are saving {rate}% of your income this month.", Tone.POSITIVE)
    if rate >= 0:
        return DiagnosisInsight(f"You are saving {rate}% of your income this month.", Tone.NEUTRAL)
    return DiagnosisInsight(f"Expenses exceeded income by {abs(rate)}% this month.", Tone.CAUTION)


def budget_health_insight(summary: Optional[BudgetSummary]) -> Optional[DiagnosisInsight]:
    if summary is None or summary.total <= 0:
        return None

    if summary.over_budget == 0:
        return DiagnosisInsight(f"All {summary.total} budgets are within their limits.", Tone.POSITIVE)
    return DiagnosisInsight(
        f"{summary.over_budget} of {summary.total} budgets exceeded their limits.",
        Tone.CAUTION,
    )


def month_direction_insight(
    month_net: float,
    projected_month_net: float,
    remaining_days: int,
) -> Optional[DiagnosisInsight]:
    """
    Compare the projection with today's net.

    Branch order matters: a projection that flips a non-negative month
    negative is reported before the generic decline.
    """
    if remaining_days <= 0:
        return None

    if projected_month_net < 0 and month_net >= 0:
        return DiagnosisInsight(
            "The projected result is negative. Check whether any spending can be adjusted.",
            Tone.CAUTION,
        )
    if projected_month_net < month_net and month_net > 0:
        return DiagnosisInsight(
            "The trend in variable spending may reduce your balance by the end of the month.",
            Tone.CAUTION,
        )
    if projected_month_net > month_net and projected_month_net >= 0:
        return DiagnosisInsight(
            "Your current pace suggests the result will improve by the end of the month.",
            Tone.POSITIVE,
        )
    return None


def generate_diagnosis(diagnosis_input: DiagnosisInput) -> List[DiagnosisInsight]:
    """
    Generate up to 3 calm, non-judgmental insights about the month.

    Priority:
    1. Savings rate (if income > 0)
    2. Budget health (if budgets exist)
    3. Month direction (if days remain to project)
    """
    candidates = [
        savings_rate_insight(diagnosis_input.month_net, diagnosis_input.month_income),
        budget_health_insight(diagnosis_input.budget_summary),
        month_direction_insight(diagnosis_input.month_net, diagnosis_input.projected_month_net, diagnosis_input.remaining_days),
    ]

    insights = [insight for insight in candidates if insight is not None]
    return insights[:MAX_INSIGHTS]
