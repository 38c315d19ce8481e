"""Prometheus metrics for projection fallbacks and insight tones"""

from typing import Iterable

from prometheus_client import Counter, Histogram

from finance_forecast.domain.models import DiagnosisInsight, ProjectionResult

# Projection metrics
projection_counter = Counter(
    "finance_projection_total",
    "Projections computed",
    ["kind", "reason"],  # kind: month | year_end
)

# Diagnosis metrics
insight_counter = Counter(
    "finance_insight_total",
    "Diagnosis insights produced",
    ["tone"],
)

# Input validation
invalid_records_counter = Counter(
    "finance_invalid_records_total",
    "Raw transaction or budget records rejected by validation",
)

outlook_duration_histogram = Histogram(
    "finance_outlook_duration_seconds",
    "Time to build a month outlook",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def record_projection(kind: str, result: ProjectionResult) -> None:
    """Count projections by branch to track how often fallbacks are shown"""
    projection_counter.labels(kind=kind, reason=result.reason.value).inc()


def record_insights(insights: Iterable[DiagnosisInsight]) -> None:
    for insight in insights:
        insight_counter.labels(tone=insight.tone.value).inc()
