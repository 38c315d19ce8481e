"""Domain models - immutable value records passed in and out of the engine"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from finance_forecast.domain.exceptions import InvalidBudgetSummaryError


class RecurrencePattern(str, Enum):
    """How often a recurring transaction repeats"""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Tone(str, Enum):
    """Sentiment of a diagnosis insight, used by the UI for styling"""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    CAUTION = "caution"


class ProjectionReason(str, Enum):
    """Which branch of a projection produced the value"""

    MONTH_CLOSED = "month_closed"
    INSUFFICIENT_DATA = "insufficient_data"
    TREND = "trend"
    YEAR_ENDED = "year_ended"
    NO_HISTORY = "no_history"
    CONSERVATIVE = "conservative"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"  # between own accounts


@dataclass(frozen=True)
class MonthProjectionInput:
    """
    Month-end projection input in decomposed form.

    past_net: realized net up to and including today
    discretionary_net: net of non-recurring transactions over the trailing window
    future_scheduled_net: net already committed for the rest of the month
    """

    past_net: float
    discretionary_net: float
    remaining_days: int
    window_days: int
    future_scheduled_net: float = 0.0

    @classmethod
    def from_trend(
        cls,
        current_net: float,
        last_n_days_net: float,
        remaining_days: int,
        window_days: int,
    ) -> "MonthProjectionInput":
        """Single-trend form: the whole trailing net is extrapolated, nothing is committed"""
        return cls(
            past_net=current_net,
            discretionary_net=last_n_days_net,
            remaining_days=remaining_days,
            window_days=window_days,
        )


@dataclass(frozen=True)
class YearEndProjectionInput:
    projected_month_net: float
    months_remaining: int
    historical_monthly_nets: Tuple[float, ...] = ()


@dataclass(frozen=True)
class ProjectionResult:
    """Projected amount plus a one-line caveat suitable for display"""

    value: float
    explanation: str
    reason: ProjectionReason


@dataclass(frozen=True)
class BudgetSummary:
    """Budget status counts for the active period"""

    total: int
    on_track: int
    over_budget: int

    def __post_init__(self) -> None:
        if min(self.total, self.on_track, self.over_budget) < 0:
            raise InvalidBudgetSummaryError(f"Budget counts must be non-negative: {self}")
        if self.on_track + self.over_budget != self.total:
            raise InvalidBudgetSummaryError(
                f"on_track ({self.on_track}) + over_budget ({self.over_budget}) != total ({self.total})"
            )

    @classmethod
    def from_statuses(cls, over_flags: Iterable[bool]) -> "BudgetSummary":
        """Build a summary from one over-budget flag per budget"""
        flags = list(over_flags)
        over = sum(1 for flag in flags if flag)
        return cls(total=len(flags), on_track=len(flags) - over, over_budget=over)


@dataclass(frozen=True)
class DiagnosisInput:
    month_net: float
    month_income: float
    projected_month_net: float
    remaining_days: int
    budget_summary: Optional[BudgetSummary] = None


@dataclass(frozen=True)
class DiagnosisInsight:
    text: str
    tone: Tone


@dataclass(frozen=True)
class Transaction:
    """Transaction as supplied by the caller (amount is always non-negative)"""

    transaction_id: str
    date: date
    amount: float
    type: TransactionType
    category_id: Optional[str] = None
    is_recurring: bool = False  # recurring parent or generated instance


@dataclass(frozen=True)
class Budget:
    """Monthly spending limit for a category"""

    category_id: str
    limit: float


@dataclass(frozen=True)
class MonthAggregates:
    """Aggregates of the current month computed from transaction history"""

    month_income: float
    month_expenses: float
    past_net: float
    future_scheduled_net: float
    discretionary_net: float
    remaining_days: int
    window_days: int


@dataclass(frozen=True)
class BillDate:
    """Statement cycle a card purchase belongs to"""

    month: int  # 1-12
    year: int
    due_date: date


@dataclass(frozen=True)
class Installment:
    """Single installment of a credit card purchase"""

    index: int  # 1-based
    amount: float
    statement_month: int  # 1-12
    statement_year: int
    due_date: date
    installment_id: str


@dataclass(frozen=True)
class MonthOutlook:
    """Everything the dashboard needs for the current month"""

    aggregates: MonthAggregates
    month_projection: ProjectionResult
    year_end_projection: ProjectionResult
    insights: List[DiagnosisInsight] = field(default_factory=list)
