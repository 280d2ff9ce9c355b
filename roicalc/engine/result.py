"""Immutable result data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from roicalc.models.enums import AIProvider, ComplexityTier


@dataclass(frozen=True)
class PaybackPeriod:
    """Months to recover the implementation cost, or never.

    Use :meth:`finite` and :meth:`never` rather than the constructor.
    """

    months: Optional[float]

    @classmethod
    def finite(cls, months: float) -> PaybackPeriod:
        return cls(months=months)

    @classmethod
    def never(cls) -> PaybackPeriod:
        return cls(months=None)

    @property
    def is_never(self) -> bool:
        return self.months is None


@dataclass(frozen=True)
class ProfitPoint:
    """Cumulative profit at the end of a given month."""

    month: int
    cumulative_profit: float


@dataclass(frozen=True)
class ProfitSeries:
    """Month-by-month cumulative profit with the break-even marker."""

    points: tuple[ProfitPoint, ...]
    breakeven_month: Optional[int]

    @property
    def horizon_months(self) -> int:
        return len(self.points) - 1

    def values(self) -> list[float]:
        return [p.cumulative_profit for p in self.points]


@dataclass(frozen=True)
class CalculationResult:
    """Top-level result object for a single ROI calculation."""

    complexity: ComplexityTier
    provider: AIProvider
    hourly_rate: float
    implementation_cost: float
    monthly_ai_cost: float
    time_saved_hours: float
    money_saved_per_month: float
    net_saved_per_month: float
    payback_period: PaybackPeriod
    roi_percent_first_year: float
    profit_series: ProfitSeries
