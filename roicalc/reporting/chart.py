"""Chart-ready data for the cumulative profit plot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from roicalc.engine.result import CalculationResult
from roicalc.reporting.formatting import (
    format_currency,
    format_number,
    round_decimal,
    round_half_up,
)


@dataclass(frozen=True)
class ChartData:
    labels: list[int]
    values: list[float]
    breakeven_month: Optional[int]
    tooltip_titles: list[str]
    tooltip_labels: list[str]
    show_zero_line: bool


def format_tooltip_value(value: float) -> str:
    """Signed currency for a point tooltip, e.g. "+1 500 000 ₽"."""
    formatted = format_currency(round_half_up(value))
    return f"+{formatted}" if value >= 0 else formatted


def format_axis_tick(value: float) -> str:
    """Compact y-axis tick: millions as "М", thousands as "К"."""
    if value >= 1_000_000:
        return f"{round_decimal(value / 1_000_000, 1)}М"
    if value >= 1_000:
        return f"{round_decimal(value / 1_000)}К"
    return format_number(value)


def build_chart_data(result: CalculationResult) -> ChartData:
    series = result.profit_series
    values = series.values()
    return ChartData(
        labels=[p.month for p in series.points],
        values=values,
        breakeven_month=series.breakeven_month,
        tooltip_titles=[f"Месяц {p.month}" for p in series.points],
        tooltip_labels=[format_tooltip_value(v) for v in values],
        show_zero_line=min(values) < 0 < max(values),
    )
