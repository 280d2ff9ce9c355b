"""ROI formulas for AI agent automation.

Each function is a pure calculation with no side effects. All monetary
values are in the currency of the inputs (roubles for the built-in cost
tables).
"""

from __future__ import annotations

from roicalc.engine.result import PaybackPeriod, ProfitPoint, ProfitSeries

WORKING_DAYS_PER_MONTH = 22
WORKING_HOURS_PER_DAY = 8
WORKING_HOURS_PER_MONTH = WORKING_DAYS_PER_MONTH * WORKING_HOURS_PER_DAY  # 176

MONTHS_PER_YEAR = 12
DEFAULT_HORIZON_MONTHS = 24


def compute_hourly_rate(monthly_salary: float) -> float:
    """Hourly_Rate = Monthly_Salary / 176"""
    return monthly_salary / WORKING_HOURS_PER_MONTH


def compute_time_saved(requests_per_month: float, processing_time_minutes: float) -> float:
    """Time_Saved_Hours = Requests x (Minutes / 60)"""
    time_per_request_hours = processing_time_minutes / 60
    return requests_per_month * time_per_request_hours


def compute_money_saved(time_saved_hours: float, hourly_rate: float) -> float:
    """Money_Saved = Time_Saved_Hours x Hourly_Rate (before AI running cost)"""
    return time_saved_hours * hourly_rate


def compute_net_saved(money_saved: float, monthly_ai_cost: float) -> float:
    """Net_Saved = Money_Saved - Monthly_AI_Cost. May be negative."""
    return money_saved - monthly_ai_cost


def compute_payback_period(implementation_cost: float, net_saved: float) -> PaybackPeriod:
    """Payback = Implementation_Cost / Net_Saved, or never when Net_Saved <= 0."""
    if net_saved <= 0:
        return PaybackPeriod.never()
    return PaybackPeriod.finite(implementation_cost / net_saved)


def compute_roi(
    money_saved: float,
    monthly_ai_cost: float,
    implementation_cost: float,
) -> float:
    """First-year ROI in percent, against total first-year cost exposure.

    ROI = (Yearly_Savings - Yearly_AI_Cost - Implementation_Cost)
          / (Implementation_Cost + Yearly_AI_Cost) x 100

    Defined as 0 when there is no cost at all.
    """
    yearly_savings = money_saved * MONTHS_PER_YEAR
    yearly_ai_cost = monthly_ai_cost * MONTHS_PER_YEAR
    total_cost = implementation_cost + yearly_ai_cost

    if total_cost == 0:
        return 0.0

    net_profit = yearly_savings - yearly_ai_cost - implementation_cost
    return (net_profit / total_cost) * 100


def generate_profit_series(
    implementation_cost: float,
    net_saved: float,
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
) -> ProfitSeries:
    """Cumulative profit for months 0..horizon_months inclusive.

    Profit(m) = -Implementation_Cost + Net_Saved x m. The break-even month
    is the first month with non-negative cumulative profit.
    """
    if horizon_months < 0:
        raise ValueError(f"horizon_months cannot be negative, got {horizon_months}")
    points = tuple(
        ProfitPoint(month=month, cumulative_profit=-implementation_cost + net_saved * month)
        for month in range(horizon_months + 1)
    )
    breakeven_month = next(
        (p.month for p in points if p.cumulative_profit >= 0),
        None,
    )
    return ProfitSeries(points=points, breakeven_month=breakeven_month)
