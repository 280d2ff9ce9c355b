"""Display formatting for calculation results.

Numbers are rendered the way the calculator UI shows them: digit groups
separated by a no-break space, a comma as decimal separator and the
rouble sign as currency suffix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from roicalc.engine.result import CalculationResult, PaybackPeriod
from roicalc.models.enums import RoiStatus

GROUP_SEPARATOR = "\u00a0"
DECIMAL_SEPARATOR = ","
CURRENCY_SUFFIX = " ₽"
NEVER_SYMBOL = "∞"

STRONG_ROI_THRESHOLD = 50.0


@dataclass(frozen=True)
class FormattedResult:
    """Display strings for every metric of a CalculationResult."""

    hourly_rate: str
    implementation_cost: str
    monthly_ai_cost: str
    time_saved: str
    money_saved: str
    net_saved: str
    payback_period: str
    roi: str
    roi_status: RoiStatus
    net_saved_negative: bool


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def round_decimal(value: float, decimals: int = 0) -> Decimal:
    """Round to a fixed number of decimals, halves away from zero.

    The working precision grows with the magnitude of the value, so very
    large amounts keep every integer digit.
    """
    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_number(value: float, decimals: int = 0) -> str:
    """Format a number with grouped digits and a fixed number of decimals."""
    rounded = round_decimal(value, decimals)
    if rounded == 0:
        rounded = abs(rounded)
    text = f"{rounded:,.{decimals}f}"
    return text.replace(",", GROUP_SEPARATOR).replace(".", DECIMAL_SEPARATOR)


def format_currency(value: float) -> str:
    return format_number(value) + CURRENCY_SUFFIX


def format_payback(payback: PaybackPeriod) -> str:
    if payback.is_never:
        return NEVER_SYMBOL
    return format_number(payback.months, 1) + " мес"


def format_roi(roi_percent: float) -> str:
    return format_number(roi_percent, 1) + "%"


def classify_roi(roi_percent: float) -> RoiStatus:
    if roi_percent < 0:
        return RoiStatus.NEGATIVE
    if roi_percent > STRONG_ROI_THRESHOLD:
        return RoiStatus.STRONG
    return RoiStatus.NEUTRAL


def format_result(result: CalculationResult) -> FormattedResult:
    """Render every metric of a result as display text."""
    return FormattedResult(
        hourly_rate=format_currency(result.hourly_rate) + "/час",
        implementation_cost=format_currency(result.implementation_cost),
        monthly_ai_cost=format_currency(result.monthly_ai_cost),
        time_saved=format_number(round_half_up(result.time_saved_hours)) + " ч/мес",
        money_saved=format_currency(round_half_up(result.money_saved_per_month)) + "/мес",
        net_saved=format_currency(round_half_up(result.net_saved_per_month)) + "/мес",
        payback_period=format_payback(result.payback_period),
        roi=format_roi(result.roi_percent_first_year),
        roi_status=classify_roi(result.roi_percent_first_year),
        net_saved_negative=result.net_saved_per_month < 0,
    )
