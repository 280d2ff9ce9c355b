from .calculator import CalculationEngine
from .result import CalculationResult, PaybackPeriod, ProfitPoint, ProfitSeries

__all__ = [
    "CalculationEngine",
    "CalculationResult",
    "PaybackPeriod",
    "ProfitPoint",
    "ProfitSeries",
]
