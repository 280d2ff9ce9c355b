from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .enums import AIProvider, ComplexityTier


@dataclass(frozen=True)
class InputParameters:
    """Operating parameters of the workflow being automated.

    Numeric fields are expected to be finite and non-negative; callers
    validate before constructing. ``complexity`` and ``provider`` accept
    raw strings so that unknown values can fall back to defaults inside
    the engine.
    """

    requests_per_month: int = 5000
    processing_time_minutes: float = 10
    monthly_salary: float = 100_000
    complexity: Union[ComplexityTier, str] = ComplexityTier.MEDIUM
    provider: Union[AIProvider, str] = AIProvider.YANDEX
