from __future__ import annotations

from enum import Enum
from typing import Union


class ComplexityTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def default(cls) -> ComplexityTier:
        return cls.MEDIUM

    @classmethod
    def coerce(cls, value: Union[str, ComplexityTier, None]) -> ComplexityTier:
        """Return the matching tier, or the default tier for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.default()


class AIProvider(str, Enum):
    YANDEX = "yandex"
    GIGACHAT = "gigachat"
    ONPREM = "onprem"

    @classmethod
    def default(cls) -> AIProvider:
        return cls.YANDEX

    @classmethod
    def coerce(cls, value: Union[str, AIProvider, None]) -> AIProvider:
        """Return the matching provider, or the default provider for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.default()


class RoiStatus(str, Enum):
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    STRONG = "strong"
