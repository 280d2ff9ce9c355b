"""Pydantic models for cost-table configuration validation."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roicalc.models.enums import AIProvider, ComplexityTier


def _check_tiers(table: dict[ComplexityTier, float], where: str) -> None:
    missing = set(ComplexityTier) - set(table)
    if missing:
        raise ValueError(
            f"{where} is missing tiers: {sorted(t.value for t in missing)}"
        )
    for tier, amount in table.items():
        if not math.isfinite(amount) or amount < 0:
            raise ValueError(
                f"{where}[{tier.value}] must be a finite non-negative amount, got {amount}"
            )


class CostTables(BaseModel):
    """One-time and recurring cost assumptions, keyed by tier and provider."""

    model_config = ConfigDict(frozen=True)

    implementation_cost: dict[ComplexityTier, float] = Field(
        description="One-time implementation cost per complexity tier"
    )
    monthly_ai_cost: dict[AIProvider, dict[ComplexityTier, float]] = Field(
        description="Recurring AI cost per provider and complexity tier"
    )

    @field_validator("implementation_cost")
    @classmethod
    def implementation_tiers_complete(
        cls, v: dict[ComplexityTier, float]
    ) -> dict[ComplexityTier, float]:
        _check_tiers(v, "implementation_cost")
        return v

    @field_validator("monthly_ai_cost")
    @classmethod
    def ai_cost_providers_complete(
        cls, v: dict[AIProvider, dict[ComplexityTier, float]]
    ) -> dict[AIProvider, dict[ComplexityTier, float]]:
        missing = set(AIProvider) - set(v)
        if missing:
            raise ValueError(
                f"monthly_ai_cost is missing providers: {sorted(p.value for p in missing)}"
            )
        for provider, table in v.items():
            _check_tiers(table, f"monthly_ai_cost[{provider.value}]")
        return v

    def implementation_cost_for(self, tier: ComplexityTier) -> float:
        return self.implementation_cost[tier]

    def monthly_ai_cost_for(self, provider: AIProvider, tier: ComplexityTier) -> float:
        return self.monthly_ai_cost[provider][tier]


DEFAULT_COST_TABLES = CostTables.model_validate(
    {
        "implementation_cost": {
            "low": 1_000_000,
            "medium": 2_000_000,
            "high": 3_000_000,
        },
        "monthly_ai_cost": {
            "yandex": {"low": 50_000, "medium": 100_000, "high": 200_000},
            "gigachat": {"low": 40_000, "medium": 80_000, "high": 160_000},
            "onprem": {"low": 30_000, "medium": 60_000, "high": 120_000},
        },
    }
)
