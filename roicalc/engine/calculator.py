"""Core calculation engine.

Takes input parameters + cost tables -> produces CalculationResult.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from roicalc.costs.schema import DEFAULT_COST_TABLES, CostTables
from roicalc.engine.formulas import (
    DEFAULT_HORIZON_MONTHS,
    compute_hourly_rate,
    compute_money_saved,
    compute_net_saved,
    compute_payback_period,
    compute_roi,
    compute_time_saved,
    generate_profit_series,
)
from roicalc.engine.result import CalculationResult
from roicalc.models.enums import AIProvider, ComplexityTier
from roicalc.models.inputs import InputParameters

logger = logging.getLogger(__name__)


class CalculationEngine:
    """Stateless engine that runs ROI calculations against fixed cost tables."""

    def __init__(
        self,
        cost_tables: Optional[CostTables] = None,
        horizon_months: int = DEFAULT_HORIZON_MONTHS,
    ) -> None:
        if horizon_months < 0:
            raise ValueError(f"horizon_months cannot be negative, got {horizon_months}")
        self._cost_tables = cost_tables or DEFAULT_COST_TABLES
        self._horizon_months = horizon_months

    @property
    def cost_tables(self) -> CostTables:
        return self._cost_tables

    def resolve_costs(
        self,
        complexity: Union[ComplexityTier, str, None],
        provider: Union[AIProvider, str, None],
    ) -> tuple[float, float]:
        """Return (implementation_cost, monthly_ai_cost) for a tier and provider.

        Unknown tiers and providers fall back to the defaults.
        """
        tier, backend = self._resolve_categories(complexity, provider)
        return (
            self._cost_tables.implementation_cost_for(tier),
            self._cost_tables.monthly_ai_cost_for(backend, tier),
        )

    def calculate(self, inputs: InputParameters) -> CalculationResult:
        """Run the full ROI calculation for one set of input parameters."""
        tier, backend = self._resolve_categories(inputs.complexity, inputs.provider)
        implementation_cost, monthly_ai_cost = self.resolve_costs(tier, backend)

        hourly_rate = compute_hourly_rate(inputs.monthly_salary)
        time_saved = compute_time_saved(
            inputs.requests_per_month, inputs.processing_time_minutes
        )
        money_saved = compute_money_saved(time_saved, hourly_rate)
        net_saved = compute_net_saved(money_saved, monthly_ai_cost)

        payback = compute_payback_period(implementation_cost, net_saved)
        roi = compute_roi(money_saved, monthly_ai_cost, implementation_cost)

        series = generate_profit_series(
            implementation_cost, net_saved, self._horizon_months
        )

        return CalculationResult(
            complexity=tier,
            provider=backend,
            hourly_rate=hourly_rate,
            implementation_cost=implementation_cost,
            monthly_ai_cost=monthly_ai_cost,
            time_saved_hours=time_saved,
            money_saved_per_month=money_saved,
            net_saved_per_month=net_saved,
            payback_period=payback,
            roi_percent_first_year=roi,
            profit_series=series,
        )

    @staticmethod
    def _resolve_categories(
        complexity: Union[ComplexityTier, str, None],
        provider: Union[AIProvider, str, None],
    ) -> tuple[ComplexityTier, AIProvider]:
        tier = ComplexityTier.coerce(complexity)
        backend = AIProvider.coerce(provider)
        if tier.value != complexity:
            logger.debug("Unknown complexity %r, using %s", complexity, tier.value)
        if backend.value != provider:
            logger.debug("Unknown provider %r, using %s", provider, backend.value)
        return tier, backend
