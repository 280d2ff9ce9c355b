"""Shared test fixtures for the ROI calculator test suite."""

import pytest

from roicalc.costs import DEFAULT_COST_TABLES, CostTables
from roicalc.engine import CalculationEngine
from roicalc.models.inputs import InputParameters


@pytest.fixture
def engine() -> CalculationEngine:
    return CalculationEngine()


@pytest.fixture
def default_inputs() -> InputParameters:
    """The calculator's initial slider positions.

    5000 requests x 10 min, salary 100 000, medium complexity, YandexGPT.
    """
    return InputParameters(
        requests_per_month=5000,
        processing_time_minutes=10,
        monthly_salary=100_000,
        complexity="medium",
        provider="yandex",
    )


@pytest.fixture
def zero_salary_inputs() -> InputParameters:
    return InputParameters(
        requests_per_month=5000,
        processing_time_minutes=10,
        monthly_salary=0,
        complexity="medium",
        provider="yandex",
    )


@pytest.fixture
def free_low_tier_tables() -> CostTables:
    """Default tables with a zero-cost low tier for every provider."""
    raw = DEFAULT_COST_TABLES.model_dump(mode="json")
    raw["implementation_cost"]["low"] = 0
    for provider_costs in raw["monthly_ai_cost"].values():
        provider_costs["low"] = 0
    return CostTables.model_validate(raw)
