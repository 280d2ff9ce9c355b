"""Audit hooks -- logs served calculations for the audit trail."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from roicalc.engine.result import CalculationResult
from roicalc.models.inputs import InputParameters

logger = logging.getLogger(__name__)


def log_calculation(
    inputs: InputParameters,
    result: CalculationResult,
    channel: str = "api",
) -> dict[str, Any]:
    """Record a calculation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "channel": channel,
        "inputs": asdict(inputs),
        "complexity": result.complexity.value,
        "provider": result.provider.value,
        "net_saved_per_month": result.net_saved_per_month,
        "payback_months": result.payback_period.months,
        "roi_percent": result.roi_percent_first_year,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
    logger.info(
        "Calculation audit: %s/%s roi=%.1f%% → %s",
        entry["complexity"],
        entry["provider"],
        entry["roi_percent"],
        channel,
    )
    return entry
