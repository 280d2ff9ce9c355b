"""Load and validate cost tables from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from roicalc.costs.schema import DEFAULT_COST_TABLES, CostTables


def load_cost_tables(file_path: Union[Path, str, None] = None) -> CostTables:
    """Load and validate cost tables from a JSON file.

    If no path is provided, returns the built-in default tables.
    """
    if file_path is None:
        return DEFAULT_COST_TABLES

    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Cost tables config not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    return CostTables.model_validate(raw)
