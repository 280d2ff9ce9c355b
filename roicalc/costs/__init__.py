from .loader import load_cost_tables
from .schema import DEFAULT_COST_TABLES, CostTables

__all__ = ["CostTables", "DEFAULT_COST_TABLES", "load_cost_tables"]
