from .audit_hooks import log_calculation

__all__ = ["log_calculation"]
