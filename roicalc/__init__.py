"""AI agent ROI calculator."""

__version__ = "0.1.0"
