from .chart import ChartData, build_chart_data
from .formatting import FormattedResult, format_result
from .summary import build_summary_message

__all__ = [
    "ChartData",
    "FormattedResult",
    "build_chart_data",
    "build_summary_message",
    "format_result",
]
