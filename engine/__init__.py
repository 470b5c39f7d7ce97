"""
engine/
-------
Run recording & reporting layer.

    from engine import Recorder, RunMetrics, summarize, format_report
"""

from engine.recorder import Recorder, RunMetrics
from engine.report   import GraphReport, summarize, format_report

__all__ = [
    "Recorder",
    "RunMetrics",
    "GraphReport",
    "summarize",
    "format_report",
]
