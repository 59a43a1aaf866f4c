"""
Business logic services for the climate alert system.

Services orchestrate API operations, exports and report rendering.
"""

from .data_fetcher import ClimateDataFetcher, ClimateDataError
from .exporter import ExcelExporter
from .report import render_alerts, render_summaries

__all__ = [
    "ClimateDataFetcher",
    "ClimateDataError",
    "ExcelExporter",
    "render_alerts",
    "render_summaries",
]
