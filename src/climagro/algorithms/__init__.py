"""
Climate anomaly detection algorithms.

Provides series normalization, threshold scanning, dry-streak tracking,
severity classification and the alert engine that combines them.
"""

from .normalizer import NormalizedSeries, SeriesPoint, normalize_series
from .scanner import ThresholdScanner, TemperatureScan, PrecipitationScan
from .streaks import StreakState, longest_dry_streak
from .severity import DEFAULT_BREAKPOINTS, classify_severity
from .assembler import AlertAssembler
from .engine import ClimateAlertEngine, analyze

__all__ = [
    "NormalizedSeries",
    "SeriesPoint",
    "normalize_series",
    "ThresholdScanner",
    "TemperatureScan",
    "PrecipitationScan",
    "StreakState",
    "longest_dry_streak",
    "DEFAULT_BREAKPOINTS",
    "classify_severity",
    "AlertAssembler",
    "ClimateAlertEngine",
    "analyze",
]
