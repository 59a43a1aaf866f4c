"""
Data models for the climate alert system.

Contains DTOs for thresholds, alerts, retrieved climate data and summaries.
"""

from .alert import (
    AlertKind,
    Severity,
    ThresholdSet,
    DEFAULT_THRESHOLDS,
    Alert,
    AnalysisResult,
)
from .climate import GeoLocation, ClimateData, ParameterSummary

__all__ = [
    "AlertKind",
    "Severity",
    "ThresholdSet",
    "DEFAULT_THRESHOLDS",
    "Alert",
    "AnalysisResult",
    "GeoLocation",
    "ClimateData",
    "ParameterSummary",
]
