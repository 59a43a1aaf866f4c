"""
Climate alert engine facade.

This module wires normalization, threshold scanning, streak tracking and alert
assembly into a single pure call. The engine holds no state between calls, so
one instance can analyze any number of datasets concurrently.
"""

import logging
from typing import Any, Mapping, Optional

from ..core import constants
from ..models.alert import AlertKind, AnalysisResult, DEFAULT_THRESHOLDS, ThresholdSet
from .assembler import AlertAssembler
from .normalizer import normalize_series
from .scanner import ThresholdScanner
from .severity import Breakpoints, DEFAULT_BREAKPOINTS
from .streaks import longest_dry_streak

# Parameter code -> {YYYYMMDD: value}
Dataset = Mapping[str, Mapping[str, Any]]


class ClimateAlertEngine:
    """
    Detect heat, cold, frost, heavy-rain and drought anomalies.

    Only the T2M (°C) and PRECTOTCORR (mm) parameters are analyzed; a missing
    parameter simply suppresses its alert kinds.
    """

    def __init__(
        self,
        thresholds: ThresholdSet = DEFAULT_THRESHOLDS,
        breakpoints: Mapping[AlertKind, Breakpoints] = DEFAULT_BREAKPOINTS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the engine.

        Args:
            thresholds: Threshold set used for every analysis
            breakpoints: Severity breakpoint table per alert kind
            logger: Logger instance
        """
        self.thresholds = thresholds
        self.breakpoints = breakpoints
        self.logger = logger or logging.getLogger(__name__)

    def analyze(self, dataset: Optional[Dataset]) -> AnalysisResult:
        """
        Analyze a dataset and return the alerts in reporting order.

        Args:
            dataset: Mapping of parameter code to {YYYYMMDD: value}

        Returns:
            AnalysisResult; its alerts tuple is empty when nothing abnormal
            was found
        """
        dataset = dataset or {}
        assembler = AlertAssembler(self.thresholds, self.breakpoints)
        alerts = []
        skipped = 0
        analyzed = []

        if constants.TEMPERATURE_PARAMETER in dataset:
            analyzed.append(constants.TEMPERATURE_PARAMETER)
            temperature = normalize_series(
                dataset[constants.TEMPERATURE_PARAMETER],
                self.logger,
                constants.TEMPERATURE_PARAMETER,
            )
            skipped += temperature.skipped
            scan = ThresholdScanner.scan_temperature(temperature, self.thresholds)
            alerts.extend(assembler.temperature_alerts(scan))

        if constants.PRECIPITATION_PARAMETER in dataset:
            analyzed.append(constants.PRECIPITATION_PARAMETER)
            precipitation = normalize_series(
                dataset[constants.PRECIPITATION_PARAMETER],
                self.logger,
                constants.PRECIPITATION_PARAMETER,
            )
            skipped += precipitation.skipped
            scan = ThresholdScanner.scan_precipitation(precipitation, self.thresholds)
            max_streak = longest_dry_streak(precipitation, self.thresholds)
            self.logger.debug(f"Longest dry streak: {max_streak} days")
            alerts.extend(assembler.precipitation_alerts(scan, max_streak))

        if skipped:
            self.logger.warning(f"Skipped {skipped} malformed data points during analysis")

        self.logger.info(
            f"Climate analysis complete: {len(alerts)} alerts "
            f"({', '.join(alert.kind.value for alert in alerts) or 'none'})"
        )

        return AnalysisResult(
            alerts=tuple(alerts),
            skipped_points=skipped,
            analyzed_parameters=tuple(analyzed),
        )


def analyze(
    dataset: Optional[Dataset],
    thresholds: ThresholdSet = DEFAULT_THRESHOLDS
) -> AnalysisResult:
    """Analyze a dataset with the given thresholds."""
    return ClimateAlertEngine(thresholds=thresholds).analyze(dataset)
