"""
Threshold scanning.

Walks a normalized series once and collects the display dates of every point
that crosses a threshold. The checks are independent: one cold reading can be
both an extreme-cold day and a frost-risk day.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..core.date_utils import DateUtils
from ..models.alert import ThresholdSet
from .normalizer import NormalizedSeries


@dataclass(frozen=True)
class TemperatureScan:
    """Flagged dates (DD/MM/YYYY, chronological) from the temperature series."""

    heat_dates: Tuple[str, ...] = ()
    cold_dates: Tuple[str, ...] = ()
    frost_dates: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PrecipitationScan:
    """Flagged dates (DD/MM/YYYY, chronological) from the precipitation series."""

    heavy_rain_dates: Tuple[str, ...] = ()


class ThresholdScanner:
    """Single-pass threshold classification of daily series."""

    @staticmethod
    def scan_temperature(
        series: NormalizedSeries,
        thresholds: ThresholdSet
    ) -> TemperatureScan:
        """
        Flag heat, cold and frost-risk days.

        Args:
            series: Normalized daily mean temperature (°C)
            thresholds: Threshold set

        Returns:
            TemperatureScan with the dates of
                - t > extreme_heat_c
                - t < extreme_cold_c
                - t <= frost_risk_c
        """
        heat: List[str] = []
        cold: List[str] = []
        frost: List[str] = []

        for point in series:
            formatted = DateUtils.format_date_key(point.key)
            if point.value > thresholds.extreme_heat_c:
                heat.append(formatted)
            if point.value < thresholds.extreme_cold_c:
                cold.append(formatted)
            if point.value <= thresholds.frost_risk_c:
                frost.append(formatted)

        return TemperatureScan(
            heat_dates=tuple(heat),
            cold_dates=tuple(cold),
            frost_dates=tuple(frost),
        )

    @staticmethod
    def scan_precipitation(
        series: NormalizedSeries,
        thresholds: ThresholdSet
    ) -> PrecipitationScan:
        """
        Flag heavy-rain days (p > heavy_rain_mm).

        Args:
            series: Normalized daily precipitation (mm)
            thresholds: Threshold set

        Returns:
            PrecipitationScan with the heavy-rain dates
        """
        heavy_rain = [
            DateUtils.format_date_key(point.key)
            for point in series
            if point.value > thresholds.heavy_rain_mm
        ]
        return PrecipitationScan(heavy_rain_dates=tuple(heavy_rain))
