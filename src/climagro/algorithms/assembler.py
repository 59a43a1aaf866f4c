"""
Alert assembly.

Builds the ordered alert list from the scanner and streak outputs. Kinds with
no matches are left out entirely.
"""

from typing import List, Mapping, Optional, Sequence

from ..models.alert import Alert, AlertKind, ThresholdSet
from .scanner import PrecipitationScan, TemperatureScan
from .severity import Breakpoints, DEFAULT_BREAKPOINTS, classify_severity
from .streaks import is_drought


class AlertAssembler:
    """Turn detection results into display-ready Alert records."""

    def __init__(
        self,
        thresholds: ThresholdSet,
        breakpoints: Mapping[AlertKind, Breakpoints] = DEFAULT_BREAKPOINTS
    ):
        self.thresholds = thresholds
        self.breakpoints = breakpoints

    def _dated_alert(
        self,
        kind: AlertKind,
        dates: Sequence[str],
        title: str,
        description: str
    ) -> Optional[Alert]:
        if not dates:
            return None
        count = len(dates)
        return Alert(
            kind=kind,
            severity=classify_severity(kind, count, self.breakpoints),
            title=title,
            description=description,
            matched_dates=tuple(dates[: self.thresholds.max_display_dates]),
            matched_count=count,
        )

    def temperature_alerts(self, scan: TemperatureScan) -> List[Alert]:
        t = self.thresholds
        candidates = [
            self._dated_alert(
                AlertKind.EXTREME_HEAT,
                scan.heat_dates,
                "Heat waves detected",
                f"Temperatures above {t.extreme_heat_c:g}°C detected on "
                f"{len(scan.heat_dates)} days. Risk of heat stress on crops.",
            ),
            self._dated_alert(
                AlertKind.EXTREME_COLD,
                scan.cold_dates,
                "Extremely low temperatures",
                f"Temperatures below {t.extreme_cold_c:g}°C detected on "
                f"{len(scan.cold_dates)} days.",
            ),
            self._dated_alert(
                AlertKind.FROST_RISK,
                scan.frost_dates,
                "Frost risk",
                f"Temperatures at or below {t.frost_risk_c:g}°C detected on "
                f"{len(scan.frost_dates)} days. High frost risk for sensitive crops.",
            ),
        ]
        return [alert for alert in candidates if alert is not None]

    def precipitation_alerts(self, scan: PrecipitationScan, max_dry_streak: int) -> List[Alert]:
        t = self.thresholds
        alerts = []

        heavy_rain = self._dated_alert(
            AlertKind.HEAVY_RAIN,
            scan.heavy_rain_dates,
            "Heavy rainfall detected",
            f"Precipitation above {t.heavy_rain_mm:g} mm/day detected on "
            f"{len(scan.heavy_rain_dates)} days. Risk of waterlogging and erosion.",
        )
        if heavy_rain is not None:
            alerts.append(heavy_rain)

        if is_drought(max_dry_streak, t):
            alerts.append(Alert(
                kind=AlertKind.DROUGHT,
                severity=classify_severity(AlertKind.DROUGHT, max_dry_streak, self.breakpoints),
                title="Prolonged dry period",
                description=(
                    f"Up to {max_dry_streak} consecutive days with precipitation "
                    f"below {t.dry_day_mm:g} mm (drought threshold {t.drought_min_days} days). "
                    "Risk of water stress on crops."
                ),
                matched_dates=(),
                matched_count=max_dry_streak,
            ))

        return alerts
