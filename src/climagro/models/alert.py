"""
Alert data models.

Contains the threshold configuration and the value objects produced by the
climate alert engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..core import constants


class AlertKind(str, Enum):
    """Anomaly categories, in the order alerts are reported."""

    EXTREME_HEAT = "extreme_heat"
    EXTREME_COLD = "extreme_cold"
    FROST_RISK = "frost_risk"
    HEAVY_RAIN = "heavy_rain"
    DROUGHT = "drought"


class Severity(str, Enum):
    """Ordinal severity tier (low < medium < high < critical)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    # Order by tier, not by the str value
    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_ORDER = (Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL)


@dataclass(frozen=True)
class ThresholdSet:
    """Fixed limits that turn a daily value into a flagged event."""

    extreme_heat_c: float = constants.EXTREME_HEAT_C
    extreme_cold_c: float = constants.EXTREME_COLD_C
    frost_risk_c: float = constants.FROST_RISK_C
    heavy_rain_mm: float = constants.HEAVY_RAIN_MM
    drought_min_days: int = constants.DROUGHT_MIN_DAYS
    dry_day_mm: float = constants.DRY_DAY_MM
    max_display_dates: int = constants.MAX_DISPLAY_DATES


DEFAULT_THRESHOLDS = ThresholdSet()


@dataclass(frozen=True)
class Alert:
    """One detected anomaly category over the analyzed period."""

    kind: AlertKind
    severity: Severity
    title: str
    description: str
    matched_dates: Tuple[str, ...]  # DD/MM/YYYY, chronological, capped
    matched_count: int  # full count, or the streak length for drought

    @property
    def more_count(self) -> int:
        """
        Number of flagged dates not listed in matched_dates.

        Always 0 for undated alerts (drought), whose matched_count is a
        streak length rather than a number of dates.
        """
        if not self.matched_dates:
            return 0
        return max(self.matched_count - len(self.matched_dates), 0)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one engine run."""

    alerts: Tuple[Alert, ...] = ()
    skipped_points: int = 0
    analyzed_parameters: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_alerts(self) -> bool:
        return len(self.alerts) > 0

    def get(self, kind: AlertKind) -> Optional["Alert"]:
        """Return the alert of the given kind, or None if it was not raised."""
        for alert in self.alerts:
            if alert.kind == kind:
                return alert
        return None
