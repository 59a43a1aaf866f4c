"""
Dry-day streak tracking.

The longest dry streak is computed as a fold over the ordered precipitation
series. Adjacency is by series entry, not by calendar day: if the source skips
days, the surviving entries are treated as consecutive.
"""

from dataclasses import dataclass
from functools import reduce

from ..models.alert import ThresholdSet
from .normalizer import NormalizedSeries, SeriesPoint


@dataclass(frozen=True)
class StreakState:
    """Accumulator for the dry-streak fold."""

    current_streak: int = 0
    max_streak: int = 0


def advance(state: StreakState, precipitation: float, dry_day_mm: float) -> StreakState:
    """Fold step: extend the streak on a dry day, reset it otherwise."""
    if precipitation < dry_day_mm:
        current = state.current_streak + 1
        return StreakState(current, max(state.max_streak, current))
    return StreakState(0, state.max_streak)


def longest_dry_streak(series: NormalizedSeries, thresholds: ThresholdSet) -> int:
    """
    Length of the longest run of consecutive entries below dry_day_mm.

    Args:
        series: Normalized daily precipitation (mm)
        thresholds: Threshold set (uses dry_day_mm)

    Returns:
        Maximum streak length, 0 for an empty series
    """
    def step(state: StreakState, point: SeriesPoint) -> StreakState:
        return advance(state, point.value, thresholds.dry_day_mm)

    return reduce(step, series, StreakState()).max_streak


def is_drought(max_streak: int, thresholds: ThresholdSet) -> bool:
    return max_streak >= thresholds.drought_min_days
