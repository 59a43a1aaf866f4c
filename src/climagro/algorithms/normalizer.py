"""
Series normalization.

Turns a raw NASA POWER date-keyed mapping into a chronologically ordered
series, dropping malformed points instead of failing the whole analysis.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, NamedTuple, Optional, Tuple

from ..core import constants
from ..core.date_utils import DateUtils, InvalidDateKey


class SeriesPoint(NamedTuple):
    """A single daily observation."""

    key: str  # YYYYMMDD
    day: date
    value: float


@dataclass(frozen=True)
class NormalizedSeries:
    """Ordered daily series plus the number of points that were dropped."""

    points: Tuple[SeriesPoint, ...] = ()
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)


def _coerce_value(value: Any) -> Optional[float]:
    """Return the value as a float, or None if it is unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number == constants.POWER_FILL_VALUE:
        return None
    return number


def normalize_series(
    raw: Optional[Mapping[str, Any]],
    logger: Optional[logging.Logger] = None,
    parameter: str = ""
) -> NormalizedSeries:
    """
    Build an ordered series from a date-key mapping.

    Keys must be exactly 8 ASCII digits (YYYYMMDD). Points with an invalid key,
    a missing/non-numeric/NaN value or the NASA POWER fill value are logged and
    skipped.

    Args:
        raw: Mapping of YYYYMMDD key to value (None is treated as empty)
        logger: Logger instance
        parameter: Parameter code, used only in log messages

    Returns:
        NormalizedSeries sorted ascending by date key
    """
    logger = logger or logging.getLogger(__name__)
    if not raw:
        return NormalizedSeries()

    points = []
    skipped = 0
    for key, value in raw.items():
        try:
            day = DateUtils.parse_date_key(key)
        except InvalidDateKey as e:
            logger.warning(f"Skipping {parameter or 'series'} point: {e}")
            skipped += 1
            continue

        number = _coerce_value(value)
        if number is None:
            logger.warning(
                f"Skipping {parameter or 'series'} point {key}: unusable value {value!r}"
            )
            skipped += 1
            continue

        points.append(SeriesPoint(key, day, number))

    # Zero-padded YYYYMMDD keys sort lexicographically in chronological order
    points.sort(key=lambda point: point.key)

    if skipped:
        logger.info(f"Normalized {parameter or 'series'}: {len(points)} points, {skipped} skipped")

    return NormalizedSeries(points=tuple(points), skipped=skipped)
