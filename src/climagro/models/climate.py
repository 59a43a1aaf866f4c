"""
Climate data models.

Contains DTOs for locations, retrieved datasets and parameter summaries.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, List, Any


@dataclass
class GeoLocation:
    """Coordinates resolved for a place name."""

    latitude: float
    longitude: float
    address: Optional[str] = None


@dataclass
class ClimateData:
    """Daily point data retrieved for one location and date range."""

    latitude: float
    longitude: float
    start_date: str  # YYYY-MM-DD
    end_date: str  # YYYY-MM-DD
    parameters: List[str]
    # Parameter code -> {YYYYMMDD: value}
    dataset: Dict[str, Dict[str, float]] = field(default_factory=dict)
    geometry: Optional[Dict[str, Any]] = None

    def series(self, code: str) -> Dict[str, float]:
        """Get the raw date-keyed series for a parameter (empty if absent)."""
        return self.dataset.get(code, {})


@dataclass
class ParameterSummary:
    """Descriptive statistics for one parameter over the period."""

    code: str
    name: str
    unit: str
    count: int
    average: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
