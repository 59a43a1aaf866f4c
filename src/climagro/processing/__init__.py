"""
Data processing module for the climate alert system.

Provides request validation and descriptive statistics of retrieved series.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..models.climate import ParameterSummary
from .statistics import SeriesStatistics
from .validator import RequestValidator


class DataProcessor:
    """
    Unified data processor combining validation and statistics.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize data processor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.validator = RequestValidator(logger)
        self.statistics = SeriesStatistics(logger)

    def validate_request(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        parameters: Optional[List[str]],
        start_date: Union[str, date],
        end_date: Union[str, date],
        latest_date: Optional[date] = None
    ) -> Tuple[bool, List[str]]:
        """Validate a daily point request. See RequestValidator."""
        return self.validator.validate_request(
            latitude, longitude, parameters, start_date, end_date, latest_date
        )

    def summarize(
        self,
        dataset: Mapping[str, Mapping[str, Any]],
        parameters: Optional[List[str]] = None
    ) -> Dict[str, ParameterSummary]:
        """Summarize retrieved series. See SeriesStatistics."""
        return self.statistics.summarize(dataset, parameters)


__all__ = [
    "RequestValidator",
    "SeriesStatistics",
    "DataProcessor",
]
