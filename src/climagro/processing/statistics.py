"""
Series statistics module.

Calculates per-parameter summaries (average, minimum, maximum, day count)
for the dashboard cards.
"""

import logging
import statistics
from typing import Any, Dict, List, Mapping, Optional

from ..core import constants
from ..models.climate import ParameterSummary
from ..algorithms.normalizer import normalize_series


class SeriesStatistics:
    """Summarize retrieved daily series."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize series statistics.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def summarize_parameter(
        self,
        code: str,
        series: Optional[Mapping[str, Any]]
    ) -> ParameterSummary:
        """
        Summarize one parameter.

        Fill values and malformed points are ignored.

        Args:
            code: Parameter code
            series: Mapping of YYYYMMDD key to value

        Returns:
            ParameterSummary; aggregates are None when no valid values exist
        """
        name, unit = constants.PARAMETERS.get(code, (code, ""))
        values = [point.value for point in normalize_series(series, self.logger, code)]

        if not values:
            self.logger.warning(f"No valid values for {code}")
            return ParameterSummary(code=code, name=name, unit=unit, count=0)

        summary = ParameterSummary(
            code=code,
            name=name,
            unit=unit,
            count=len(values),
            average=statistics.mean(values),
            minimum=min(values),
            maximum=max(values),
        )
        self.logger.debug(
            f"{code}: avg={summary.average:.2f}, min={summary.minimum:.2f}, "
            f"max={summary.maximum:.2f}, n={summary.count}"
        )
        return summary

    def summarize(
        self,
        dataset: Mapping[str, Mapping[str, Any]],
        parameters: Optional[List[str]] = None
    ) -> Dict[str, ParameterSummary]:
        """
        Summarize every requested parameter.

        Args:
            dataset: Mapping of parameter code to {YYYYMMDD: value}
            parameters: Codes to summarize, in display order (defaults to the
                        dataset keys)

        Returns:
            Dictionary of parameter code to ParameterSummary
        """
        codes = parameters if parameters is not None else list(dataset.keys())
        return {code: self.summarize_parameter(code, dataset.get(code)) for code in codes}
