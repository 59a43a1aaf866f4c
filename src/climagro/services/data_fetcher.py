"""
Climate data fetching service.

Validates a request, retrieves daily point data from NASA POWER and turns the
response into a ClimateData object the engine and exporters can consume.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

import requests  # type: ignore

from ..core import DateUtils
from ..models.climate import ClimateData
from ..processing.validator import RequestValidator

if TYPE_CHECKING:
    from ..api import PowerAPI


class ClimateDataError(Exception):
    """Raised when climate data cannot be retrieved or decoded."""


class ClimateDataFetcher:
    """Fetch daily point climate data."""

    def __init__(
        self,
        api_client: "PowerAPI",
        timezone: str = "UTC",
        data_lag_days: Optional[int] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize data fetcher.

        Args:
            api_client: NASA POWER client
            timezone: Timezone that defines "today" for the latest available day
            data_lag_days: Publication lag; None disables the end-date check
            logger: Logger instance
        """
        self.api_client = api_client
        self.timezone = timezone
        self.data_lag_days = data_lag_days
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = DateUtils(logger)
        self.validator = RequestValidator(logger)

    def latest_available_date(self) -> Optional[date]:
        if self.data_lag_days is None:
            return None
        return self.date_utils.latest_available_date(self.timezone, self.data_lag_days)

    def fetch(
        self,
        latitude: float,
        longitude: float,
        parameters: List[str],
        start_date: Union[str, date],
        end_date: Union[str, date]
    ) -> ClimateData:
        """
        Fetch daily data for a point and date range.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            parameters: Parameter codes to retrieve
            start_date: First day (YYYY-MM-DD or date)
            end_date: Last day (YYYY-MM-DD or date)

        Returns:
            ClimateData; parameters missing from the response map to empty series

        Raises:
            ValueError: If the request is invalid
            ClimateDataError: If the service call fails or returns an
                unexpected payload
        """
        self.validator.ensure_valid(
            latitude, longitude, parameters, start_date, end_date,
            latest_date=self.latest_available_date()
        )

        try:
            response = self.api_client.get_daily_point(
                latitude, longitude, parameters, start_date, end_date
            )
        except requests.exceptions.RequestException as e:
            raise ClimateDataError(f"Failed to fetch NASA POWER data: {e}") from e
        except ValueError as e:
            # Body was not valid JSON
            raise ClimateDataError(f"Invalid NASA POWER response: {e}") from e

        dataset = self.extract_dataset(response, parameters)

        return ClimateData(
            latitude=latitude,
            longitude=longitude,
            start_date=DateUtils.parse_iso_date(start_date).isoformat(),
            end_date=DateUtils.parse_iso_date(end_date).isoformat(),
            parameters=list(parameters),
            dataset=dataset,
            geometry=response.get("geometry"),
        )

    def extract_dataset(
        self,
        response: Any,
        parameters: List[str]
    ) -> Dict[str, Dict[str, float]]:
        """
        Extract properties.parameter from a POWER response.

        Args:
            response: Decoded JSON response
            parameters: Requested parameter codes

        Returns:
            Mapping of parameter code to {YYYYMMDD: value}

        Raises:
            ClimateDataError: If the payload has no parameter block
        """
        if not isinstance(response, dict):
            raise ClimateDataError("Invalid NASA POWER response: expected a JSON object")

        block = (response.get("properties") or {}).get("parameter")
        if not isinstance(block, dict):
            messages = response.get("messages") or response.get("errors")
            raise ClimateDataError(
                f"NASA POWER response has no parameter data{f': {messages}' if messages else ''}"
            )

        dataset = {}
        for code in parameters:
            series = block.get(code)
            if not series:
                self.logger.warning(f"Parameter {code} missing from NASA POWER response")
                series = {}
            dataset[code] = dict(series)

        self.logger.info(
            f"Retrieved {', '.join(f'{code}={len(values)}' for code, values in dataset.items())} points"
        )
        return dataset
