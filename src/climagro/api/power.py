"""
NASA POWER API operations.

Retrieves daily point time series for a latitude/longitude and date range.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

from ..core import constants
from ..core.date_utils import DateUtils
from .client import APIClient


class PowerAPI(APIClient):
    """Client for the NASA POWER daily point endpoint."""

    DAILY_POINT_ENDPOINT = "/temporal/daily/point"

    def __init__(
        self,
        base_url: str = constants.DEFAULT_POWER_URL,
        community: str = constants.DEFAULT_POWER_COMMUNITY,
        user: str = constants.DEFAULT_POWER_USER,
        timeout: int = 30,
        max_retries: int = 3,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize NASA POWER client.

        Args:
            base_url: API base URL (without the /temporal path)
            community: POWER user community (RE, AG or SB)
            user: Identifier sent with each request
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            logger=logger
        )
        self.community = community
        self.user = user

    def build_daily_point_params(
        self,
        latitude: float,
        longitude: float,
        parameters: List[str],
        start_date: Union[str, date],
        end_date: Union[str, date]
    ) -> Dict[str, Any]:
        """Build the query string for a daily point request."""
        return {
            "start": DateUtils.to_date_key(start_date),
            "end": DateUtils.to_date_key(end_date),
            "latitude": latitude,
            "longitude": longitude,
            "community": self.community,
            "parameters": ",".join(parameters),
            "format": "JSON",
            "user": self.user,
        }

    def get_daily_point(
        self,
        latitude: float,
        longitude: float,
        parameters: List[str],
        start_date: Union[str, date],
        end_date: Union[str, date]
    ) -> Dict[str, Any]:
        """
        Get daily point data.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            parameters: Parameter codes (e.g. ["T2M", "PRECTOTCORR"])
            start_date: First day (YYYY-MM-DD or date)
            end_date: Last day (YYYY-MM-DD or date)

        Returns:
            GeoJSON feature with properties.parameter mapping each code to
            {YYYYMMDD: value}
        """
        self.logger.info(
            f"Fetching NASA POWER data for ({latitude:.4f}, {longitude:.4f}) "
            f"{start_date} to {end_date}: {', '.join(parameters)}"
        )
        params = self.build_daily_point_params(
            latitude, longitude, parameters, start_date, end_date
        )
        return self.get(self.DAILY_POINT_ENDPOINT, params=params)
