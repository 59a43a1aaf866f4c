"""
City geocoding via OpenStreetMap Nominatim.
"""

import logging
from typing import Optional

from ..core import constants
from ..models.climate import GeoLocation
from .client import APIClient


class GeocodingAPI(APIClient):
    """Resolve a place name to coordinates."""

    def __init__(
        self,
        base_url: str = constants.DEFAULT_GEOCODING_URL,
        user_agent: str = constants.DEFAULT_USER_AGENT,
        timeout: int = 30,
        max_retries: int = 3,
        logger: Optional[logging.Logger] = None
    ):
        # Nominatim rejects requests without an identifying User-Agent
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            headers={"User-Agent": user_agent},
            logger=logger
        )

    def get_city_coordinates(self, city_name: str) -> Optional[GeoLocation]:
        """
        Look up the best match for a city name.

        Args:
            city_name: Free-form place name (e.g. "Patrocínio, MG")

        Returns:
            GeoLocation of the first match, or None if nothing matched

        Raises:
            ValueError: If city_name is empty
            requests.exceptions.RequestException: On request failure
        """
        if not city_name or not city_name.strip():
            raise ValueError("City name must not be empty")

        self.logger.info(f"Geocoding '{city_name}'")
        results = self.get(
            "/search",
            params={"format": "json", "q": city_name.strip(), "limit": 1}
        )

        if not results:
            self.logger.warning(f"No coordinates found for '{city_name}'")
            return None

        match = results[0]
        return GeoLocation(
            latitude=float(match["lat"]),
            longitude=float(match["lon"]),
            address=match.get("display_name"),
        )
