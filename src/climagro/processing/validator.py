"""
Request validation module.

Validates climate data requests before they are sent to NASA POWER.
"""

import logging
from datetime import date
from typing import List, Optional, Tuple, Union

from ..core import constants
from ..core.date_utils import DateUtils


class RequestValidator:
    """Validate coordinates, parameters and date ranges."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize request validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_request(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        parameters: Optional[List[str]],
        start_date: Union[str, date],
        end_date: Union[str, date],
        latest_date: Optional[date] = None
    ) -> Tuple[bool, List[str]]:
        """
        Validate a daily point request.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            parameters: Requested parameter codes
            start_date: First day (YYYY-MM-DD or date)
            end_date: Last day (YYYY-MM-DD or date)
            latest_date: Most recent day available from the service, if known

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if latitude is None or longitude is None:
            errors.append("Latitude and longitude are required")
        else:
            if not (-90 <= latitude <= 90):
                errors.append(f"Invalid latitude: {latitude} (must be -90 to 90)")
            if not (-180 <= longitude <= 180):
                errors.append(f"Invalid longitude: {longitude} (must be -180 to 180)")

        if not parameters:
            errors.append("At least one climate parameter must be selected")
        else:
            unknown = [code for code in parameters if code not in constants.PARAMETERS]
            if unknown:
                errors.append(f"Unknown parameters: {', '.join(unknown)}")

        start = end = None
        try:
            start = DateUtils.parse_iso_date(start_date)
        except ValueError as e:
            errors.append(f"Invalid start date: {e}")
        try:
            end = DateUtils.parse_iso_date(end_date)
        except ValueError as e:
            errors.append(f"Invalid end date: {e}")

        if start is not None and end is not None and start > end:
            errors.append(f"Start date {start} is after end date {end}")

        if end is not None and latest_date is not None and end > latest_date:
            errors.append(
                f"End date {end} is after the latest available date {latest_date}"
            )

        if errors:
            self.logger.debug(f"Request validation failed: {errors}")

        return len(errors) == 0, errors

    def ensure_valid(self, *args, **kwargs) -> None:
        """
        Validate a request and raise on failure.

        Accepts the same arguments as validate_request().

        Raises:
            ValueError: With all validation errors joined
        """
        is_valid, errors = self.validate_request(*args, **kwargs)
        if not is_valid:
            raise ValueError("; ".join(errors))
