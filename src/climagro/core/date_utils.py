"""
Date and timezone utilities.

Centralizes date key parsing, display formatting and the timezone-aware
"latest available day" calculation used to bound NASA POWER requests.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

import pytz
from pytz.tzinfo import BaseTzInfo

from . import constants


class InvalidDateKey(ValueError):
    """Raised when a date key is not an 8-digit YYYYMMDD calendar date."""

    def __init__(self, key: object):
        self.key = key
        super().__init__(f"Invalid date key: {key!r} (expected YYYYMMDD)")


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'America/Sao_Paulo', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def parse_date_key(key: str) -> date:
        """
        Parse a NASA POWER date key.

        Args:
            key: Date key in YYYYMMDD format (exactly 8 ASCII digits)

        Returns:
            Calendar date

        Raises:
            InvalidDateKey: If the key is malformed or not a real date
        """
        if not isinstance(key, str) or len(key) != 8 or not (key.isascii() and key.isdigit()):
            raise InvalidDateKey(key)
        try:
            return datetime.strptime(key, constants.DATE_KEY_FORMAT).date()
        except ValueError:
            raise InvalidDateKey(key)

    @staticmethod
    def format_date_key(key: str) -> str:
        """
        Convert a YYYYMMDD key to the DD/MM/YYYY display form.

        This is the only conversion used for alert date lists.

        Raises:
            InvalidDateKey: If the key is malformed
        """
        DateUtils.parse_date_key(key)
        return f"{key[6:8]}/{key[4:6]}/{key[0:4]}"

    @staticmethod
    def to_date_key(value: Union[str, date]) -> str:
        """
        Convert an ISO date (YYYY-MM-DD string or date) to a YYYYMMDD key.

        Raises:
            ValueError: If the string is not an ISO date
        """
        if isinstance(value, str):
            value = datetime.strptime(value, constants.ISO_DATE_FORMAT).date()
        return value.strftime(constants.DATE_KEY_FORMAT)

    @staticmethod
    def parse_iso_date(value: Union[str, date]) -> date:
        """
        Parse a YYYY-MM-DD string into a date.

        Raises:
            ValueError: If the string is not an ISO date
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(value, constants.ISO_DATE_FORMAT).date()
        except ValueError:
            raise ValueError(f"Invalid date format: {value}. Use YYYY-MM-DD")

    def latest_available_date(
        self,
        timezone_str: str = "UTC",
        lag_days: int = constants.DEFAULT_DATA_LAG_DAYS,
        reference_time: Optional[datetime] = None
    ) -> date:
        """
        Get the most recent day expected to be published by NASA POWER.

        Args:
            timezone_str: Timezone used to determine "today"
            lag_days: Publication lag in days
            reference_time: Reference time (defaults to now in UTC)

        Returns:
            Date that lies lag_days before today in the given timezone

        Example:
            At 2024-01-15 01:00 America/Sao_Paulo with a 4 day lag,
            returns 2024-01-11
        """
        tz = self.parse_timezone(timezone_str)

        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            reference_time = pytz.UTC.localize(reference_time)

        local_time = reference_time.astimezone(tz)
        latest = local_time.date() - timedelta(days=lag_days)

        self.logger.debug(
            f"Reference time: {reference_time.isoformat()} -> "
            f"latest available date in {timezone_str}: {latest.isoformat()}"
        )
        return latest

    @staticmethod
    def date_keys_between(start: Union[str, date], end: Union[str, date]) -> List[str]:
        """
        List every YYYYMMDD key from start to end, inclusive.

        Args:
            start: First day (YYYY-MM-DD or date)
            end: Last day (YYYY-MM-DD or date)

        Returns:
            Chronological list of date keys, empty if start is after end
        """
        current = DateUtils.parse_iso_date(start)
        last = DateUtils.parse_iso_date(end)
        keys = []
        while current <= last:
            keys.append(current.strftime(constants.DATE_KEY_FORMAT))
            current += timedelta(days=1)
        return keys
