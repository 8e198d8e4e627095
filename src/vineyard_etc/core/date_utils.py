"""
Date and timezone utilities.

Centralizes date parsing and "today in the farm's timezone" lookups.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union, List
import pytz
from pytz.tzinfo import BaseTzInfo


DateLike = Union[date, datetime, str]


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
            timezone_str: Timezone string (e.g., 'Asia/Kolkata', 'UTC')

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
    def parse_date(value: DateLike) -> date:
        """
        Coerce a date, datetime or ISO string to a calendar date.

        Strings may be plain dates ('2024-05-15') or full ISO timestamps
        ('2024-05-15T06:00:00Z'); only the calendar day is kept.

        Raises:
            ValueError: If the string is not an ISO date
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return date.fromisoformat(text[:10])
            except ValueError:
                raise ValueError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
        raise ValueError(f"Unsupported date value: {value!r}")

    @staticmethod
    def day_of_year(value: DateLike) -> int:
        """Julian day number (1-365/366) of a date."""
        return DateUtils.parse_date(value).timetuple().tm_yday

    def today(
        self,
        timezone_str: str = "UTC",
        reference_time: Optional[datetime] = None
    ) -> date:
        """
        Get the current calendar day in the specified timezone.

        Args:
            timezone_str: Timezone string (e.g., 'Asia/Kolkata')
            reference_time: Reference time (defaults to now in UTC)

        Returns:
            Local calendar date
        """
        tz = self.parse_timezone(timezone_str)

        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            # Assume UTC if no timezone
            reference_time = pytz.UTC.localize(reference_time)

        local_time = reference_time.astimezone(tz)
        self.logger.debug(
            f"Reference time: {reference_time.isoformat()} -> "
            f"Local time: {local_time.isoformat()}"
        )
        return local_time.date()

    @staticmethod
    def date_range(start: date, end: date) -> List[date]:
        """
        Inclusive list of calendar days between two dates.

        Raises:
            ValueError: If end is before start
        """
        if end < start:
            raise ValueError(f"End date {end} is before start date {start}")
        return [start + timedelta(days=i) for i in range((end - start).days + 1)]
