"""
Week Calendar Service

Maps dates onto the Monday-based weeks used as record keys.
- Week cycle: Monday to Sunday (7 days)
- Weekday numbering: Monday=1 ... Sunday=7
- Week identifier: ISO date of the Monday, e.g. "2026-10-12"
"""

from datetime import datetime, date, timedelta
from typing import Optional, Union
from dataclasses import dataclass

DateLike = Union[date, datetime]

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@dataclass
class WeekInfo:
    """Information about one calendar week."""
    week_id: str
    start_date: date
    end_date: date


class WeekCalendarService:
    """
    Service for week-start normalization and weekday arithmetic.

    All methods accept either a date or a datetime. A datetime is truncated to
    its calendar date first, so two timestamps on the same day always land in
    the same week.
    """

    DAYS_PER_WEEK = 7

    @staticmethod
    def _as_date(value: DateLike) -> date:
        if isinstance(value, datetime):
            return value.date()
        return value

    def weekday_index_of(self, value: DateLike) -> int:
        """
        Get the weekday index of a date.

        Returns:
            1 for Monday through 7 for Sunday.
        """
        return self._as_date(value).isoweekday()

    def week_start_of(self, value: DateLike) -> date:
        """
        Get the Monday on or before a date.

        Args:
            value: Date or datetime to normalize

        Returns:
            The Monday that starts the week containing ``value``
        """
        day = self._as_date(value)
        return day - timedelta(days=self.weekday_index_of(day) - 1)

    def week_id_of(self, value: DateLike) -> str:
        """Get the week identifier ("YYYY-MM-DD" of the Monday) for a date."""
        return self.week_start_of(value).isoformat()

    @staticmethod
    def parse_week_id(week_id: str) -> date:
        """
        Parse a week identifier back into a date.

        Raises:
            ValueError: If ``week_id`` is not a YYYY-MM-DD date
        """
        return datetime.strptime(week_id, "%Y-%m-%d").date()

    @staticmethod
    def weekday_index_of_name(day_name: str) -> Optional[int]:
        """
        Map a weekday name ("Monday" ... "Sunday") to its index.

        Returns:
            1-7, or None if the name is not a weekday
        """
        if not isinstance(day_name, str):
            return None
        normalized = day_name.strip().capitalize()
        if normalized not in WEEKDAY_NAMES:
            return None
        return WEEKDAY_NAMES.index(normalized) + 1

    def get_week_info(self, value: DateLike) -> WeekInfo:
        """Get the identifier and Monday-Sunday date range of a date's week."""
        start_date = self.week_start_of(value)
        return WeekInfo(
            week_id=start_date.isoformat(),
            start_date=start_date,
            end_date=start_date + timedelta(days=self.DAYS_PER_WEEK - 1)
        )


# Create singleton instance
week_calendar = WeekCalendarService()
