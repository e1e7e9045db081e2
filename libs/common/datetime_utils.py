"""Date and time helpers.

Usage:
    from libs.common.datetime_utils import utc_now, studio_today

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
"""

import calendar
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from libs.common.config import get_settings

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime.

    Always use this for timestamps in the database.
    """
    return datetime.now(timezone.utc)


def studio_today(tz_name: Optional[str] = None) -> date:
    """Return the current calendar date in the studio's timezone."""
    tz = ZoneInfo(tz_name or get_settings().TIMEZONE)
    return datetime.now(tz).date()


def weekday_name(day: date) -> str:
    """English weekday name for a date, e.g. ``"Monday"``."""
    return WEEKDAY_NAMES[day.weekday()]


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of shorter months.

    ``add_months(date(2024, 1, 31), 1)`` is ``date(2024, 2, 29)``.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
