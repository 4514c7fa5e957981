"""Date and weekday utilities for the strategy dashboard.

Provides conversion of user input to calendar dates (no time-of-day),
calendar and weekday ranges, and the ISO formatting used by the surfaces.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional
import pandas as pd

from .exceptions import InvalidDateRangeError


def to_calendar_date(value: Any) -> date:
    """
    Convert a date-like value to a calendar date, dropping any time of day.

    Args:
        value: date, datetime, pandas Timestamp, numpy datetime64 or ISO string

    Returns:
        Calendar date

    Raises:
        InvalidDateRangeError: If the value cannot be interpreted as a date

    Example:
        >>> to_calendar_date("2023-03-01T15:30:00")
        datetime.date(2023, 3, 1)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        timestamp = pd.Timestamp(value)
    except (ValueError, TypeError) as e:
        raise InvalidDateRangeError(f"Cannot interpret {value!r} as a date: {e}")

    if pd.isna(timestamp):
        raise InvalidDateRangeError(f"Cannot interpret {value!r} as a date")

    return timestamp.date()


def get_calendar_days(start_date: Any, end_date: Any) -> pd.DatetimeIndex:
    """
    Get every calendar day between start and end dates.

    Args:
        start_date: Start date (inclusive)
        end_date: End date (inclusive)

    Returns:
        DatetimeIndex with daily frequency; empty if start is after end

    Example:
        >>> days = get_calendar_days("2023-03-01", "2023-03-10")
        >>> len(days)
        10
    """
    return pd.date_range(
        start=to_calendar_date(start_date),
        end=to_calendar_date(end_date),
        freq='D',
    )


def get_business_days(start_date: Any, end_date: Any) -> pd.DatetimeIndex:
    """
    Get all weekdays (Monday to Friday) between start and end dates.

    Holidays are not excluded.

    Args:
        start_date: Start date (inclusive)
        end_date: End date (inclusive)

    Returns:
        DatetimeIndex of weekdays
    """
    return pd.bdate_range(
        start=to_calendar_date(start_date),
        end=to_calendar_date(end_date),
    )


def count_weekdays(start_date: Any, end_date: Any) -> int:
    """
    Count weekdays in the inclusive range.

    Example:
        >>> count_weekdays("2023-03-01", "2023-03-10")
        8
    """
    return len(get_business_days(start_date, end_date))


def is_business_day(value: Any) -> bool:
    """
    Check if a date falls on a weekday.

    Example:
        >>> is_business_day(date(2023, 3, 4))  # Saturday
        False
    """
    # Monday=0, Sunday=6
    return to_calendar_date(value).weekday() < 5


def today_utc(now: Optional[datetime] = None) -> date:
    """Current calendar date in UTC."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date()


def days_before(value: Any, days: int) -> date:
    """Calendar date ``days`` days before ``value``."""
    return to_calendar_date(value) - timedelta(days=days)


def to_iso(value: Any) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return to_calendar_date(value).isoformat()
