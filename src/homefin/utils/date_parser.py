"""Date parsing utilities."""

from datetime import datetime, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("week", "month", "quarter", "year", "all")


def parse_datetime(date_str: str) -> datetime:
    """Parse a date string into a datetime object.

    Supports:
    - Absolute dates and timestamps: "2024-01-15", "2024-01-15 10:30:00",
      "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow" (midnight)

    Args:
        date_str: Date string in various formats

    Returns:
        Naive datetime object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if date_str is None or not date_str.strip():
        raise ValueError("Empty date string")

    normalized = date_str.strip().lower()
    today = datetime.combine(datetime.now().date(), datetime.min.time())

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if normalized in relative_dates:
        return relative_dates[normalized]

    try:
        parsed = date_parser.parse(date_str.strip())
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

    # Timestamps are stored naive; aware values are normalized to their wall time.
    return parsed.replace(tzinfo=None)


def get_period_start(period: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Get the start of a trailing statistics period.

    Args:
        period: One of week, month, quarter, year, all
        now: Reference point, defaults to the current time

    Returns:
        Start datetime, or None for "all"

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    now = now or datetime.now()

    if period == "week":
        return now - timedelta(days=7)
    elif period == "month":
        return now - relativedelta(months=1)
    elif period == "quarter":
        return now - relativedelta(months=3)
    elif period == "year":
        return now - relativedelta(years=1)
    elif period == "all":
        return None
    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
