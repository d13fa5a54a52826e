"""Date and weekday parsing utilities."""

from datetime import date, datetime, time, timedelta
from typing import Optional

from dateutil import parser as date_parser

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "15 Jan 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"
    - Weekdays: "last monday" (strictly before today), "this week" /
      "next week" (the Monday of that week)

    Args:
        date_str: Date string in various formats
        today: Reference date, defaults to the current date

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this week": today - timedelta(days=today.weekday()),
        "next week": today + timedelta(days=7 - today.weekday()),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last ") and date_str[5:] in WEEKDAYS:
        days_ago = (today.weekday() - WEEKDAYS.index(date_str[5:])) % 7 or 7
        return today - timedelta(days=days_ago)

    # ISO first: dayfirst would read 2024-02-03 as 2 March
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        # dateutil fills missing parts from the default, so "15 jan" stays in this year
        return date_parser.parse(date_str, dayfirst=True, default=datetime.combine(today, time())).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_week_day(day_str: str, today: Optional[date] = None) -> int:
    """Parse a weekday into an index, Monday=0 .. Sunday=6.

    Accepts "today", a weekday name or three-letter prefix ("wed"), or a
    bare index. Indices are returned as given so the caller can reject
    out-of-range values.

    Raises:
        ValueError: If the string is not a weekday
    """
    day_str = day_str.strip().lower()
    if day_str == "today":
        return (today or date.today()).weekday()
    if day_str.lstrip("-").isdigit():
        return int(day_str)
    for index, name in enumerate(WEEKDAYS):
        if len(day_str) >= 3 and name.startswith(day_str):
            return index
    raise ValueError(f"Could not parse weekday '{day_str}'")
