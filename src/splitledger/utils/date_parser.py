"""Date parsing for expense dates and statistics reference dates."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

DAYS_BACK = {"today": 0, "yesterday": 1}


def _last_weekday(today: date, weekday: str) -> date:
    # Strictly before today: "last friday" on a Friday is a week ago
    days_ago = (today.weekday() - WEEKDAYS.index(weekday)) % 7 or 7
    return today - timedelta(days=days_ago)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse an expense date.

    Accepts anything dateutil reads ("2024-03-01", "1 March 2024", ...) and
    a few relative words:

    - "today", "yesterday"
    - "last friday" (any weekday)
    - "this month": today, so month statistics run to date
    - "last month": the last day of the previous month, so its statistics
      cover the whole month

    Args:
        date_str: Text to parse
        today: Reference date for relative words; defaults to date.today()

    Raises:
        ValueError: If the text is not a date
    """
    text = date_str.strip().lower()
    today = today or date.today()

    if text in DAYS_BACK:
        return today - timedelta(days=DAYS_BACK[text])
    if text == "this month":
        return today
    if text == "last month":
        return today.replace(day=1) - timedelta(days=1)
    if text.startswith("last ") and text[5:] in WEEKDAYS:
        return _last_weekday(today, text[5:])

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from None
