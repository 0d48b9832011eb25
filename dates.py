"""
Date normalizer - converts review dates like "Sep 7, 2024" to "2024/09/07".

Month names are matched against a fixed English table instead of going
through strptime's %b, which follows the process locale.
"""
import re
from datetime import date

MONTHS = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

# "Sep 7, 2024" / "September 7 2024"
_MONTH_FIRST = re.compile(r"^([A-Za-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})$")
# "7 Sep 2024" / "7 September, 2024"
_DAY_FIRST = re.compile(r"^(\d{1,2})\s+([A-Za-z]+)\.?,?\s+(\d{4})$")


class DateParseError(ValueError):
    """Raised when a review date string cannot be parsed"""


def parse_review_date(date_str: str) -> date:
    text = " ".join(date_str.split())

    match = _MONTH_FIRST.match(text)
    if match:
        month_name, day, year = match.groups()
    else:
        match = _DAY_FIRST.match(text)
        if not match:
            raise DateParseError(f"Unrecognized date format: {date_str!r}")
        day, month_name, year = match.groups()

    month = MONTHS.get(month_name.lower())
    if month is None:
        raise DateParseError(f"Unknown month name {month_name!r} in {date_str!r}")

    try:
        return date(int(year), month, int(day))
    except ValueError as e:
        raise DateParseError(f"Invalid date {date_str!r}: {e}") from e


def normalize_date(date_str: str) -> str:
    """Return date_str as zero-padded YYYY/MM/DD"""
    parsed = parse_review_date(date_str)
    return f"{parsed.year:04d}/{parsed.month:02d}/{parsed.day:02d}"
