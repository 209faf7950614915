"""Event date parsing and formatting."""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime

_DATE_FORMATS = (
    "%d.%m.%Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%Y-%m-%d",
    "%b %d %Y",
    "%B %d %Y",
)


def parse_event_date(text: str | None) -> date | None:
    """Parse a stored or scraped event date. Returns None if unrecognized."""
    if not text:
        return None

    cleaned = text.strip()
    # "Jan 4th 2026" -> "Jan 4 2026"
    cleaned = re.sub(r"(\d{1,2})(st|nd|rd|th)\b", r"\1", cleaned)
    # ISO timestamps: keep the date part
    cleaned = re.sub(r"^(\d{4}-\d{2}-\d{2})T.*$", r"\1", cleaned)

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    return None


def format_readable(text: str | None) -> str | None:
    """Normalize a date string to "Mon D, YYYY", passing unknown input through."""
    if not text:
        return None
    parsed = parse_event_date(text)
    if parsed is None:
        return text
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def add_months(d: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month."""
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
