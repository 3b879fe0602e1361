# /app/services/analytics_helpers/dates.py

from datetime import date, datetime, timezone
from typing import Optional


def parse_record_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parses the date strings stored on records: plain ISO dates
    ("2024-01-03"), local datetimes ("2024-01-03T10:00") and UTC
    timestamps ("2024-01-03T10:00:00.000Z"). Aware values are converted to
    naive UTC so every result compares with every other. Returns None for
    anything unparsable.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(text[:10]), datetime.min.time())
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def calendar_day(value: str) -> str:
    """The calendar-day part of an ISO datetime string."""
    return value.split("T")[0]
