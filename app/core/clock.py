# /app/core/clock.py

"""Wall-clock helpers. Everything that stamps a time goes through `now()`."""

from datetime import datetime, timezone


def now() -> datetime:
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a trailing `Z`."""
    return now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso() -> str:
    return now().date().isoformat()


def timestamp_ms() -> int:
    return int(now().timestamp() * 1000)
