"""
Date helpers for booking display and API payloads.

The backend speaks ISO-8601 UTC ("2024-02-20T14:00:00.000Z"). Display
helpers convert to the given tz, or to the local zone when tz is None.
"""

from datetime import datetime, timezone, tzinfo, timedelta
from typing import Optional, Union

DateLike = Union[str, datetime]


def parse_iso(value: DateLike) -> datetime:
    """Parse an ISO-8601 string (trailing Z accepted); datetimes pass through."""
    if isinstance(value, datetime):
        return value
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _localize(value: DateLike, tz: Optional[tzinfo]) -> datetime:
    dt = parse_iso(value)
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(tz) if tz else dt.astimezone()


def _clock(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def format_booking_time(start: DateLike, end: DateLike, tz: Optional[tzinfo] = None) -> str:
    """'9:00 AM - 10:30 AM'"""
    return f"{_clock(_localize(start, tz))} - {_clock(_localize(end, tz))}"


def format_booking_date(
    value: DateLike,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    """'Today', 'Tomorrow', or 'Mon, Feb 5'."""
    dt = _localize(value, tz)
    current = now or datetime.now(dt.tzinfo)
    if current.tzinfo and dt.tzinfo:
        current = current.astimezone(dt.tzinfo)

    if dt.date() == current.date():
        return "Today"
    if dt.date() == current.date() + timedelta(days=1):
        return "Tomorrow"
    return f"{dt:%a, %b} {dt.day}"


def format_full_date(value: DateLike, tz: Optional[tzinfo] = None) -> str:
    """'Monday, February 5, 2024'"""
    dt = _localize(value, tz)
    return f"{dt:%A, %B} {dt.day}, {dt.year}"


def format_relative_time(value: DateLike, now: Optional[datetime] = None) -> str:
    """
    Human distance from now with a direction suffix.

    Buckets follow the usual "about 2 hours ago" / "in 3 days" wording:
    minutes up to 45, hours up to a day, days up to a month, then months
    and years.
    """
    dt = parse_iso(value)
    if now is None:
        now = datetime.now(timezone.utc) if dt.tzinfo else datetime.now()

    seconds = (dt - now).total_seconds()
    distance = _distance(abs(seconds))
    return f"in {distance}" if seconds > 0 else f"{distance} ago"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _distance(seconds: float) -> str:
    minutes = round(seconds / 60)

    if minutes < 1:
        return "less than a minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < 1440:
        return f"about {_plural(round(minutes / 60), 'hour')}"
    if minutes < 2520:
        return "1 day"
    if minutes < 43200:
        return _plural(round(minutes / 1440), "day")
    if minutes < 86400:
        return f"about {_plural(round(minutes / 43200), 'month')}"

    months = round(minutes / 43200)
    if months < 12:
        return _plural(months, "month")

    years, remainder = divmod(months, 12)
    if remainder < 3:
        return f"about {_plural(years, 'year')}"
    if remainder < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def format_date_for_api(value: datetime) -> str:
    """
    UTC ISO-8601 with millisecond precision, e.g. '2024-02-20T14:00:00.000Z'.

    Naive datetimes are taken as local time.
    """
    utc = value.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"
