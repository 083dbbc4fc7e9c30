"""Time and day helpers shared by the itinerary views and the schemas.

Times are stored as ``HH:MM`` strings next to plain dates, so most of the
helpers here deal with turning user input into that shape and with
ordering events that may or may not carry a time.
"""
import re
from datetime import date, datetime, time, timezone
from typing import Optional

DAY_PALETTE_SIZE = 8

# Light backgrounds used to tint each trip day, in order
DAY_COLORS = [
    "#fce7f3",
    "#dbeafe",
    "#dcfce7",
    "#fef9c3",
    "#f3e8ff",
    "#ffedd5",
    "#ccfbf1",
    "#e0e7ff",
]

_HH_MM = re.compile(r"^\d{2}:\d{2}$")
_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)?$", re.IGNORECASE)


def utc_now() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_time_24(value: Optional[str]) -> str:
    """Normalize a clock string to 24-hour ``HH:MM``.

    ``"9:05 PM"`` becomes ``"21:05"``, ``"12:30 AM"`` becomes ``"00:30"``
    and ``"7:15"`` becomes ``"07:15"``. Empty input gives an empty string.
    Anything that does not look like a clock time is returned untouched.
    """
    if not value:
        return ""
    value = value.strip()
    if _HH_MM.match(value):
        return value

    match = _CLOCK.match(value)
    if not match:
        return value

    hours = int(match.group(1))
    minutes = match.group(2)
    period = (match.group(3) or "").upper()
    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0
    return f"{hours:02d}:{minutes}"


def normalize_optional_time(value: Optional[str]) -> Optional[str]:
    """Schema hook: keep ``None`` as ``None`` and blank strings as ``None``."""
    if value is None:
        return None
    formatted = format_time_24(value)
    return formatted or None


def parse_clock(value: Optional[str]) -> Optional[time]:
    formatted = format_time_24(value)
    if not _HH_MM.match(formatted):
        return None
    hours, minutes = (int(part) for part in formatted.split(":"))
    if hours > 23 or minutes > 59:
        return None
    return time(hours, minutes)


def combine_date_time(day: date, clock: Optional[str]) -> datetime:
    """Date plus an optional ``HH:MM`` clock; missing times sort at midnight."""
    parsed = parse_clock(clock)
    return datetime.combine(day, parsed or time(0, 0))


def day_index(trip_start: date, event_day: date) -> int:
    """Whole days between the trip start and the event day."""
    return (event_day - trip_start).days


def day_number(trip_start: date, event_day: date) -> int:
    return day_index(trip_start, event_day) + 1


def day_color_index(trip_start: date, event_day: date) -> int:
    return day_index(trip_start, event_day) % DAY_PALETTE_SIZE
