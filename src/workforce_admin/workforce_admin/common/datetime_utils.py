from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_wall_time(value: str) -> time:
    """Parse 'HH:MM' or 'HH:MM:SS' into a time of day."""
    v = (value or "").strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def format_clock(value: datetime | time) -> str:
    """Second-precision wall-clock string stored on time entries."""
    return value.strftime("%H:%M:%S")


def format_short(value: datetime | time) -> str:
    return value.strftime("%H:%M")


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def now_local() -> datetime:
    """Current local time.

    Note: the only place the console reads the wall clock.
    """
    return datetime.now()


def coerce_date(value: date | str) -> date:
    """Accept a date or an ISO string as stored by the gateway."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value))
