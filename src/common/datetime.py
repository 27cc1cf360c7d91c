"""Datetime utilities."""

import math
from datetime import date, datetime, timezone

MILLISECONDS_PER_DAY = 1000 * 60 * 60 * 24


def parse_datetime(value) -> datetime:
    """Parse a timestamp into an aware UTC datetime.

    Accepts ISO-8601 strings (``Z`` suffix, explicit offset or date only),
    epoch milliseconds and ``datetime``/``date`` instances. Naive values are
    taken to be UTC.

    Raises:
        ValueError: If the value is missing or cannot be interpreted.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f"Not a timestamp: {value!r}")
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"Timestamp out of range: {value!r}") from exc
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    else:
        raise ValueError(f"Not a timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def days_difference(first: datetime, second: datetime) -> int:
    """Whole days from first to second, rounded half away from zero."""
    milliseconds = (second - first).total_seconds() * 1000
    return round_half_away_from_zero(milliseconds / MILLISECONDS_PER_DAY)
