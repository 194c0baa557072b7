"""Duration expression parsing.

Token lifetimes are configured with human-readable expressions such as
"2 years" or "90 minutes". This module converts those expressions into
``timedelta`` instances.

Accepted inputs:
    - ``timedelta``: returned unchanged
    - ``int`` / ``float``: number of seconds
    - numeric strings: number of seconds ("3600")
    - unit strings: "<number><unit>" with optional whitespace
      ("1 year", "2years", "30d", "1.5h")

Usage:
    from src.core.duration import parse_duration

    ttl = parse_duration("2 years")
    max_age = int(ttl.total_seconds())
"""

import re
from datetime import timedelta

type DurationLike = str | int | float | timedelta

# Longest accepted lifetime (1000 years). Expiry instants computed from now
# must stay inside the datetime range.
MAX_DURATION = timedelta(days=365_250)

_DURATION_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")

# Seconds per unit. Years follow the 365.25-day convention.
_UNIT_SECONDS: dict[str, float] = {
    "ms": 0.001,
    "msec": 0.001,
    "millisecond": 0.001,
    "milliseconds": 0.001,
    "": 1,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
    "d": 86400,
    "day": 86400,
    "days": 86400,
    "w": 604800,
    "week": 604800,
    "weeks": 604800,
    "mo": 2592000,
    "month": 2592000,
    "months": 2592000,
    "y": 31557600,
    "yr": 31557600,
    "yrs": 31557600,
    "year": 31557600,
    "years": 31557600,
}


def parse_duration(value: DurationLike) -> timedelta:
    """Convert a duration expression into a timedelta.

    Args:
        value: Duration expression (see module docstring).

    Returns:
        Positive timedelta.

    Raises:
        ValueError: If the expression cannot be parsed, is not positive or
            exceeds MAX_DURATION.

    Example:
        >>> parse_duration("1 minute")
        datetime.timedelta(seconds=60)
        >>> parse_duration(90)
        datetime.timedelta(seconds=90)
    """
    if isinstance(value, timedelta):
        duration = value
    elif isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    elif isinstance(value, int | float):
        duration = _seconds_to_timedelta(value, value)
    elif isinstance(value, str):
        match = _DURATION_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Invalid duration expression: {value!r}")
        amount, unit = match.groups()
        seconds_per_unit = _UNIT_SECONDS.get(unit.lower())
        if seconds_per_unit is None:
            raise ValueError(f"Unknown duration unit {unit!r} in {value!r}")
        duration = _seconds_to_timedelta(float(amount) * seconds_per_unit, value)
    else:
        raise ValueError(f"Invalid duration type: {type(value).__name__}")

    if duration <= timedelta(0):
        raise ValueError(f"Duration must be positive: {value!r}")
    if duration > MAX_DURATION:
        raise ValueError(f"Duration exceeds {MAX_DURATION.days} days: {value!r}")
    return duration


def _seconds_to_timedelta(seconds: float, value: DurationLike) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise ValueError(f"Duration out of range: {value!r}") from e
