"""Time-of-day arithmetic for a single, timezone-agnostic day.

Points in the day are plain :class:`datetime.time` values without ``tzinfo``;
spans are :class:`datetime.timedelta` values. Arithmetic keeps microseconds.
"""

from __future__ import annotations

import math
from datetime import time, timedelta
from fractions import Fraction

from .errors import MealtimeValueError, TimelineOverflowError

SECONDS_PER_DAY = 24 * 60 * 60


def seconds_since_midnight(value: time) -> int:
    """Return the whole seconds elapsed since 00:00 (microseconds are ignored)."""
    return since_midnight(value) // timedelta(seconds=1)


def since_midnight(value: time) -> timedelta:
    """Exact offset of ``value`` from 00:00, microseconds included."""
    if value.tzinfo is not None:
        raise MealtimeValueError(f"time-of-day {value.isoformat()} must not carry a timezone")
    return timedelta(
        hours=value.hour,
        minutes=value.minute,
        seconds=value.second,
        microseconds=value.microsecond,
    )


def shift(start: time, duration: timedelta) -> tuple[time, int]:
    """Return ``start + duration`` wrapped into the day, and the whole days carried.

    A carry of ``1`` means the result lies on the following day.
    """
    days, offset = divmod(since_midnight(start) + duration, timedelta(days=1))
    hours, remainder = divmod(offset, timedelta(hours=1))
    minutes, remainder = divmod(remainder, timedelta(minutes=1))
    return time(hours, minutes, remainder.seconds, remainder.microseconds), days


def add_duration(start: time, duration: timedelta) -> time:
    """Return ``start + duration`` as a time-of-day.

    Raises
    ------
    TimelineOverflowError
        If the result would fall past 24:00 (or before 00:00 for negative spans).
    """
    result, days = shift(start, duration)
    if days != 0:
        raise TimelineOverflowError(f"{start.isoformat()} + {duration} falls outside the day")
    return result


def minutes_to_duration(minutes: Fraction | int) -> timedelta:
    """Convert an exact number of minutes into whole seconds, truncating leftovers."""
    if minutes < 0:
        raise MealtimeValueError(f"preparation time must be non-negative, got {minutes}")
    return timedelta(seconds=math.floor(Fraction(minutes) * 60))


def parse_time_of_day(text: str) -> time:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into a naive time-of-day."""
    try:
        parsed = time.fromisoformat(text.strip())
    except ValueError as exc:
        raise MealtimeValueError(f"Invalid time-of-day {text!r}; expected HH:MM[:SS]") from exc
    if parsed.tzinfo is not None:
        raise MealtimeValueError(f"time-of-day {text!r} must not carry a timezone")
    return parsed.replace(microsecond=0)


__all__ = [
    "SECONDS_PER_DAY",
    "add_duration",
    "minutes_to_duration",
    "parse_time_of_day",
    "seconds_since_midnight",
    "shift",
    "since_midnight",
]
