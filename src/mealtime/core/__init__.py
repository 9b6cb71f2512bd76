"""Core utilities shared across mealtime modules."""

from .errors import InsufficientSpanError, MealtimeValueError, TimelineOverflowError
from .timeofday import (
    SECONDS_PER_DAY,
    add_duration,
    minutes_to_duration,
    seconds_since_midnight,
    shift,
    since_midnight,
)

__all__ = [
    "MealtimeValueError",
    "TimelineOverflowError",
    "InsufficientSpanError",
    "SECONDS_PER_DAY",
    "add_duration",
    "minutes_to_duration",
    "seconds_since_midnight",
    "shift",
    "since_midnight",
]
