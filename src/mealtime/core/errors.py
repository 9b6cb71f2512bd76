"""Common mealtime-specific exceptions."""

from __future__ import annotations

from datetime import time


class MealtimeValueError(ValueError):
    """Raised when mealtime detects invalid user-provided data."""


class TimelineOverflowError(MealtimeValueError):
    """Raised when time-of-day arithmetic runs past the end of the day."""


class InsufficientSpanError(MealtimeValueError):
    """Raised when a rejected insertion is applied to a block sequence."""

    def __init__(self, required_end: time) -> None:
        super().__init__(
            f"Block is too short for the insertion; it would need to end at {required_end.isoformat()}"
        )
        self.required_end = required_end


__all__ = ["MealtimeValueError", "TimelineOverflowError", "InsufficientSpanError"]
