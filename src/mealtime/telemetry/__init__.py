"""Telemetry helpers for recording prepend attempts."""

from .attempt_log import append_attempt, outcome_kind, outcome_record, read_attempts

__all__ = ["append_attempt", "outcome_kind", "outcome_record", "read_attempts"]
