"""JSONL log of prepend attempts."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from mealtime.scheduling.timeline import (
    Failure,
    FoodActivity,
    PrependOutcome,
    Replace,
    Split,
    TimeBlock,
)

SCHEMA_VERSION = "1.0"


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _activity_code(activity: FoodActivity | None) -> str | None:
    if activity is None:
        return None
    name = getattr(activity, "name", None)
    short_code = getattr(name, "short_code", None)
    return short_code if short_code is not None else type(activity).__name__


def _block_payload(block: TimeBlock) -> dict[str, Any]:
    return {
        "start": block.start.isoformat(),
        "end": block.end.isoformat(),
        "occupant": _activity_code(block.occupant),
    }


def outcome_kind(outcome: PrependOutcome) -> str:
    match outcome:
        case Replace():
            return "replace"
        case Split():
            return "split"
        case Failure():
            return "failure"
    raise TypeError(f"Unknown prepend outcome: {outcome!r}")


def outcome_record(
    block: TimeBlock, activity: FoodActivity, outcome: PrependOutcome
) -> dict[str, Any]:
    """Build a JSON-serialisable record of one prepend attempt."""
    record: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "timestamp": _iso_now(),
        "kind": outcome_kind(outcome),
        "block": _block_payload(block),
        "activity": _activity_code(activity),
        "activity_seconds": int(activity.duration().total_seconds()),
    }
    if isinstance(outcome, Failure):
        record["required_end"] = outcome.required_end.isoformat()
        record["next_day"] = outcome.next_day
    else:
        record["result"] = [_block_payload(item) for item in outcome.blocks()]
    return record


def append_attempt(
    path: str | Path, block: TimeBlock, activity: FoodActivity, outcome: PrependOutcome
) -> dict[str, Any]:
    """Append the attempt as one compact JSON line and return the written record."""
    record = outcome_record(block, activity, outcome)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        json.dump(record, handle, ensure_ascii=False, separators=(",", ":"))
        handle.write("\n")
    return record


def read_attempts(path: str | Path) -> list[dict[str, Any]]:
    """Load every record from an attempt log, skipping blank lines."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return [json.loads(line) for line in handle if line.strip()]


__all__ = [
    "SCHEMA_VERSION",
    "append_attempt",
    "outcome_kind",
    "outcome_record",
    "read_attempts",
]
