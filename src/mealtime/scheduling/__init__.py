"""Scheduling utilities (day timeline blocks)."""

from .timeline import (
    Failure,
    FoodActivity,
    PrependOutcome,
    Replace,
    Split,
    TimeBlock,
    attempt_prepend,
    drop_empty,
    replace_block,
    validate_block_bounds,
)

__all__ = [
    "FoodActivity",
    "TimeBlock",
    "Replace",
    "Split",
    "Failure",
    "PrependOutcome",
    "attempt_prepend",
    "drop_empty",
    "replace_block",
    "validate_block_bounds",
]
