"""Day timeline blocks and the prepend/split algorithm."""

from .models import (
    Failure,
    FoodActivity,
    PrependOutcome,
    Replace,
    Split,
    TimeBlock,
    attempt_prepend,
    copy_activity,
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
    "copy_activity",
    "drop_empty",
    "replace_block",
    "validate_block_bounds",
]
