"""Place prepared-food activities onto a single day's timeline."""

from mealtime.scheduling import (
    Failure,
    Replace,
    Split,
    TimeBlock,
    attempt_prepend,
)

__version__ = "0.1.0"

__all__ = [
    "TimeBlock",
    "Replace",
    "Split",
    "Failure",
    "attempt_prepend",
    "__version__",
]
