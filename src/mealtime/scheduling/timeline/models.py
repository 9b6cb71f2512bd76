"""Day timeline primitives: time blocks and the prepend/split algorithm."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import time, timedelta
from typing import Protocol, Union, runtime_checkable

from mealtime.core.errors import InsufficientSpanError, MealtimeValueError
from mealtime.core.timeofday import add_duration, shift, since_midnight


@runtime_checkable
class FoodActivity(Protocol):
    """Anything that can report how long it takes to prepare."""

    def duration(self) -> timedelta: ...


def copy_activity(activity: FoodActivity) -> FoodActivity:
    """Return an independent copy of ``activity``."""
    model_copy = getattr(activity, "model_copy", None)
    if callable(model_copy):
        return model_copy(deep=True)
    return copy.deepcopy(activity)


def validate_block_bounds(start: time, end: time) -> None:
    """Reject malformed intervals where raw input first enters the system."""
    if since_midnight(start) > since_midnight(end):
        raise MealtimeValueError(
            f"Block start {start.isoformat()} must not be later than end {end.isoformat()}"
        )


@dataclass(slots=True)
class TimeBlock:
    """Half-open interval ``[start, end)`` of a day, optionally holding one food activity.

    The constructor does not check ``start <= end``; use
    :func:`validate_block_bounds` on raw input. The occupant is copied on the way
    in so the block never aliases a caller's activity.
    """

    start: time
    end: time
    occupant: FoodActivity | None = None

    def __post_init__(self) -> None:
        if self.occupant is not None:
            self.occupant = copy_activity(self.occupant)

    def has_occupant(self) -> bool:
        return self.occupant is not None

    def set_occupant(self, activity: FoodActivity) -> None:
        """Overwrite the occupant unconditionally; no splitting takes place."""
        self.occupant = copy_activity(activity)

    def span(self) -> timedelta:
        return since_midnight(self.end) - since_midnight(self.start)

    @property
    def is_empty(self) -> bool:
        """Zero-length blocks hold no usable time."""
        return self.start == self.end

    def split_at_start(self, activity: FoodActivity) -> PrependOutcome:
        return attempt_prepend(self, activity)


@dataclass(frozen=True, slots=True)
class Replace:
    """The new activity consumed the whole block; a single block takes its place."""

    block: TimeBlock

    @property
    def fits(self) -> bool:
        return True

    def blocks(self) -> tuple[TimeBlock, ...]:
        return (self.block,)


@dataclass(frozen=True, slots=True)
class Split:
    """The block was divided: the new activity first, then whatever was there before."""

    first: TimeBlock
    second: TimeBlock

    @property
    def fits(self) -> bool:
        return True

    def blocks(self) -> tuple[TimeBlock, ...]:
        return (self.first, self.second)


@dataclass(frozen=True, slots=True)
class Failure:
    """The insertion does not fit; ``required_end`` is the end the block would need.

    ``next_day`` is set when that end lies past midnight, in which case
    ``required_end`` is the time-of-day on the following day.
    """

    required_end: time
    next_day: bool = False

    @property
    def fits(self) -> bool:
        return False

    def blocks(self) -> tuple[TimeBlock, ...]:
        return ()


PrependOutcome = Union[Replace, Split, Failure]


def attempt_prepend(block: TimeBlock, activity: FoodActivity) -> PrependOutcome:
    """Try to place ``activity`` at the start of ``block``.

    Any activity already in the block is pushed back to start right after the
    new one. Neither ``block`` nor ``activity`` is modified.

    Returns
    -------
    PrependOutcome
        ``Failure(required_end)`` when the new activity plus the existing occupant
        would run past ``block.end`` (including past midnight). ``Replace`` when the
        new activity alone ends exactly at ``block.end`` while the block was
        occupied; the previous occupant is not carried into the result. ``Split``
        otherwise, where the second block keeps the previous occupant (or stays
        free). An unoccupied block that is filled exactly still yields ``Split``
        with a zero-length second block.
    """
    existing = block.occupant
    needed = activity.duration()
    if existing is not None:
        needed += existing.duration()
    required_end, days = shift(block.start, needed)

    if days > 0:
        return Failure(required_end=required_end, next_day=True)
    if required_end > block.end:
        return Failure(required_end=required_end)

    # Where the new activity ends and the displaced occupant begins; differs
    # from required_end whenever the block was occupied.
    split_point = add_duration(block.start, activity.duration())

    if split_point == block.end and existing is not None:
        return Replace(block=TimeBlock(block.start, block.end, activity))

    return Split(
        first=TimeBlock(block.start, split_point, activity),
        second=TimeBlock(split_point, block.end, existing),
    )


def replace_block(
    blocks: list[TimeBlock], index: int, outcome: PrependOutcome
) -> list[TimeBlock]:
    """Return a new list with ``blocks[index]`` swapped for the outcome's blocks.

    Raises
    ------
    InsufficientSpanError
        If ``outcome`` is a :class:`Failure`.
    IndexError
        If ``index`` does not address an existing block.
    """
    if isinstance(outcome, Failure):
        raise InsufficientSpanError(outcome.required_end)
    if not -len(blocks) <= index < len(blocks):
        raise IndexError(f"block index {index} out of range for {len(blocks)} blocks")
    position = index % len(blocks)
    return [*blocks[:position], *outcome.blocks(), *blocks[position + 1 :]]


def drop_empty(blocks: list[TimeBlock]) -> list[TimeBlock]:
    """Filter out zero-length blocks, which stand for "no block"."""
    return [block for block in blocks if not block.is_empty]


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
