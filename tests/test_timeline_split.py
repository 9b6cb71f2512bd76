from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time, timedelta

import pytest

from mealtime.food import IString, RawFood
from mealtime.scheduling.timeline import (
    Failure,
    Replace,
    Split,
    TimeBlock,
    attempt_prepend,
)


@dataclass
class Chore:
    """Minimal non-pydantic activity used to check the protocol path."""

    minutes: int
    notes: list[str] = field(default_factory=list)

    def duration(self) -> timedelta:
        return timedelta(minutes=self.minutes)


def test_free_block_split_leaves_remainder_free(make_recipe):
    # [09:00, 10:00) free, 30 min activity
    toast = make_recipe("toast", 30)
    block = TimeBlock(time(9), time(10))

    outcome = attempt_prepend(block, toast)

    assert outcome == Split(
        first=TimeBlock(time(9), time(9, 30), toast),
        second=TimeBlock(time(9, 30), time(10), None),
    )
    assert outcome.fits


def test_exactly_filled_free_block_yields_zero_length_tail(make_recipe):
    toast = make_recipe("toast", 30)
    outcome = attempt_prepend(TimeBlock(time(9), time(9, 30)), toast)

    assert isinstance(outcome, Split)
    assert outcome.first == TimeBlock(time(9), time(9, 30), toast)
    assert outcome.second.start == outcome.second.end == time(9, 30)
    assert outcome.second.is_empty
    assert not outcome.second.has_occupant()


def test_occupied_block_too_short_reports_required_end(make_recipe):
    existing = make_recipe("eggs", 20)
    block = TimeBlock(time(9), time(10), existing)

    outcome = attempt_prepend(block, make_recipe("bread", 50))

    assert outcome == Failure(required_end=time(10, 10))
    assert not outcome.fits
    assert outcome.blocks() == ()


def test_occupied_block_split_pushes_existing_later(make_recipe):
    existing = make_recipe("eggs", 20)
    new = make_recipe("coffee", 30)
    block = TimeBlock(time(9), time(9, 50), existing)

    outcome = attempt_prepend(block, new)

    assert outcome == Split(
        first=TimeBlock(time(9), time(9, 30), new),
        second=TimeBlock(time(9, 30), time(9, 50), existing),
    )


def test_occupied_block_exactly_consumed_drops_previous_occupant(make_recipe):
    # Only reachable when the previous occupant takes no time, e.g. a raw food.
    existing = RawFood(name=IString(short_code="banana"))
    new = make_recipe("coffee", 30)
    block = TimeBlock(time(9), time(9, 30), existing)

    outcome = attempt_prepend(block, new)

    assert outcome == Replace(block=TimeBlock(time(9), time(9, 30), new))
    assert all(b.occupant != existing for b in outcome.blocks())


def test_free_block_never_replaced_even_when_exact(make_recipe):
    outcome = attempt_prepend(TimeBlock(time(12), time(12, 45)), make_recipe("salad", 45))
    assert isinstance(outcome, Split)


@pytest.mark.parametrize(
    ("start", "end", "existing", "new"),
    [
        (time(7), time(7, 10), None, 11),
        (time(7), time(8), 30, 31),
        (time(7), time(7), None, 1),
        (time(18, 0, 30), time(18, 1), 0, 1),
    ],
)
def test_no_fit_reports_exact_sum(make_recipe, start, end, existing, new):
    occupant = make_recipe("old", existing) if existing is not None else None
    block = TimeBlock(start, end, occupant)
    snapshot = repr(block)

    outcome = attempt_prepend(block, make_recipe("new", new))

    expected = (
        timedelta(hours=start.hour, minutes=start.minute, seconds=start.second)
        + timedelta(minutes=(existing or 0) + new)
    )
    assert isinstance(outcome, Failure)
    assert outcome.required_end == time(
        expected.seconds // 3600, expected.seconds % 3600 // 60, expected.seconds % 60
    )
    assert repr(block) == snapshot


@pytest.mark.parametrize(
    ("existing", "new"),
    [(None, 0), (None, 15), (None, 60), (10, 15), (0, 59), (45, 15)],
)
def test_split_endpoints(make_recipe, existing, new):
    occupant = make_recipe("old", existing) if existing is not None else None
    activity = make_recipe("new", new)
    block = TimeBlock(time(13), time(14), occupant)

    outcome = attempt_prepend(block, activity)

    assert isinstance(outcome, Split)
    split_point = time(13 + new // 60, new % 60)
    assert outcome.first.start == block.start
    assert outcome.first.end == outcome.second.start == split_point
    assert outcome.second.end == block.end
    assert outcome.first.occupant == activity
    assert outcome.second.occupant == occupant


def test_zero_duration_activity_on_occupied_block(make_recipe):
    existing = make_recipe("eggs", 20)
    outcome = attempt_prepend(TimeBlock(time(9), time(10), existing), make_recipe("tea", 0))

    assert isinstance(outcome, Split)
    assert outcome.first.is_empty
    assert outcome.second == TimeBlock(time(9), time(10), existing)


def test_inputs_untouched_and_results_are_copies(make_recipe):
    existing = make_recipe("eggs", 20)
    new = make_recipe("coffee", 10)
    block = TimeBlock(time(9), time(10), existing)

    outcome = attempt_prepend(block, new)

    assert isinstance(outcome, Split)
    assert block == TimeBlock(time(9), time(10), existing)
    assert outcome.first.occupant == new
    assert outcome.first.occupant is not new
    assert outcome.second.occupant is not block.occupant


def test_plain_activity_copies_are_independent():
    chore = Chore(minutes=10)
    outcome = attempt_prepend(TimeBlock(time(8), time(9)), chore)

    assert isinstance(outcome, Split)
    copied = outcome.first.occupant
    assert isinstance(copied, Chore)
    copied.notes.append("changed")
    assert chore.notes == []


def test_split_at_start_matches_attempt_prepend(make_recipe):
    block = TimeBlock(time(9), time(10), make_recipe("eggs", 20))
    new = make_recipe("coffee", 15)
    assert block.split_at_start(new) == attempt_prepend(block, new)


def test_required_end_past_midnight_is_a_failure(make_recipe):
    block = TimeBlock(time(23), time(23, 59))

    outcome = attempt_prepend(block, make_recipe("roast", 90))

    assert outcome == Failure(required_end=time(0, 30), next_day=True)
    assert not outcome.fits


def test_existing_occupant_pushes_required_end_past_midnight(make_recipe):
    block = TimeBlock(time(23, 30), time(23, 59, 59), make_recipe("stew", 20))
    outcome = attempt_prepend(block, make_recipe("bread", 15))
    assert outcome == Failure(required_end=time(0, 5), next_day=True)


def test_block_ending_exactly_at_last_second_still_fits(make_recipe):
    outcome = attempt_prepend(TimeBlock(time(23, 30), time(23, 59, 59)), make_recipe("tea", 29))
    assert isinstance(outcome, Split)
    assert outcome.first.end == time(23, 59)


def test_sub_second_start_keeps_exact_endpoints(make_recipe):
    block = TimeBlock(time(9, 0, 0, 500000), time(9, 30))

    outcome = attempt_prepend(block, make_recipe("toast", 30))

    assert outcome == Failure(required_end=time(9, 30, 0, 500000))


def test_sub_second_split_spans_the_full_activity(make_recipe):
    toast = make_recipe("toast", 30)
    block = TimeBlock(time(9, 0, 0, 250000), time(10))

    outcome = attempt_prepend(block, toast)

    assert isinstance(outcome, Split)
    assert outcome.first.end == outcome.second.start == time(9, 30, 0, 250000)
    assert outcome.first.span() == toast.duration()
    assert outcome.second.end == time(10)


def test_outcomes_match_exhaustively(make_recipe):
    block = TimeBlock(time(9), time(9, 30), make_recipe("eggs", 10))
    seen = []
    for minutes in (10, 30, 40):
        match attempt_prepend(block, make_recipe("new", minutes)):
            case Split(first=first, second=second):
                seen.append(("split", first.end, second.end))
            case Replace(block=replaced):
                seen.append(("replace", replaced.start, replaced.end))
            case Failure(required_end=required_end):
                seen.append(("failure", required_end))
    assert seen == [
        ("split", time(9, 10), time(9, 30)),
        ("failure", time(9, 40)),
        ("failure", time(9, 50)),
    ]
