from __future__ import annotations

from fractions import Fraction

import pytest

from mealtime.food import IString, Recipe


def recipe(short_code: str, minutes: int | str | Fraction) -> Recipe:
    return Recipe(name=IString(short_code=short_code), time=minutes)


@pytest.fixture
def make_recipe():
    return recipe
