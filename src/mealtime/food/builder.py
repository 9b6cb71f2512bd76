"""Incremental construction of :class:`~mealtime.food.models.Recipe` records."""

from __future__ import annotations

from fractions import Fraction
from typing import Any

from mealtime.core.errors import MealtimeValueError

from .models import Amount, Ingredient, IString, Nutrition, Recipe, Step, Unit, as_fraction


class RecipeBuilder:
    """Collect recipe fields one at a time and validate them on :meth:`build_recipe`.

    Setters return the builder so calls can be chained::

        recipe = (
            RecipeBuilder("porridge")
            .add_name("en", "Porridge")
            .set_serving_size(Unit(name="bowl"), 1)
            .set_servings(2)
            .set_time("15/2")
            .set_nutrition(Nutrition())
            .build_recipe()
        )
    """

    def __init__(self, short_code: str) -> None:
        self._name = IString(short_code=short_code)
        self._serving_size: Amount | None = None
        self._servings: Fraction | None = None
        self._foods: list[Ingredient] = []
        self._steps: list[Step] = []
        self._time: Fraction | None = None
        self._nutrition: Nutrition | None = None

    def add_name(self, lang: str, name: str) -> RecipeBuilder:
        self._name = self._name.set_value_for(lang, name)
        return self

    def set_default_language(self, lang: str) -> RecipeBuilder:
        self._name = self._name.with_default(lang)
        return self

    def set_serving_size(self, unit: Unit, amount: Any) -> RecipeBuilder:
        self._serving_size = Amount(unit=unit, amount=amount)
        return self

    def set_servings(self, servings: Any) -> RecipeBuilder:
        self._servings = as_fraction(servings)
        return self

    def add_food(self, food: Any, unit: Unit, amount: Any) -> RecipeBuilder:
        self._foods.append(Ingredient(food=food, amount=Amount(unit=unit, amount=amount)))
        return self

    def add_step(self, step: Step) -> RecipeBuilder:
        self._steps.append(step)
        return self

    def set_time(self, minutes: Any) -> RecipeBuilder:
        self._time = as_fraction(minutes)
        return self

    def set_nutrition(self, nutrition: Nutrition) -> RecipeBuilder:
        self._nutrition = nutrition
        return self

    def build_recipe(self) -> Recipe:
        """Return the recipe, or raise naming the first required field left unset."""
        if self._serving_size is None:
            raise MealtimeValueError("Serving size not set")
        if self._servings is None:
            raise MealtimeValueError("Servings not set")
        if self._time is None:
            raise MealtimeValueError("Time not set")
        if self._nutrition is None:
            raise MealtimeValueError("Nutrition not set")
        return Recipe(
            name=self._name,
            serving_size=self._serving_size,
            servings=self._servings,
            foods=list(self._foods),
            steps=list(self._steps),
            time=self._time,
            nutrition=self._nutrition,
        )


__all__ = ["RecipeBuilder"]
