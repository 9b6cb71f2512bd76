"""Pydantic models describing foods, recipes, and their passive metadata."""

from __future__ import annotations

from datetime import timedelta
from fractions import Fraction
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, field_validator

from mealtime.core.errors import MealtimeValueError
from mealtime.core.timeofday import minutes_to_duration


def as_fraction(value: Any) -> Fraction:
    """Coerce ints, decimals, ``"n/d"`` strings, and numerator/denominator mappings to a Fraction."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise MealtimeValueError(f"Cannot interpret {value!r} as a fraction")
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        # Decimal literal as written (7.5 -> 15/2), not the binary expansion.
        value = repr(value)
    if isinstance(value, dict):
        try:
            numerator = int(value["numerator"])
            denominator = int(value["denominator"])
        except (KeyError, TypeError, ValueError) as exc:
            raise MealtimeValueError(
                f"Fraction mappings need integer 'numerator' and 'denominator': {value!r}"
            ) from exc
        if denominator == 0:
            raise MealtimeValueError("Fraction denominator must be non-zero")
        return Fraction(numerator, denominator)
    if isinstance(value, str):
        try:
            return Fraction(value.strip())
        except (ValueError, ZeroDivisionError) as exc:
            raise MealtimeValueError(f"Cannot interpret {value!r} as a fraction") from exc
    raise MealtimeValueError(f"Cannot interpret {value!r} as a fraction")


# Exact rational value, written back out as "n/d" (or "n" for integers).
Rational = Annotated[Fraction, BeforeValidator(as_fraction), PlainSerializer(str, return_type=str)]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class IString(_Record):
    """Name stored per language code, plus a short code for reference.

    Attributes
    ----------
    short_code:
        Short (typically English, hyphenated) identifier, e.g. ``"hello-world"``.
    names:
        Mapping of language code to display value. Language codes are arbitrary
        strings compared literally.
    default:
        Default language code; the empty string when unset.
    """

    short_code: str
    names: dict[str, str] = Field(default_factory=dict)
    default: str = ""

    @field_validator("short_code")
    @classmethod
    def _short_code_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("IString.short_code must be non-empty")
        return value

    def get_value(self, lang: str) -> str | None:
        return self.names.get(lang)

    def set_value_for(self, lang: str, value: str) -> IString:
        """Return a copy with ``lang`` mapped to ``value`` (overwriting any existing entry)."""
        return self.model_copy(update={"names": {**self.names, lang: value}})

    def with_default(self, lang: str) -> IString:
        return self.model_copy(update={"default": lang})

    def display(self, lang: str | None = None) -> str:
        """Best available name: requested language, then default language, then short code."""
        for candidate in (lang, self.default):
            if candidate is not None and candidate in self.names:
                return self.names[candidate]
        return self.short_code


class Unit(_Record):
    """Measurement unit placeholder; only carries a label."""

    name: str = "serving"


class Amount(_Record):
    """A rational quantity paired with a unit."""

    unit: Unit = Field(default_factory=Unit)
    amount: Rational = Fraction(1)

    @field_validator("unit", mode="before")
    @classmethod
    def _unit_from_label(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"name": value}
        return value


class Nutrition(_Record):
    """Opaque nutrition payload carried alongside foods."""

    model_config = ConfigDict(frozen=True, extra="allow")


class Step(_Record):
    """A single preparation step and the minutes it takes."""

    text: IString
    time: Rational = Fraction(0)

    @field_validator("time")
    @classmethod
    def _time_non_negative(cls, value: Fraction) -> Fraction:
        if value < 0:
            raise ValueError("Step.time must be non-negative")
        return value


class RawFood(_Record):
    """Single-ingredient food with no preparation; the atomic building block of recipes."""

    kind: Literal["raw"] = "raw"
    name: IString
    serving_size: Amount = Field(default_factory=Amount)
    nutrition: Nutrition = Field(default_factory=Nutrition)

    def prep_time(self) -> Fraction:
        return Fraction(0)

    def duration(self) -> timedelta:
        return minutes_to_duration(self.prep_time())


class Ingredient(_Record):
    """A component food and how much of it a recipe uses."""

    food: Food
    amount: Amount = Field(default_factory=Amount)


class Recipe(_Record):
    """Composite food: component foods, ordered steps, and a total preparation time.

    ``servings`` is rational because some recipes make a fractional number of
    servings. ``time`` is the preparation time in minutes.
    """

    kind: Literal["recipe"] = "recipe"
    name: IString
    serving_size: Amount = Field(default_factory=Amount)
    servings: Rational = Fraction(1)
    foods: list[Ingredient] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    time: Rational = Fraction(0)
    nutrition: Nutrition = Field(default_factory=Nutrition)

    @field_validator("time", "servings")
    @classmethod
    def _non_negative(cls, value: Fraction) -> Fraction:
        if value < 0:
            raise ValueError("Recipe time and servings must be non-negative")
        return value

    def prep_time(self) -> Fraction:
        return self.time

    def duration(self) -> timedelta:
        """Preparation time in whole seconds; fractional seconds are dropped."""
        return minutes_to_duration(self.time)


Food = Annotated[Union[RawFood, Recipe], Field(discriminator="kind")]

Ingredient.model_rebuild()
Recipe.model_rebuild()


__all__ = [
    "Amount",
    "Food",
    "IString",
    "Ingredient",
    "Nutrition",
    "Rational",
    "RawFood",
    "Recipe",
    "Step",
    "Unit",
    "as_fraction",
]
