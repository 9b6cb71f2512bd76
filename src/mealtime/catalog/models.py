"""Pydantic model describing a food catalog file."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from mealtime.food.models import Food


class FoodCatalog(BaseModel):
    """Named collection of foods, addressed by their short codes.

    Attributes
    ----------
    name:
        Human-readable catalog name.
    foods:
        Raw foods and recipes. Short codes must be unique within the catalog.
    """

    name: str
    foods: list[Food] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_short_codes(self) -> "FoodCatalog":
        seen: set[str] = set()
        duplicates: list[str] = []
        for food in self.foods:
            code = food.name.short_code
            if code in seen:
                duplicates.append(code)
            seen.add(code)
        if duplicates:
            raise ValueError(f"Duplicate food short codes in catalog: {sorted(set(duplicates))}")
        return self

    def short_codes(self) -> list[str]:
        return [food.name.short_code for food in self.foods]

    def get(self, short_code: str) -> Food:
        for food in self.foods:
            if food.name.short_code == short_code:
                return food
        raise KeyError(f"Food {short_code!r} not found in catalog {self.name!r}")


__all__ = ["FoodCatalog"]
