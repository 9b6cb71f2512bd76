"""Food records (names, amounts, raw foods, recipes) and the recipe builder."""

from .builder import RecipeBuilder
from .models import (
    Amount,
    Food,
    Ingredient,
    IString,
    Nutrition,
    RawFood,
    Recipe,
    Step,
    Unit,
    as_fraction,
)

__all__ = [
    "Amount",
    "Food",
    "IString",
    "Ingredient",
    "Nutrition",
    "RawFood",
    "Recipe",
    "RecipeBuilder",
    "Step",
    "Unit",
    "as_fraction",
]
