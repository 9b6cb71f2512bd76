"""Food catalog model and YAML loader."""

from .loaders import load_food_catalog
from .models import FoodCatalog

__all__ = ["FoodCatalog", "load_food_catalog"]
