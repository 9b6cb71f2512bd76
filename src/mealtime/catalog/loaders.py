"""Food catalog loading utilities (YAML)."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from mealtime.core.errors import MealtimeValueError

from .models import FoodCatalog

__all__ = ["load_food_catalog"]


def load_food_catalog(yaml_path: str | Path) -> FoodCatalog:
    """Load a :class:`FoodCatalog` from a YAML file.

    Parameters
    ----------
    yaml_path:
        Path to a YAML document with a ``name`` and a ``foods`` list.

    Returns
    -------
    FoodCatalog
        Fully validated model; duplicate short codes are rejected.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    MealtimeValueError
        If the document is not a mapping or fails validation.
    """
    path = Path(yaml_path).resolve()
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        meta = yaml.safe_load(handle)
    if not isinstance(meta, dict):
        raise MealtimeValueError(f"Food catalog {path} must be a YAML mapping")
    meta.setdefault("name", path.stem)
    try:
        return FoodCatalog.model_validate(meta)
    except ValidationError as exc:
        raise MealtimeValueError(f"Invalid food catalog {path}:\n{exc}") from exc
