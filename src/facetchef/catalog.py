from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

import yaml

from .domain import Ingredient, Recipe, normalize_name
from .errors import CatalogError, MalformedRecipeError, MissingFileError
from .logging_utils import get_logger

log = get_logger(__name__)

REQUIRED_FIELDS = (
    "id",
    "name",
    "servings",
    "time",
    "description",
    "appliance",
    "ustensils",
    "ingredients",
)


@dataclass(frozen=True)
class Catalog(Sequence[Recipe]):
    recipes: tuple[Recipe, ...]

    def __len__(self) -> int:
        return len(self.recipes)

    def __getitem__(self, index):  # type: ignore[override]
        return self.recipes[index]

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.recipes)

    def get(self, recipe_id: object) -> Recipe | None:
        for recipe in self.recipes:
            if recipe.recipe_id == recipe_id or str(recipe.recipe_id) == str(recipe_id):
                return recipe
        return None


def load_catalog(records: Iterable[Any]) -> Catalog:
    recipes: list[Recipe] = []
    seen: set[str] = set()
    for index, raw in enumerate(records):
        recipe = _build_recipe(index, raw)
        key = str(recipe.recipe_id)
        if key in seen:
            raise MalformedRecipeError(index, "id", recipe.recipe_id, reason="duplicate")
        seen.add(key)
        recipes.append(recipe)
    log.info("loaded %d recipes", len(recipes))
    return Catalog(tuple(recipes))


def load_catalog_file(path: str | Path) -> Catalog:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Failed to read catalog: {path}") from exc

    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CatalogError(f"Invalid YAML in catalog: {path}") from exc
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Invalid JSON in catalog: {path}") from exc

    if isinstance(data, Mapping):
        data = data.get("recipes")
    if not isinstance(data, list):
        raise CatalogError(f"{path}: catalog must be a list of recipes")
    log.debug("parsed catalog file %s", path)
    return load_catalog(data)


def _build_recipe(index: int, raw: Any) -> Recipe:
    if not isinstance(raw, Mapping):
        raise MalformedRecipeError(index, "<record>", reason="invalid")
    record_id = raw.get("id")
    for field in REQUIRED_FIELDS:
        if raw.get(field) is None:
            raise MalformedRecipeError(index, field, record_id)

    time = _positive_int(index, raw, "time")
    servings = _int(index, raw, "servings")

    appliance = normalize_name(raw["appliance"])
    if not appliance:
        raise MalformedRecipeError(index, "appliance", record_id, reason="empty")

    utensils_raw = raw["ustensils"]
    if isinstance(utensils_raw, (str, bytes)) or not isinstance(utensils_raw, Iterable):
        raise MalformedRecipeError(index, "ustensils", record_id, reason="invalid")
    utensils: list[str] = []
    for pos, item in enumerate(utensils_raw):
        name = normalize_name(item) if item is not None else ""
        if not name:
            raise MalformedRecipeError(index, f"ustensils[{pos}]", record_id, reason="empty")
        utensils.append(name)

    ingredients_raw = raw["ingredients"]
    if isinstance(ingredients_raw, (str, bytes)) or not isinstance(ingredients_raw, Iterable):
        raise MalformedRecipeError(index, "ingredients", record_id, reason="invalid")
    ingredients = tuple(
        _build_ingredient(index, record_id, pos, item) for pos, item in enumerate(ingredients_raw)
    )

    return Recipe(
        recipe_id=record_id,
        title=str(raw["name"]),
        description=str(raw["description"]),
        time=time,
        servings=servings,
        appliance=appliance,
        utensils=tuple(utensils),
        ingredients=ingredients,
    )


def _build_ingredient(index: int, record_id: object, pos: int, raw: Any) -> Ingredient:
    field = f"ingredients[{pos}]"
    if not isinstance(raw, Mapping):
        raise MalformedRecipeError(index, field, record_id, reason="invalid")
    if raw.get("ingredient") is None:
        raise MalformedRecipeError(index, f"{field}.ingredient", record_id)
    name = normalize_name(raw["ingredient"])
    if not name:
        raise MalformedRecipeError(index, f"{field}.ingredient", record_id, reason="empty")

    quantity = raw.get("quantity")
    if quantity is not None:
        if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
            raise MalformedRecipeError(index, f"{field}.quantity", record_id, reason="non-numeric")
        if quantity < 0:
            raise MalformedRecipeError(index, f"{field}.quantity", record_id, reason="negative")
        if quantity == 0:
            quantity = None
    unit = raw.get("unit")
    unit = str(unit).strip() if unit not in (None, "") else None
    return Ingredient(name=name, quantity=quantity, unit=unit or None)


def _int(index: int, raw: Mapping[str, Any], field: str) -> int:
    value = raw[field]
    if isinstance(value, bool):
        raise MalformedRecipeError(index, field, raw.get("id"), reason="non-numeric")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise MalformedRecipeError(index, field, raw.get("id"), reason="non-numeric") from exc


def _positive_int(index: int, raw: Mapping[str, Any], field: str) -> int:
    number = _int(index, raw, field)
    if number <= 0:
        raise MalformedRecipeError(index, field, raw.get("id"), reason="non-positive")
    return number
