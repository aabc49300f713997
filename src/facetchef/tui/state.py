from __future__ import annotations

from ..domain import FacetType, Recipe, Tag
from ..search import MIN_QUERY_LENGTH

STATUS_IDLE = f"Type at least {MIN_QUERY_LENGTH} characters or pick a tag."
STATUS_EMPTY = "No recipes match."

FACET_TITLES = {
    FacetType.INGREDIENTS: "Ingredients",
    FacetType.APPLIANCES: "Appliances",
    FacetType.UTENSILS: "Utensils",
}


def recipe_line(recipe: Recipe) -> str:
    return f"{recipe.title}  ·  {recipe.time} min"


def tag_chip(tag: Tag) -> str:
    return f"{tag.value} ({tag.facet_type.value}) ✕"


def status_text(result) -> str:
    if not result.has_criteria:
        return STATUS_IDLE
    if result.show_empty_state:
        return STATUS_EMPTY
    count = len(result.recipes)
    return f"{count} recipe{'s' if count != 1 else ''}"
