from __future__ import annotations

from .domain import Recipe

MIN_QUERY_LENGTH = 3


def normalize_query(query: str | None) -> str:
    """Return the lowercased search term, or "" when it is too short to filter on."""
    text = (query or "").strip()
    if len(text) < MIN_QUERY_LENGTH:
        return ""
    return text.lower()


def has_query(query: str | None) -> bool:
    return bool(normalize_query(query))


def matches(recipe: Recipe, query: str | None) -> bool:
    term = normalize_query(query)
    if not term:
        return True
    if term in recipe.title.lower():
        return True
    if term in recipe.description.lower():
        return True
    if term in recipe.appliance:
        return True
    if any(term in name for name in recipe.ingredient_names):
        return True
    return any(term in utensil for utensil in recipe.utensils)


def search(recipes, query: str | None) -> list[Recipe]:
    if not has_query(query):
        return list(recipes)
    return [recipe for recipe in recipes if matches(recipe, query)]
