from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .domain import FacetType, Recipe, Tag
from .tags import EMPTY_TAGS, TagSet

FacetSnapshot = Mapping[FacetType, tuple[str, ...]]


def recipe_facet_values(recipe: Recipe, facet_type: FacetType | str) -> tuple[str, ...]:
    facet_type = FacetType.parse(facet_type)
    if facet_type == FacetType.INGREDIENTS:
        return recipe.ingredient_names
    if facet_type == FacetType.UTENSILS:
        return recipe.utensils
    return (recipe.appliance,)


def compute_facets(recipes: Iterable[Recipe]) -> FacetSnapshot:
    # dicts keep first-seen order and give O(1) membership
    seen: dict[FacetType, dict[str, None]] = {facet_type: {} for facet_type in FacetType}
    for recipe in recipes:
        for facet_type, values in seen.items():
            for value in recipe_facet_values(recipe, facet_type):
                values.setdefault(value, None)
    return MappingProxyType({facet_type: tuple(values) for facet_type, values in seen.items()})


def is_compatible(recipe: Recipe, tag: Tag) -> bool:
    if tag.facet_type == FacetType.APPLIANCES:
        return recipe.appliance == tag.value
    return tag.value in recipe_facet_values(recipe, tag.facet_type)


def facet_options(
    snapshot: FacetSnapshot,
    facet_type: FacetType | str,
    active: TagSet = EMPTY_TAGS,
    needle: str = "",
) -> list[str]:
    """Values still offerable for one facet control.

    Active tags of the same type are left out, and a non-empty ``needle``
    keeps only values containing it.
    """
    facet_type = FacetType.parse(facet_type)
    taken = {tag.value for tag in active.of_type(facet_type)}
    needle = needle.strip().lower()
    options: list[str] = []
    for value in snapshot.get(facet_type, ()):
        if value in taken:
            continue
        if needle and needle not in value:
            continue
        options.append(value)
    return options


def snapshot_to_dict(snapshot: FacetSnapshot) -> dict[str, list[str]]:
    return {facet_type.value: list(values) for facet_type, values in snapshot.items()}
