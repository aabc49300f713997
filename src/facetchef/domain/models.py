from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .text import format_quantity, truncate_words

DESCRIPTION_LIMIT = 200


class FacetType(str, Enum):
    INGREDIENTS = "ingredients"
    APPLIANCES = "appliances"
    UTENSILS = "utensils"

    @classmethod
    def parse(cls, value: object) -> "FacetType":
        if isinstance(value, FacetType):
            return value
        text = str(value or "").strip().lower()
        if text == "ustensils":
            text = "utensils"
        return cls(text)

    @property
    def style(self) -> str:
        return FACET_STYLES[self]


FACET_STYLES = {
    FacetType.INGREDIENTS: "primary",
    FacetType.APPLIANCES: "success",
    FacetType.UTENSILS: "danger",
}


@dataclass(frozen=True)
class Ingredient:
    name: str
    quantity: float | int | None = None
    unit: str | None = None

    def display(self) -> str:
        if self.quantity is None:
            return self.name
        text = f"{self.name[:1].upper()}{self.name[1:]}: {format_quantity(self.quantity)}"
        if self.unit:
            text += f" {self.unit}"
        return text


@dataclass(frozen=True)
class Recipe:
    recipe_id: int | str
    title: str
    description: str
    time: int
    servings: int
    appliance: str
    utensils: tuple[str, ...]
    ingredients: tuple[Ingredient, ...]

    @property
    def ingredient_names(self) -> tuple[str, ...]:
        return tuple(ingredient.name for ingredient in self.ingredients)

    def short_description(self, limit: int = DESCRIPTION_LIMIT) -> str:
        return truncate_words(self.description, limit)


@dataclass(frozen=True)
class Tag:
    facet_type: FacetType
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "facet_type", FacetType.parse(self.facet_type))

    def display(self) -> str:
        return f"{self.facet_type.value}: {self.value}"
