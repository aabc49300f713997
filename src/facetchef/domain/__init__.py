from .models import DESCRIPTION_LIMIT, FACET_STYLES, FacetType, Ingredient, Recipe, Tag
from .text import format_quantity, normalize_name, truncate_words

__all__ = [
    "DESCRIPTION_LIMIT",
    "FACET_STYLES",
    "FacetType",
    "Ingredient",
    "Recipe",
    "Tag",
    "format_quantity",
    "normalize_name",
    "truncate_words",
]
