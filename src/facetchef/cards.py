from __future__ import annotations

from .domain import DESCRIPTION_LIMIT, Recipe


def format_recipe_card(recipe: Recipe, description_limit: int = DESCRIPTION_LIMIT) -> str:
    lines = [f"{recipe.title} ({recipe.time} min, serves {recipe.servings})"]
    lines.append(f"Appliance: {recipe.appliance}")
    if recipe.utensils:
        lines.append(f"Utensils: {', '.join(dict.fromkeys(recipe.utensils))}")
    for ingredient in recipe.ingredients:
        lines.append(f"- {ingredient.display()}")
    lines.append("")
    lines.append(recipe.short_description(description_limit))
    return "\n".join(lines)
