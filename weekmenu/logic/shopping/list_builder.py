"""Shopping list builder.

Provides generate_shopping_list(menu, number_of_people, resolver) for a whole
weekly menu and calculate_for_people(recipe, number_of_people) for a single
recipe.
"""
from typing import Any, Dict, List, Tuple

from weekmenu.domain.Menu import Menu
from weekmenu.domain.Recipe import Recipe
from weekmenu.logic.rules.menu_rules import RecipeResolver, resolve_recipes, validate_people
from weekmenu.utilities.constants import NUTRITION_FIELDS


def generate_shopping_list(menu: Menu, number_of_people: int, resolver: RecipeResolver) -> List[Dict[str, Any]]:
    """Consolidated, headcount-scaled ingredient list for a weekly menu.

    Args:
        menu: Menu whose seven days are walked in weekday order.
        number_of_people: integer headcount in [MIN_PEOPLE, MAX_PEOPLE].
        resolver: recipe lookup (find_by_ids).

    Returns:
        List of dicts { name, quantity, unit } in order of first occurrence.
        Entries merge only when name and unit both match exactly.
    """
    validate_people(number_of_people)
    recipes = resolve_recipes(menu.all_recipe_ids(), resolver)

    merged: Dict[Tuple[str, str], Dict[str, Any]] = {}
    for recipe in recipes:
        for ing in recipe.ingredients:
            entry = merged.get(ing.key)
            if entry is None:
                merged[ing.key] = {"name": ing.name, "quantity": ing.quantity * number_of_people, "unit": ing.unit}
            else:
                entry["quantity"] += ing.quantity * number_of_people
    return list(merged.values())


def calculate_for_people(recipe: Recipe, number_of_people: int) -> Dict[str, Any]:
    """Scale one recipe's ingredients and nutrition by the headcount (no merging)."""
    validate_people(number_of_people)
    return {
        "ingredients": [ing.scaled(number_of_people).to_dict() for ing in recipe.ingredients],
        "nutrition": {field: recipe.nutrition[field] * number_of_people for field in NUTRITION_FIELDS},
    }


__all__ = ['generate_shopping_list', 'calculate_for_people']
