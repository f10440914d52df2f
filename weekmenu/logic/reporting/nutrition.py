"""Nutrition aggregation logic.

Nutrition is computed eagerly from already-resolved recipe data; menus
themselves hold only recipe ids.
"""
from typing import Dict

from weekmenu.domain.Menu import Menu
from weekmenu.domain.Recipe import empty_nutrition
from weekmenu.logic.rules.menu_rules import RecipeResolver, resolve_recipes
from weekmenu.utilities.constants import DAYS_OF_WEEK, NUTRITION_FIELDS


def compute_daily_nutrition(menu: Menu, resolver: RecipeResolver) -> Dict[str, Dict[str, float]]:
    """Per-weekday sums of calories, protein, carbs and fat (per portion).

    Returns structure:
    {
      'monday': {'calories': .., 'protein': .., 'carbs': .., 'fat': ..},
      ...
      'sunday': {...}
    }

    Each slot of a day contributes its recipe once, so a recipe listed
    twice on the same day is counted twice. Unknown recipe ids raise
    RecipeNotFoundError instead of being skipped.
    """
    recipes = resolve_recipes(menu.all_recipe_ids(), resolver)
    index = {r.id: r for r in recipes}

    daily = {}
    for day in DAYS_OF_WEEK:
        totals = empty_nutrition()
        for rid in menu.days.get(day, []):
            nutrition = index[rid].nutrition
            for field in NUTRITION_FIELDS:
                totals[field] += nutrition[field]
        daily[day] = totals
    return daily


def compute_week_totals(daily: Dict[str, Dict[str, float]]) -> Dict[str, float]:
    totals = empty_nutrition()
    for values in daily.values():
        for field in NUTRITION_FIELDS:
            totals[field] += values.get(field, 0)
    return totals


__all__ = ["compute_daily_nutrition", "compute_week_totals"]
