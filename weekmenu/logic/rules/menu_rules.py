"""Menu validation rules.

Completeness (every weekday has recipes), vegetarian compatibility,
referenced-recipe resolution, and the scalar checks (week identifier,
headcount) shared by the aggregator and the services.
"""
from typing import Dict, Iterable, List, Optional, Protocol

from weekmenu.domain.errors import CompatibilityError, RecipeNotFoundError, ValidationError
from weekmenu.domain.Recipe import Recipe
from weekmenu.utilities.constants import (
    DAYS_OF_WEEK, ERROR_MESSAGES, MAX_PEOPLE, MENU_TYPE_VEGETARIAN, MIN_PEOPLE, WEEK_FORMAT,
)


class RecipeResolver(Protocol):
    def find_by_ids(self, ids: Iterable[str]) -> List[Recipe]: ...

    def find_by_id(self, recipe_id: str) -> Optional[Recipe]: ...


def validate_week(week: str) -> str:
    if not isinstance(week, str) or not WEEK_FORMAT.match(week):
        raise ValidationError.for_field("week", ERROR_MESSAGES["INVALID_WEEK"])
    return week


def validate_people(number_of_people) -> int:
    """Headcount must be an integer in [MIN_PEOPLE, MAX_PEOPLE]."""
    if isinstance(number_of_people, bool) or not isinstance(number_of_people, int):
        raise ValidationError.for_field("numberOfPeople", ERROR_MESSAGES["INVALID_PEOPLE"])
    if not MIN_PEOPLE <= number_of_people <= MAX_PEOPLE:
        raise ValidationError.for_field("numberOfPeople", ERROR_MESSAGES["INVALID_PEOPLE"])
    return number_of_people


def validate_menu_completeness(days: Dict[str, List[str]]) -> None:
    """Every weekday must map to a non-empty list; all missing days are reported together."""
    days = days or {}
    missing = [day for day in DAYS_OF_WEEK if not days.get(day)]
    if missing:
        raise ValidationError(
            f"Every day needs at least one recipe. Missing recipes for: {', '.join(missing)}",
            errors=[{"field": f"days.{day}", "message": f"No recipes for {day}"} for day in missing],
        )


def validate_menu_compatibility(menu_type: str, recipes: Iterable[Recipe]) -> None:
    if menu_type != MENU_TYPE_VEGETARIAN:
        return
    if any(not r.is_vegetarian for r in recipes):
        raise CompatibilityError()


def resolve_recipes(ids: List[str], resolver: RecipeResolver) -> List[Recipe]:
    """Resolve ids with one batched lookup, preserving order and duplicates.

    Raises RecipeNotFoundError naming every id that is unknown or inactive.
    """
    requested = list(dict.fromkeys(ids))
    if not requested:
        return []
    found = {r.id: r for r in resolver.find_by_ids(requested)}
    if len(found) != len(requested):
        raise RecipeNotFoundError([rid for rid in requested if rid not in found])
    return [found[rid] for rid in ids]


__all__ = [
    'RecipeResolver', 'validate_week', 'validate_people', 'validate_menu_completeness',
    'validate_menu_compatibility', 'resolve_recipes',
]
