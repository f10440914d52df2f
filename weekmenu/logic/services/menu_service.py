import logging
from typing import Any, Dict, List, Optional

from weekmenu.domain.errors import AuthenticationError, ConflictError, NotFoundError
from weekmenu.domain.Menu import Menu
from weekmenu.domain.User import User
from weekmenu.infra.Menu_Repository import MenuRepository
from weekmenu.infra.Recipe_Repository import RecipeRepository
from weekmenu.logic.auth.gate import CREATE, DEFAULT_GATE, DELETE, UPDATE, AuthorizationGate
from weekmenu.logic.reporting.nutrition import compute_daily_nutrition, compute_week_totals
from weekmenu.logic.rules.menu_rules import (
    resolve_recipes, validate_menu_compatibility, validate_menu_completeness, validate_week,
)
from weekmenu.logic.shopping.list_builder import generate_shopping_list
from weekmenu.utilities.constants import ERROR_MESSAGES, MENU_TYPE_OMNIVORE, MIN_PEOPLE
from weekmenu.utilities.validators import MenuInput, MenuUpdateInput

logger = logging.getLogger(__name__)


class MenuService:
    def __init__(self, menus: MenuRepository, recipes: RecipeRepository, gate: AuthorizationGate = DEFAULT_GATE):
        self.menus = menus
        self.recipes = recipes
        self.gate = gate

    # --- Validation -------------------------------------------------------
    def _validate(self, menu: Menu) -> None:
        """Completeness, then recipe resolution, then vegetarian compatibility, then uniqueness."""
        validate_menu_completeness(menu.days)
        recipes = resolve_recipes(menu.all_recipe_ids(), self.recipes)
        validate_menu_compatibility(menu.menu_type, recipes)
        # fail early here; insert and save repeat the check under the store lock
        if self.menus.exists(menu.week, menu.menu_type, exclude_id=menu.id or None):
            raise ConflictError(f"A {menu.menu_type} menu already exists for week {menu.week}")

    # --- Reads ------------------------------------------------------------
    def get(self, menu_id: str) -> Menu:
        menu = self.menus.find_by_id(menu_id)
        if menu is None:
            raise NotFoundError("Menu not found")
        return menu

    def get_by_week(self, user: Optional[User], week: str) -> Dict[str, Any]:
        """Menu for the caller's preferred type with nutrition and, when a headcount is stored, its shopping list."""
        if user is None:
            raise AuthenticationError()
        validate_week(week)
        menu_type = user.preferred_menu_type or MENU_TYPE_OMNIVORE
        menu = self.menus.find_by_week(week, menu_type)
        if menu is None:
            raise NotFoundError(ERROR_MESSAGES["NOT_FOUND"])

        daily = compute_daily_nutrition(menu, self.recipes)
        people = user.number_of_people
        shopping_list = generate_shopping_list(menu, people, self.recipes) if people else None
        return {
            "menu": menu,
            "dailyNutrition": daily,
            "weekTotals": compute_week_totals(daily),
            "shoppingList": shopping_list,
            "forPeople": people,
        }

    def list(self, user: Optional[User], created_by: Optional[str] = None, week: Optional[str] = None) -> List[Menu]:
        if user is None:
            raise AuthenticationError()
        menu_type = None
        if not self.gate.is_author(user):
            menu_type = user.preferred_menu_type
            created_by = None
        if week:
            validate_week(week)
        return self.menus.list(menu_type=menu_type, created_by=created_by, week=week)

    def shopping_list(self, user: Optional[User], menu_id: str, number_of_people: Optional[int] = None) -> Dict[str, Any]:
        """Headcount: explicit value, else the caller's preference, else MIN_PEOPLE."""
        if user is None:
            raise AuthenticationError()
        menu = self.get(menu_id)
        people = number_of_people if number_of_people is not None else (user.number_of_people or MIN_PEOPLE)
        items = generate_shopping_list(menu, people, self.recipes)
        return {"menu": menu, "shoppingList": items, "forPeople": people}

    # --- Writes -----------------------------------------------------------
    def create(self, user: Optional[User], payload: MenuInput) -> Menu:
        self.gate.require(user, CREATE)
        menu = Menu(week=payload.week, days=payload.days, menu_type=payload.menu_type, created_by=user.id)
        self._validate(menu)
        return self.menus.insert(menu)

    def update(self, user: Optional[User], menu_id: str, payload: MenuUpdateInput) -> Menu:
        """Partial update validated against the merged, post-update menu.

        An existing vegetarian menu stays vegetarian unless menuType is
        changed explicitly, so its recipes are checked again.
        """
        menu = self.get(menu_id)
        self.gate.require(user, UPDATE, owner_id=menu.created_by)

        changes = payload.model_dump(exclude_unset=True)
        merged = Menu.from_dict(menu.to_dict())
        if changes.get("week") is not None:
            merged.week = changes["week"]
        if changes.get("menu_type") is not None:
            merged.menu_type = changes["menu_type"]
        for day, ids in (changes.get("days") or {}).items():
            merged.days[day] = list(ids or [])

        self._validate(merged)
        self.menus.save(merged)
        logger.info("Menu updated id=%s by user=%s", merged.id, user.id)
        return merged

    def delete(self, user: Optional[User], menu_id: str) -> None:
        menu = self.get(menu_id)
        self.gate.require(user, DELETE, owner_id=menu.created_by)
        self.menus.soft_delete(menu)
