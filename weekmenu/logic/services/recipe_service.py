import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from weekmenu.domain.errors import CompatibilityError, ConflictError, NotFoundError, ValidationError, from_pydantic
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.domain.Recipe import Recipe
from weekmenu.domain.User import User
from weekmenu.infra.Menu_Repository import MenuRepository
from weekmenu.infra.Recipe_Repository import RecipeRepository
from weekmenu.logic.auth.gate import CREATE, DEFAULT_GATE, DELETE, UPDATE, AuthorizationGate
from weekmenu.logic.shopping.list_builder import calculate_for_people
from weekmenu.utilities.constants import DIFFICULTY_LEVELS, ERROR_MESSAGES
from weekmenu.utilities.validators import RecipeInput, RecipeUpdateInput

logger = logging.getLogger(__name__)

_EDITABLE = ("name", "ingredients", "nutrition", "steps", "isVegetarian", "prepTime", "difficulty")


def _apply(recipe: Recipe, data: RecipeInput) -> Recipe:
    recipe.name = data.name
    recipe.ingredients = [Ingredient(i.name, i.quantity, i.unit) for i in data.ingredients]
    recipe.nutrition = data.nutrition.model_dump()
    recipe.steps = list(data.steps)
    recipe.is_vegetarian = data.is_vegetarian
    recipe.prep_time = data.prep_time
    recipe.difficulty = data.difficulty
    return recipe


def _weeks(menus) -> str:
    return ", ".join(sorted({m.week for m in menus}))


class RecipeService:
    def __init__(self, recipes: RecipeRepository, menus: MenuRepository, gate: AuthorizationGate = DEFAULT_GATE):
        self.recipes = recipes
        self.menus = menus
        self.gate = gate

    def get(self, recipe_id: str) -> Recipe:
        recipe = self.recipes.find_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    def list(self, user: Optional[User], is_vegetarian: Optional[bool] = None,
             difficulty: Optional[str] = None, created_by: Optional[str] = None) -> List[Recipe]:
        if difficulty and difficulty not in DIFFICULTY_LEVELS:
            raise ValidationError.for_field("difficulty", ERROR_MESSAGES["INVALID_DIFFICULTY"])
        # only authors may filter by creator
        if not self.gate.is_author(user):
            created_by = None
        return self.recipes.list(is_vegetarian=is_vegetarian, difficulty=difficulty, created_by=created_by)

    def search(self, term: Optional[str]) -> List[Recipe]:
        if not term or not term.strip():
            raise ValidationError.for_field("q", ERROR_MESSAGES["EMPTY_SEARCH"])
        return self.recipes.search(term)

    def create(self, user: Optional[User], payload: RecipeInput) -> Recipe:
        self.gate.require(user, CREATE)
        recipe = _apply(Recipe(created_by=user.id), payload)
        return self.recipes.insert(recipe)

    def update(self, user: Optional[User], recipe_id: str, payload: RecipeUpdateInput) -> Recipe:
        recipe = self.get(recipe_id)
        self.gate.require(user, UPDATE, owner_id=recipe.created_by)

        current = {k: v for k, v in recipe.to_dict().items() if k in _EDITABLE}
        current.update(payload.model_dump(exclude_unset=True, by_alias=True))
        try:
            merged = RecipeInput.model_validate(current)
        except PydanticValidationError as e:
            raise from_pydantic(e) from e

        # a recipe served by a vegetarian menu must stay vegetarian
        if recipe.is_vegetarian and not merged.is_vegetarian:
            weeks = _weeks(m for m in self.menus.referencing(recipe.id) if m.is_vegetarian)
            if weeks:
                raise CompatibilityError(f"Recipe is used by vegetarian menus for week(s): {weeks}")

        self.recipes.save(_apply(recipe, merged))
        logger.info("Recipe updated id=%s by user=%s", recipe.id, user.id)
        return recipe

    def delete(self, user: Optional[User], recipe_id: str) -> None:
        recipe = self.get(recipe_id)
        self.gate.require(user, DELETE, owner_id=recipe.created_by)
        weeks = _weeks(self.menus.referencing(recipe.id))
        if weeks:
            raise ConflictError(f"Recipe is used by menus for week(s): {weeks}")
        self.recipes.soft_delete(recipe)

    def shopping_list(self, recipe_id: str, number_of_people: int) -> Dict[str, Any]:
        recipe = self.get(recipe_id)
        return calculate_for_people(recipe, number_of_people)
