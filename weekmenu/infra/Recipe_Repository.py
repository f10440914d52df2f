import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from weekmenu.domain.Recipe import Recipe
from weekmenu.infra.Document_Store import DocumentStore, new_id, now_iso
from weekmenu.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Recipe documents; every read excludes soft-deleted recipes.

    Also serves as the recipe resolver of the menu aggregator
    (find_by_ids / find_by_id).
    """

    def __init__(self, path: Union[str, Path] = RECIPES_FILE):
        self.store = DocumentStore(path)

    def find_by_ids(self, ids: Iterable[str]) -> List[Recipe]:
        """Active recipes among ids; callers detect missing ids by comparing cardinality."""
        docs = self.store.get_many(ids)
        return [Recipe.from_dict(d) for d in docs if d.get('active', True)]

    def find_by_id(self, recipe_id: str) -> Optional[Recipe]:
        doc = self.store.get(recipe_id)
        if not doc or not doc.get('active', True):
            return None
        return Recipe.from_dict(doc)

    def list(self, is_vegetarian: Optional[bool] = None, difficulty: Optional[str] = None,
             created_by: Optional[str] = None) -> List[Recipe]:
        recipes = [Recipe.from_dict(d) for d in self.store.all() if d.get('active', True)]
        if is_vegetarian is not None:
            recipes = [r for r in recipes if r.is_vegetarian == is_vegetarian]
        if difficulty:
            recipes = [r for r in recipes if r.difficulty == difficulty]
        if created_by:
            recipes = [r for r in recipes if r.created_by == created_by]
        # newest first
        recipes.sort(key=lambda r: r.created_at or '', reverse=True)
        return recipes

    def search(self, term: str) -> List[Recipe]:
        return [r for r in self.list() if r.matches(term)]

    def insert(self, recipe: Recipe) -> Recipe:
        recipe.id = recipe.id or new_id()
        recipe.created_at = recipe.updated_at = now_iso()
        recipe.active = True
        self.store.put(recipe.to_dict())
        logger.info("Recipe created id=%s name=%s", recipe.id, recipe.name)
        return recipe

    def save(self, recipe: Recipe) -> Recipe:
        recipe.updated_at = now_iso()
        self.store.put(recipe.to_dict())
        return recipe

    def soft_delete(self, recipe: Recipe) -> None:
        recipe.active = False
        self.save(recipe)
        logger.info("Recipe deactivated id=%s", recipe.id)
