"""Recipe domain entity: ingredients, per-portion nutrition, steps, dietary flag, ownership."""
from typing import List, Dict, Optional
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.utilities.constants import NUTRITION_FIELDS


def empty_nutrition() -> Dict[str, float]:
    return {field: 0 for field in NUTRITION_FIELDS}


class Recipe:
    def __init__(self, id: str = "", name: str = "", ingredients: Optional[List[Ingredient]] = None,
                 nutrition: Optional[Dict[str, float]] = None, steps: Optional[List[str]] = None,
                 is_vegetarian: bool = False, prep_time: int = 1, difficulty: str = "easy",
                 created_by: str = "", active: bool = True,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        n = nutrition or {}
        self.nutrition = {field: n.get(field, 0) or 0 for field in NUTRITION_FIELDS}
        self.steps = steps[:] if steps else []
        self.is_vegetarian = is_vegetarian
        self.prep_time = prep_time
        self.difficulty = difficulty
        self.created_by = created_by
        self.active = active
        self.created_at = created_at
        self.updated_at = updated_at

    def __str__(self) -> str:
        kind = "vegetarian" if self.is_vegetarian else "non-vegetarian"
        return f"{self.name} ({kind}) - {len(self.ingredients)} ingredients - Calories/portion: {self.nutrition['calories']}"

    __repr__ = __str__

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on the recipe name or any ingredient name."""
        t = term.strip().lower()
        if t in self.name.lower():
            return True
        return any(t in ing.name.lower() for ing in self.ingredients)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            id=d.get("id", ""),
            name=d.get("name", ""),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients", [])],
            nutrition=d.get("nutrition"),
            steps=d.get("steps", []),
            is_vegetarian=bool(d.get("isVegetarian", False)),
            prep_time=d.get("prepTime", 1),
            difficulty=d.get("difficulty", "easy"),
            created_by=d.get("createdBy", ""),
            active=d.get("active", True),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "nutrition": dict(self.nutrition),
            "steps": list(self.steps),
            "isVegetarian": self.is_vegetarian,
            "prepTime": self.prep_time,
            "difficulty": self.difficulty,
            "createdBy": self.created_by,
            "active": self.active,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
