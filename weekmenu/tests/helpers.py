"""Builders shared by the test modules."""
from pathlib import Path

from fastapi.testclient import TestClient

from weekmenu.api import deps
from weekmenu.api.api_run import app
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.domain.Menu import Menu
from weekmenu.domain.Recipe import Recipe
from weekmenu.infra.Menu_Repository import MenuRepository
from weekmenu.infra.Recipe_Repository import RecipeRepository
from weekmenu.infra.User_Repository import UserRepository
from weekmenu.utilities.constants import DAYS_OF_WEEK


class FakeResolver:
    """In-memory recipe resolver recording every batched lookup."""

    def __init__(self, recipes):
        self.by_id = {r.id: r for r in recipes}
        self.calls = []

    def find_by_ids(self, ids):
        ids = list(ids)
        self.calls.append(ids)
        return [self.by_id[i] for i in ids if i in self.by_id and self.by_id[i].active]

    def find_by_id(self, recipe_id):
        r = self.by_id.get(recipe_id)
        return r if r is not None and r.active else None


def make_recipe(recipe_id, ingredients=(("rice", 100, "g"),), calories=400, protein=20, carbs=50, fat=10,
                is_vegetarian=True):
    return Recipe(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        ingredients=[Ingredient(n, q, u) for n, q, u in ingredients],
        nutrition={"calories": calories, "protein": protein, "carbs": carbs, "fat": fat},
        steps=["Cook"],
        is_vegetarian=is_vegetarian,
        prep_time=10,
        difficulty="easy",
        created_by="chef-1",
    )


def week_of(*per_day):
    """Days mapping; the last list given repeats for the remaining weekdays."""
    days = {}
    for i, day in enumerate(DAYS_OF_WEEK):
        days[day] = list(per_day[min(i, len(per_day) - 1)])
    return days


def make_menu(days, menu_type="omnivore", week="2024-W01"):
    return Menu(id="menu-1", week=week, days=days, menu_type=menu_type, created_by="chef-1")


def recipe_payload(name="Rice bowl", ingredients=None, is_vegetarian=True, calories=400):
    return {
        "name": name,
        "ingredients": ingredients or [{"name": "rice", "quantity": 100, "unit": "g"}],
        "nutrition": {"calories": calories, "protein": 10, "carbs": 80, "fat": 5},
        "steps": ["Boil water", "Cook rice"],
        "isVegetarian": is_vegetarian,
        "prepTime": 20,
        "difficulty": "easy",
    }


def api_client(data_dir: Path) -> TestClient:
    """TestClient whose stores live in data_dir; call reset_api() when done."""
    app.dependency_overrides[deps.get_recipe_repository] = lambda: RecipeRepository(data_dir / "recipes.json")
    app.dependency_overrides[deps.get_menu_repository] = lambda: MenuRepository(data_dir / "menus.json")
    app.dependency_overrides[deps.get_user_repository] = lambda: UserRepository(data_dir / "users.json")
    return TestClient(app)


def reset_api():
    app.dependency_overrides.clear()


def register(client, username, role="user", menu_type="omnivore", people=2):
    body = {"username": username, "role": role}
    if role == "user":
        body["preferences"] = {"menuType": menu_type, "numberOfPeople": people}
    resp = client.post("/api/users", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]["id"]


def as_user(user_id):
    return {"X-User-Id": user_id}
