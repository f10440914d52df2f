from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from weekmenu.api.deps import get_current_user, get_optional_user, get_recipe_service
from weekmenu.domain.Recipe import Recipe
from weekmenu.domain.User import User
from weekmenu.logic.services.recipe_service import RecipeService
from weekmenu.utilities.validators import RecipeInput, RecipeUpdateInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def serialize_recipe(recipe: Recipe) -> dict:
    data = recipe.to_dict()
    data.pop("active", None)
    return data


# Public search; registered before /{recipe_id} so "search" is not taken as an id
@router.get("/search")
def search_recipes(q: Optional[str] = Query(default=None), service: RecipeService = Depends(get_recipe_service)):
    recipes = service.search(q)
    return {"status": "success", "results": len(recipes), "data": [serialize_recipe(r) for r in recipes]}


@router.get("")
def list_recipes(is_vegetarian: Optional[bool] = Query(default=None, alias="isVegetarian"),
                 difficulty: Optional[str] = Query(default=None),
                 created_by: Optional[str] = Query(default=None, alias="createdBy"),
                 user: User = Depends(get_current_user),
                 service: RecipeService = Depends(get_recipe_service)):
    recipes = service.list(user, is_vegetarian=is_vegetarian, difficulty=difficulty, created_by=created_by)
    return {"status": "success", "results": len(recipes), "data": [serialize_recipe(r) for r in recipes]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_recipe(payload: RecipeInput,
                  user: Optional[User] = Depends(get_optional_user),
                  service: RecipeService = Depends(get_recipe_service)):
    recipe = service.create(user, payload)
    return {"status": "success", "data": serialize_recipe(recipe)}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str,
               user: User = Depends(get_current_user),
               service: RecipeService = Depends(get_recipe_service)):
    return {"status": "success", "data": serialize_recipe(service.get(recipe_id))}


@router.patch("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeUpdateInput,
                  user: Optional[User] = Depends(get_optional_user),
                  service: RecipeService = Depends(get_recipe_service)):
    recipe = service.update(user, recipe_id, payload)
    return {"status": "success", "data": serialize_recipe(recipe)}


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: str,
                  user: Optional[User] = Depends(get_optional_user),
                  service: RecipeService = Depends(get_recipe_service)):
    service.delete(user, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{recipe_id}/shopping-list/{people}")
def recipe_shopping_list(recipe_id: str, people: int,
                         user: User = Depends(get_current_user),
                         service: RecipeService = Depends(get_recipe_service)):
    return {"status": "success", "data": {"shoppingList": service.shopping_list(recipe_id, people), "forPeople": people}}
