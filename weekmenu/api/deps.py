"""Shared FastAPI dependencies: stores, services, and the calling user.

The caller is identified by the USER_ID_HEADER header, which the upstream
authentication layer sets. Tests swap the store factories through
app.dependency_overrides.
"""
from typing import Optional

from fastapi import Depends, Request

from weekmenu.domain.errors import AuthenticationError
from weekmenu.domain.User import User
from weekmenu.infra.Menu_Repository import MenuRepository
from weekmenu.infra.Recipe_Repository import RecipeRepository
from weekmenu.infra.User_Repository import UserRepository
from weekmenu.logic.services.menu_service import MenuService
from weekmenu.logic.services.recipe_service import RecipeService
from weekmenu.utilities.config import USER_ID_HEADER


def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository()


def get_menu_repository() -> MenuRepository:
    return MenuRepository()


def get_user_repository() -> UserRepository:
    return UserRepository()


def get_recipe_service(recipes: RecipeRepository = Depends(get_recipe_repository),
                       menus: MenuRepository = Depends(get_menu_repository)) -> RecipeService:
    return RecipeService(recipes, menus)


def get_menu_service(menus: MenuRepository = Depends(get_menu_repository),
                     recipes: RecipeRepository = Depends(get_recipe_repository)) -> MenuService:
    return MenuService(menus, recipes)


def get_optional_user(request: Request, users: UserRepository = Depends(get_user_repository)) -> Optional[User]:
    user_id = request.headers.get(USER_ID_HEADER)
    if not user_id:
        return None
    user = users.find_by_id(user_id)
    if user is None:
        raise AuthenticationError("Unknown user")
    return user


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise AuthenticationError()
    return user
