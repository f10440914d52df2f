import logging

from fastapi import APIRouter, Depends, status

from weekmenu.api.deps import get_current_user, get_user_repository
from weekmenu.domain.errors import ConflictError, ValidationError
from weekmenu.domain.User import User
from weekmenu.infra.User_Repository import UserRepository
from weekmenu.utilities.constants import ROLE_USER
from weekmenu.utilities.validators import PreferencesInput, UserRegistration

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED)
def register_user(payload: UserRegistration, users: UserRepository = Depends(get_user_repository)):
    if users.find_by_username(payload.username):
        raise ConflictError("Username already taken")
    prefs = payload.preferences.model_dump(by_alias=True) if payload.preferences else None
    user = users.insert(User(username=payload.username, role=payload.role, preferences=prefs))
    logger.info("User registered id=%s role=%s", user.id, user.role)
    return {"status": "success", "data": user.to_dict()}


@router.get("/me")
def read_me(user: User = Depends(get_current_user)):
    return {"status": "success", "data": user.to_dict()}


@router.patch("/me/preferences")
def update_preferences(payload: PreferencesInput,
                       user: User = Depends(get_current_user),
                       users: UserRepository = Depends(get_user_repository)):
    changes = payload.model_dump(exclude_unset=True, by_alias=True)
    if user.role == ROLE_USER and any(v is None for v in changes.values()):
        raise ValidationError.for_field("preferences", "Users cannot clear their preferences")
    user.preferences.update(changes)
    users.save(user)
    return {"status": "success", "data": user.to_dict()}
