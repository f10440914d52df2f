"""User domain entity: role and dietary preferences (menu type, household headcount)."""
from typing import Dict, Any, Optional
from weekmenu.utilities.constants import ROLE_USER


class User:
    def __init__(self, id: str = "", username: str = "", role: str = ROLE_USER,
                 preferences: Optional[Dict[str, Any]] = None, is_active: bool = True,
                 created_at: Optional[str] = None):
        self.id = id
        self.username = username
        self.role = role
        p = preferences or {}
        self.preferences = {
            "menuType": p.get("menuType"),
            "numberOfPeople": p.get("numberOfPeople"),
        }
        self.is_active = is_active
        self.created_at = created_at

    @property
    def preferred_menu_type(self) -> Optional[str]:
        return self.preferences.get("menuType")

    @property
    def number_of_people(self) -> Optional[int]:
        return self.preferences.get("numberOfPeople")

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return User(
            id=d.get("id", ""),
            username=d.get("username", ""),
            role=d.get("role", ROLE_USER),
            preferences=d.get("preferences"),
            is_active=d.get("isActive", True),
            created_at=d.get("createdAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "preferences": dict(self.preferences),
            "isActive": self.is_active,
            "createdAt": self.created_at,
        }
