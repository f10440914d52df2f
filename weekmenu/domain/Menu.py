"""Menu domain entity: a week identifier, weekday -> recipe ids, menu type, ownership."""
from typing import Dict, List, Optional
from weekmenu.utilities.constants import DAYS_OF_WEEK, MENU_TYPE_OMNIVORE, MENU_TYPE_VEGETARIAN


class Menu:
    def __init__(self, id: str = "", week: str = "", days: Optional[Dict[str, List[str]]] = None,
                 menu_type: str = MENU_TYPE_OMNIVORE, created_by: str = "", active: bool = True,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.week = week
        source = days or {}
        # unknown day keys are dropped; missing ones become empty lists
        self.days = {day: list(source.get(day) or []) for day in DAYS_OF_WEEK}
        self.menu_type = menu_type
        self.created_by = created_by
        self.active = active
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def is_vegetarian(self) -> bool:
        return self.menu_type == MENU_TYPE_VEGETARIAN

    def all_recipe_ids(self) -> List[str]:
        '''Every referenced id across the week in weekday order, duplicates kept.'''
        return [rid for day in DAYS_OF_WEEK for rid in self.days[day]]

    def __str__(self) -> str:
        return f"Menu {self.week} ({self.menu_type}) - {len(self.all_recipe_ids())} recipe slots"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Menu(
            id=d.get("id", ""),
            week=d.get("week", ""),
            days=d.get("days"),
            menu_type=d.get("menuType", MENU_TYPE_OMNIVORE),
            created_by=d.get("createdBy", ""),
            active=d.get("active", True),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "week": self.week,
            "days": {day: list(ids) for day, ids in self.days.items()},
            "menuType": self.menu_type,
            "createdBy": self.created_by,
            "active": self.active,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
