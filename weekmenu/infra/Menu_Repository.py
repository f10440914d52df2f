import logging
from pathlib import Path
from typing import List, Optional, Union

from weekmenu.domain.errors import ConflictError
from weekmenu.domain.Menu import Menu
from weekmenu.infra.Document_Store import DocumentStore, DuplicateDocumentError, new_id, now_iso
from weekmenu.infra.paths import MENUS_FILE

logger = logging.getLogger(__name__)


def _duplicate_message(menu: Menu) -> str:
    return f"A {menu.menu_type} menu already exists for week {menu.week}"


class MenuRepository:
    def __init__(self, path: Union[str, Path] = MENUS_FILE):
        self.store = DocumentStore(path)

    def _active(self) -> List[Menu]:
        return [Menu.from_dict(d) for d in self.store.all() if d.get('active', True)]

    def _put(self, menu: Menu) -> None:
        """Write the menu; an active menu may not share its (week, menu type) with another active one."""
        if not menu.active:
            self.store.put(menu.to_dict())
            return

        def clashes(doc: dict) -> bool:
            return (doc.get('active', True) and doc.get('week') == menu.week
                    and doc.get('menuType') == menu.menu_type)

        try:
            self.store.put(menu.to_dict(), clashes=clashes)
        except DuplicateDocumentError as e:
            raise ConflictError(_duplicate_message(menu)) from e

    def find_by_id(self, menu_id: str) -> Optional[Menu]:
        doc = self.store.get(menu_id)
        if not doc or not doc.get('active', True):
            return None
        return Menu.from_dict(doc)

    def find_by_week(self, week: str, menu_type: str) -> Optional[Menu]:
        for menu in self._active():
            if menu.week == week and menu.menu_type == menu_type:
                return menu
        return None

    def exists(self, week: str, menu_type: str, exclude_id: Optional[str] = None) -> bool:
        """True if another active menu already holds this (week, menu type) pair."""
        found = self.find_by_week(week, menu_type)
        return found is not None and found.id != exclude_id

    def referencing(self, recipe_id: str) -> List[Menu]:
        """Active menus that list recipe_id on any day."""
        return [m for m in self._active() if recipe_id in m.all_recipe_ids()]

    def list(self, menu_type: Optional[str] = None, created_by: Optional[str] = None,
             week: Optional[str] = None) -> List[Menu]:
        menus = self._active()
        if menu_type:
            menus = [m for m in menus if m.menu_type == menu_type]
        if created_by:
            menus = [m for m in menus if m.created_by == created_by]
        if week:
            menus = [m for m in menus if m.week == week]
        menus.sort(key=lambda m: m.week, reverse=True)
        return menus

    def insert(self, menu: Menu) -> Menu:
        menu.id = menu.id or new_id()
        menu.created_at = menu.updated_at = now_iso()
        menu.active = True
        self._put(menu)
        logger.info("Menu created id=%s week=%s type=%s", menu.id, menu.week, menu.menu_type)
        return menu

    def save(self, menu: Menu) -> Menu:
        menu.updated_at = now_iso()
        self._put(menu)
        return menu

    def soft_delete(self, menu: Menu) -> None:
        menu.active = False
        self.save(menu)
        logger.info("Menu deactivated id=%s", menu.id)


__all__ = ['MenuRepository']
