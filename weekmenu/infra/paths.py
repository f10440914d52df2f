from weekmenu.utilities.config import DATA_DIR

# Centralized paths for document files (single source of truth)
RECIPES_FILE = DATA_DIR / 'recipes.json'
MENUS_FILE = DATA_DIR / 'menus.json'
USERS_FILE = DATA_DIR / 'users.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'MENUS_FILE', 'USERS_FILE']
