"""Weekly menu planning: recipes, weekly menus, nutrition rollups and shopping lists."""
__version__ = "0.1.0"
