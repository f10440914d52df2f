import re
from typing import Final

MIN_PEOPLE: Final[int] = 1
MAX_PEOPLE: Final[int] = 20

DAYS_OF_WEEK: Final[tuple] = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

MENU_TYPE_VEGETARIAN: Final[str] = "vegetarian"
MENU_TYPE_OMNIVORE: Final[str] = "omnivore"
MENU_TYPES: Final[tuple] = (MENU_TYPE_VEGETARIAN, MENU_TYPE_OMNIVORE)

UNITS_OF_MEASURE: Final[tuple] = ("g", "kg", "ml", "l", "pcs", "tbsp", "tsp", "cup", "pinch")
DIFFICULTY_LEVELS: Final[tuple] = ("easy", "medium", "hard")
MIN_PREP_TIME: Final[int] = 1
MAX_NAME_LENGTH: Final[int] = 100

NUTRITION_FIELDS: Final[tuple] = ("calories", "protein", "carbs", "fat")

WEEK_PATTERN: Final[str] = r"^\d{4}-W(0[1-9]|[1-4][0-9]|5[0-3])$"
WEEK_FORMAT: Final[re.Pattern] = re.compile(WEEK_PATTERN)

USERNAME_MIN_LENGTH: Final[int] = 3
USERNAME_MAX_LENGTH: Final[int] = 30
USERNAME_PATTERN: Final[str] = r"^[a-zA-Z0-9_]+$"

ROLE_USER: Final[str] = "user"
ROLE_NUTRITIONIST: Final[str] = "nutritionist"
ROLE_CHEF: Final[str] = "chef"
ROLE_ADMIN: Final[str] = "admin"
ROLES: Final[tuple] = (ROLE_USER, ROLE_NUTRITIONIST, ROLE_CHEF, ROLE_ADMIN)

ERROR_MESSAGES: Final[dict[str, str]] = {
    "UNAUTHENTICATED": "You are not authenticated",
    "UNAUTHORIZED": "You are not allowed to perform this action",
    "ACCOUNT_DISABLED": "This account is disabled",
    "SERVER_ERROR": "Internal server error",
    "VALIDATION_ERROR": "Invalid data",
    "NOT_FOUND": "Resource not found",
    "DUPLICATE_ENTRY": "This entry already exists",
    "INVALID_MENU_TYPE": "Invalid menu type. Must be vegetarian or omnivore",
    "VEGETARIAN_CONFLICT": "A vegetarian menu cannot contain non-vegetarian recipes",
    "RECIPE_NOT_FOUND": "One or more recipes were not found",
    "INVALID_WEEK": "Invalid week format. Use YYYY-Wnn (e.g. 2024-W01)",
    "INVALID_PEOPLE": f"Number of people must be between {MIN_PEOPLE} and {MAX_PEOPLE}",
    "INVALID_DIFFICULTY": "Difficulty must be one of: easy, medium, hard",
    "EMPTY_SEARCH": "Provide a search term",
}
