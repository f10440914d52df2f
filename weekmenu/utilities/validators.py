"""
Input validation schemas using Pydantic for request payloads.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Dict, List, Literal, Optional, Union

from weekmenu.utilities.constants import (
    DAYS_OF_WEEK, ERROR_MESSAGES, MAX_NAME_LENGTH, MAX_PEOPLE, MIN_PEOPLE, MIN_PREP_TIME,
    ROLE_USER, UNITS_OF_MEASURE, USERNAME_MAX_LENGTH, USERNAME_MIN_LENGTH, USERNAME_PATTERN, WEEK_FORMAT,
)

Number = Union[int, float]
Difficulty = Literal["easy", "medium", "hard"]
MenuType = Literal["vegetarian", "omnivore"]
RegistrationRole = Literal["user", "nutritionist", "chef"]


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class IngredientInput(_Schema):
    """Schema for ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    quantity: Number = Field(..., ge=0)
    unit: str

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Ingredient name is required')
        return v

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, v):
        v = v.strip()
        if v not in UNITS_OF_MEASURE:
            raise ValueError(f"Invalid unit of measure. Allowed: {', '.join(UNITS_OF_MEASURE)}")
        return v


class NutritionInput(_Schema):
    """Per-portion nutrition facts; all values non-negative."""
    calories: Number = Field(..., ge=0)
    protein: Number = Field(..., ge=0)
    carbs: Number = Field(..., ge=0)
    fat: Number = Field(..., ge=0)


def _clean_steps(v):
    cleaned = [step.strip() for step in v]
    if any(not step for step in cleaned):
        raise ValueError('Every step must contain instructions')
    return cleaned


class RecipeInput(_Schema):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    ingredients: List[IngredientInput] = Field(..., min_length=1)
    nutrition: NutritionInput
    steps: List[str] = Field(..., min_length=1)
    is_vegetarian: bool = Field(False, alias="isVegetarian")
    prep_time: int = Field(..., alias="prepTime", ge=MIN_PREP_TIME)
    difficulty: Difficulty

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('steps')
    @classmethod
    def validate_steps(cls, v):
        return _clean_steps(v)


class RecipeUpdateInput(_Schema):
    """Partial recipe update; the merged result is re-validated as a RecipeInput."""
    name: Optional[str] = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    ingredients: Optional[List[IngredientInput]] = Field(None, min_length=1)
    nutrition: Optional[NutritionInput] = None
    steps: Optional[List[str]] = Field(None, min_length=1)
    is_vegetarian: Optional[bool] = Field(None, alias="isVegetarian")
    prep_time: Optional[int] = Field(None, alias="prepTime", ge=MIN_PREP_TIME)
    difficulty: Optional[Difficulty] = None

    @field_validator('steps')
    @classmethod
    def validate_steps(cls, v):
        return _clean_steps(v) if v is not None else v


def _check_week(v):
    if v is not None and not WEEK_FORMAT.match(v):
        raise ValueError(ERROR_MESSAGES["INVALID_WEEK"])
    return v


def _check_day_keys(v):
    if v is None:
        return v
    unknown = [k for k in v if k not in DAYS_OF_WEEK]
    if unknown:
        raise ValueError(f"Unknown day(s): {', '.join(unknown)}")
    return v


class MenuInput(_Schema):
    """Schema for menu creation; completeness is checked by the menu rules."""
    week: str
    days: Dict[str, List[str]]
    menu_type: MenuType = Field(..., alias="menuType")

    @field_validator('week')
    @classmethod
    def validate_week(cls, v):
        return _check_week(v)

    @field_validator('days')
    @classmethod
    def validate_days(cls, v):
        return _check_day_keys(v)


class MenuUpdateInput(_Schema):
    """Partial menu update; supplied days replace the stored ones day by day."""
    week: Optional[str] = None
    days: Optional[Dict[str, List[str]]] = None
    menu_type: Optional[MenuType] = Field(None, alias="menuType")

    @field_validator('week')
    @classmethod
    def validate_week(cls, v):
        return _check_week(v)

    @field_validator('days')
    @classmethod
    def validate_days(cls, v):
        return _check_day_keys(v)


class PreferencesInput(_Schema):
    menu_type: Optional[MenuType] = Field(None, alias="menuType")
    number_of_people: Optional[int] = Field(None, alias="numberOfPeople", ge=MIN_PEOPLE, le=MAX_PEOPLE)


class UserRegistration(_Schema):
    username: str = Field(..., min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH,
                          pattern=USERNAME_PATTERN)
    role: RegistrationRole = ROLE_USER
    preferences: Optional[PreferencesInput] = None

    @model_validator(mode='after')
    def require_preferences_for_users(self):
        """Plain users must state both menu type and headcount."""
        if self.role == ROLE_USER:
            p = self.preferences
            if p is None or p.menu_type is None or p.number_of_people is None:
                raise ValueError('Users must provide preferences.menuType and preferences.numberOfPeople')
        return self
