"""Pydantic request bodies for the HTTP API."""

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from macro_tracker.domain.drawers import DrawerType


class MealFoodCreate(BaseModel):
    """Food logged into a new or existing meal."""

    food_id: UUID
    food_name: str
    portion_id: UUID
    addon_ids: list[UUID] = Field(default_factory=list)
    meal_type: str | None = None
    meal_date: date | None = None
    meal_id: UUID | None = None


class MealFoodUpdate(BaseModel):
    """New portion and add-ons for a logged food."""

    portion_id: UUID
    addon_ids: list[UUID] = Field(default_factory=list)


class CustomFoodCreate(BaseModel):
    """User-submitted food with a single portion."""

    name: str
    calories: int
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fats_g: float = 0.0
    portion_name: str | None = None


class ProfileUpdate(BaseModel):
    """Body metrics; empty values are left untouched."""

    height_cm: int | None = None
    age: int | None = None
    activity_level: str | None = None


class WeightLogCreate(BaseModel):
    """Weight entry for a day, defaulting to today."""

    weight_kg: float
    log_date: date | None = None
    notes: str | None = None


class WeightLogUpdate(BaseModel):
    """Edited weight entry."""

    weight_kg: float
    log_date: date
    notes: str | None = None


class GoalUpdate(BaseModel):
    """Daily targets; updates the given goal or starts a new one."""

    daily_calorie: int | None = None
    daily_protein_g: float | None = None
    daily_carbs_g: float | None = None
    daily_fats_g: float | None = None
    daily_fiber_g: float | None = None
    goal_id: UUID | None = None


class DrawerOpen(BaseModel):
    """Open a drawer directly with optional carried data."""

    drawer_type: DrawerType
    data: dict[str, Any] = Field(default_factory=dict)


class DrawerActionSelect(BaseModel):
    """Entry chosen from the action menu."""

    action: DrawerType
    selected_date: date | None = None


class DrawerMealTypeSelect(BaseModel):
    """Meal type chosen in the meal type drawer."""

    meal_type: str


class DrawerFoodSelect(BaseModel):
    """Food chosen from search or recent foods."""

    food_id: UUID
    food_name: str


class DrawerCustomFoodStart(BaseModel):
    """Switch from search to the custom food form."""

    suggested_name: str = ""


class DrawerSave(BaseModel):
    """Portion and add-ons chosen in the food form."""

    portion_id: UUID
    addon_ids: list[UUID] = Field(default_factory=list)


class FoodPayload(BaseModel):
    """Admin food fields."""

    display_name: str | None = None
    category: str | None = None
    name: str | None = None
    subcategory: str | None = None
    description: str | None = None
    is_approved: bool | None = None


class PortionPayload(BaseModel):
    """Admin portion fields."""

    display_name: str | None = None
    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fats_g: float | None = None
    fiber_g: float | None = None
    name: str | None = None
    description: str | None = None


class AddonPayload(BaseModel):
    """Admin add-on fields."""

    display_name: str | None = None
    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fats_g: float | None = None
    fiber_g: float | None = None
    name: str | None = None
    category: str | None = None
