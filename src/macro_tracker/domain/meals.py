"""Domain models for logged meals."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from macro_tracker.domain.foods import TotalNutrition

MEAL_ORDER = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class MealFood:
    """A single logged food item belonging to one meal."""

    id: UUID
    meal_id: UUID
    food_name: str
    portion_display: str
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    fiber_g: float | None = None
    food_id: UUID | None = None
    portion_id: UUID | None = None
    selected_addons: list[UUID] = field(default_factory=list)
    addons_display: list[str] = field(default_factory=list)
    created_at: datetime | None = None


@dataclass(frozen=True)
class MealWithFoods:
    """A meal row with its line items and precomputed totals."""

    id: UUID
    user_id: UUID
    meal_type: str
    meal_date: date
    total_calories: float | None = None
    total_protein_g: float | None = None
    total_carbs_g: float | None = None
    total_fats_g: float | None = None
    total_fiber_g: float | None = None
    meal_foods: list[MealFood] = field(default_factory=list)
    created_at: datetime | None = None


@dataclass(frozen=True)
class MealTypeTotals:
    """Meals of one meal type with summed totals."""

    meal_type: str
    meals: list[MealWithFoods]
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fats: float


@dataclass(frozen=True)
class DailySummary:
    """Per-user-per-day denormalized totals, recalculated server-side."""

    user_id: UUID
    summary_date: date
    total_calories: float
    total_protein_g: float
    total_carbs_g: float
    total_fats_g: float
    total_fiber_g: float
    meals_logged: int | None = None
    target_calories: float | None = None
    target_protein_g: float | None = None
    target_carbs_g: float | None = None
    target_fats_g: float | None = None
    target_fiber_g: float | None = None


@dataclass(frozen=True)
class MealDay:
    """Meals and summary for a single day."""

    day: date
    meals: list[MealWithFoods]
    summary: DailySummary | None


@dataclass(frozen=True)
class MealFoodEntry:
    """Values written for a meal food once a portion and add-ons are chosen."""

    food_id: UUID
    food_name: str
    portion_id: UUID
    portion_display: str
    selected_addons: list[UUID]
    addons_display: list[str]
    nutrition: TotalNutrition
