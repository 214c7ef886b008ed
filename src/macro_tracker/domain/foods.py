"""Domain models for the shared food database."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

CUSTOM_CATEGORY = "custom"


@dataclass(frozen=True)
class Food:
    """A food in the shared catalog or a user's custom food."""

    id: UUID
    display_name: str
    category: str
    name: str | None = None
    subcategory: str | None = None
    description: str | None = None
    is_approved: bool | None = None
    requested_by: UUID | None = None
    approved_by: UUID | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class FoodPortion:
    """A serving option for a food with its nutrition."""

    id: UUID
    food_id: UUID
    display_name: str
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    fiber_g: float | None = None
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class FoodAddon:
    """An optional extra that adds nutrition to a portion."""

    id: UUID
    food_id: UUID
    display_name: str
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    fiber_g: float | None = None
    name: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class FoodSearchResult:
    """Search hit returned by the food search step."""

    id: UUID
    display_name: str
    category: str
    subcategory: str | None
    description: str | None


@dataclass(frozen=True)
class RecentFood:
    """A food the user logged recently."""

    food_id: UUID
    food_name: str


@dataclass(frozen=True)
class FoodOptions:
    """Portions and add-ons available for a food."""

    portions: list[FoodPortion]
    addons: list[FoodAddon]


@dataclass(frozen=True)
class TotalNutrition:
    """Nutrition of a portion plus its selected add-ons."""

    calories: float
    protein: float
    carbs: float
    fats: float
    fiber: float = 0.0
