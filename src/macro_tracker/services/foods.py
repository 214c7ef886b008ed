"""Food lookup services used while logging meals."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import InvalidInputError
from macro_tracker.domain.foods import (
    CUSTOM_CATEGORY,
    Food,
    FoodAddon,
    FoodOptions,
    FoodPortion,
    FoodSearchResult,
    RecentFood,
    TotalNutrition,
)

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
RECENT_SCAN_LIMIT = 50
MAX_CUSTOM_CALORIES = 5000
DEFAULT_PORTION_NAME = "1 serving"


class FoodRepository(Protocol):
    """Persistence interface for food lookups."""

    def search_foods(self, query: str, limit: int) -> list[FoodSearchResult]:
        """Return foods whose display name contains the query."""

    def list_logged_foods(
        self, user_id: UUID, limit: int
    ) -> list[tuple[UUID | None, str]]:
        """Return (food_id, food_name) for the user's latest meal foods."""

    def list_portions(self, food_id: UUID) -> list[FoodPortion]:
        """Return portions for a food ordered by calories."""

    def list_addons(self, food_id: UUID) -> list[FoodAddon]:
        """Return add-ons for a food ordered by display name."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food row and return it."""

    def create_portion(self, food_id: UUID, payload: dict[str, object]) -> FoodPortion:
        """Create a portion row and return it."""


@dataclass
class FoodService:
    """Application service for searching and creating foods."""

    repository: FoodRepository
    search_limit: int = 50
    recent_limit: int = 8

    def search(self, query: str | None) -> list[FoodSearchResult]:
        """Search foods by name; short queries return nothing."""
        cleaned = (query or "").strip()
        if len(cleaned) < MIN_QUERY_LENGTH:
            return []
        return self.repository.search_foods(cleaned, self.search_limit)

    def recent_foods(self, user_id: UUID) -> list[RecentFood]:
        """Return distinct recently logged foods, most recent first."""
        recent: list[RecentFood] = []
        seen: set[UUID] = set()
        for food_id, food_name in self.repository.list_logged_foods(
            user_id, RECENT_SCAN_LIMIT
        ):
            if food_id is None or food_id in seen:
                continue
            seen.add(food_id)
            recent.append(RecentFood(food_id=food_id, food_name=food_name))
        return recent[: self.recent_limit]

    async def get_options(self, food_id: UUID) -> FoodOptions:
        """Fetch portions and add-ons for a food together."""
        portions, addons = await asyncio.gather(
            asyncio.to_thread(self.repository.list_portions, food_id),
            asyncio.to_thread(self.repository.list_addons, food_id),
        )
        return FoodOptions(portions=portions, addons=addons)

    def create_custom_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        calories: int,
        protein_g: float = 0.0,
        carbs_g: float = 0.0,
        fats_g: float = 0.0,
        portion_name: str | None = None,
    ) -> Food:
        """Create an unapproved custom food with a single portion."""
        display_name = name.strip()
        if not display_name:
            raise InvalidInputError("Please enter a food name")
        if calories < 0 or calories > MAX_CUSTOM_CALORIES:
            raise InvalidInputError("Please enter valid calories (0-5000)")
        food = self.repository.create_food(
            {
                "display_name": display_name,
                "category": CUSTOM_CATEGORY,
                "is_approved": False,
                "requested_by": str(user_id),
            }
        )
        self.repository.create_portion(
            food.id,
            {
                "display_name": (portion_name or "").strip() or DEFAULT_PORTION_NAME,
                "calories": calories,
                "protein_g": protein_g,
                "carbs_g": carbs_g,
                "fats_g": fats_g,
            },
        )
        logger.info(
            "Created custom food",
            extra={"food_id": str(food.id), "user_id": str(user_id)},
        )
        return food


def calculate_total_nutrition(
    options: FoodOptions, portion_id: UUID | None, addon_ids: list[UUID]
) -> TotalNutrition:
    """Return the portion's nutrition plus each selected add-on."""
    portion = find_portion(options, portion_id)
    if portion is None:
        return TotalNutrition(calories=0, protein=0, carbs=0, fats=0)
    calories = portion.calories
    protein = portion.protein_g
    carbs = portion.carbs_g
    fats = portion.fats_g
    fiber = portion.fiber_g or 0
    for addon in selected_addons(options, addon_ids):
        calories += addon.calories
        protein += addon.protein_g
        carbs += addon.carbs_g
        fats += addon.fats_g
        fiber += addon.fiber_g or 0
    return TotalNutrition(
        calories=calories, protein=protein, carbs=carbs, fats=fats, fiber=fiber
    )


def find_portion(options: FoodOptions, portion_id: UUID | None) -> FoodPortion | None:
    """Return the portion with the given id, if offered."""
    for portion in options.portions:
        if portion.id == portion_id:
            return portion
    return None


def selected_addons(options: FoodOptions, addon_ids: list[UUID]) -> list[FoodAddon]:
    """Return offered add-ons in selection order, ignoring unknown ids."""
    by_id = {addon.id: addon for addon in options.addons}
    return [by_id[addon_id] for addon_id in addon_ids if addon_id in by_id]
