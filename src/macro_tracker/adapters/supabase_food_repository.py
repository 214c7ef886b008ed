"""Supabase repository for food lookups while logging."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.rows import (
    parse_addon,
    parse_food,
    parse_portion,
    parse_search_result,
    parse_uuid,
)
from macro_tracker.domain.foods import Food, FoodAddon, FoodPortion, FoodSearchResult
from macro_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food search and custom foods."""

    client: Client

    def search_foods(self, query: str, limit: int) -> list[FoodSearchResult]:
        """Return foods whose display name contains the query."""
        response = (
            self.client.table("foods")
            .select("id, display_name, category, subcategory, description")
            .ilike("display_name", f"%{query}%")
            .order("display_name")
            .limit(limit)
            .execute()
        )
        return [parse_search_result(row) for row in response.data or []]

    def list_logged_foods(
        self, user_id: UUID, limit: int
    ) -> list[tuple[UUID | None, str]]:
        """Return food ids and names of the user's latest meal foods."""
        response = (
            self.client.table("meal_foods")
            .select("food_id, food_name, created_at, meals!inner(user_id)")
            .eq("meals.user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [
            (parse_uuid(row.get("food_id")), str(row.get("food_name", "")))
            for row in response.data or []
        ]

    def list_portions(self, food_id: UUID) -> list[FoodPortion]:
        """Return portions ordered by calories."""
        response = (
            self.client.table("food_portions")
            .select("*")
            .eq("food_id", str(food_id))
            .order("calories")
            .execute()
        )
        return [parse_portion(row) for row in response.data or []]

    def list_addons(self, food_id: UUID) -> list[FoodAddon]:
        """Return add-ons ordered by display name."""
        response = (
            self.client.table("food_addons")
            .select("*")
            .eq("food_id", str(food_id))
            .order("display_name")
            .execute()
        )
        return [parse_addon(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food row and return it."""
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return parse_food(response.data[0])

    def create_portion(self, food_id: UUID, payload: dict[str, object]) -> FoodPortion:
        """Create a portion row and return it."""
        response = (
            self.client.table("food_portions")
            .insert({"food_id": str(food_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food portion")
        return parse_portion(response.data[0])
