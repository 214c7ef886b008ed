"""Supabase repository for meals and meal foods."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.rows import parse_meal, parse_meal_food, parse_summary
from macro_tracker.domain.meals import (
    DailySummary,
    MealFood,
    MealFoodEntry,
    MealWithFoods,
)
from macro_tracker.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal logging."""

    client: Client

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[MealWithFoods]:
        """Return meals with embedded foods for a date range."""
        query = (
            self.client.table("meals")
            .select("*, meal_foods(*)")
            .eq("user_id", str(user_id))
        )
        if start == end:
            query = query.eq("meal_date", start.isoformat())
        else:
            query = query.gte("meal_date", start.isoformat()).lte(
                "meal_date", end.isoformat()
            )
        response = (
            query.order("meal_date", desc=True)
            .order("created_at", desc=False)
            .execute()
        )
        return [parse_meal(row) for row in response.data or []]

    def list_summaries(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        """Return daily summaries for a date range."""
        response = (
            self.client.table("daily_summaries")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("summary_date", start.isoformat())
            .lte("summary_date", end.isoformat())
            .execute()
        )
        return [parse_summary(row) for row in response.data or []]

    def get_meal(self, meal_id: UUID) -> MealWithFoods | None:
        """Return a meal row by id."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_meal(response.data[0])

    def create_meal(self, user_id: UUID, meal_type: str, meal_date: date) -> UUID:
        """Create a meal row and return its id."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "meal_type": meal_type,
                    "meal_date": meal_date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return UUID(response.data[0]["id"])

    def get_meal_food(self, meal_food_id: UUID) -> MealFood | None:
        """Return a meal food by id."""
        response = (
            self.client.table("meal_foods")
            .select("*")
            .eq("id", str(meal_food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_meal_food(response.data[0])

    def create_meal_food(self, meal_id: UUID, entry: MealFoodEntry) -> MealFood:
        """Create a meal food row."""
        response = (
            self.client.table("meal_foods")
            .insert(
                {
                    "meal_id": str(meal_id),
                    "food_id": str(entry.food_id),
                    "food_name": entry.food_name,
                    **_entry_payload(entry),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal food")
        return parse_meal_food(response.data[0])

    def update_meal_food(self, meal_food_id: UUID, entry: MealFoodEntry) -> MealFood:
        """Update the portion, add-ons and nutrition of a meal food."""
        response = (
            self.client.table("meal_foods")
            .update(_entry_payload(entry))
            .eq("id", str(meal_food_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal food")
        return parse_meal_food(response.data[0])

    def delete_meal_food(self, meal_food_id: UUID) -> None:
        """Delete a meal food row."""
        self.client.table("meal_foods").delete().eq("id", str(meal_food_id)).execute()

    def recalculate_daily_summary(self, user_id: UUID, day: date) -> None:
        """Call the server-side summary recalculation."""
        self.client.rpc(
            "recalculate_daily_summary",
            {"p_user_id": str(user_id), "p_date": day.isoformat()},
        ).execute()


def _entry_payload(entry: MealFoodEntry) -> dict[str, object]:
    return {
        "portion_id": str(entry.portion_id),
        "portion_display": entry.portion_display,
        "selected_addons": [str(addon) for addon in entry.selected_addons] or None,
        "addons_display": entry.addons_display or None,
        "calories": entry.nutrition.calories,
        "protein_g": entry.nutrition.protein,
        "carbs_g": entry.nutrition.carbs,
        "fats_g": entry.nutrition.fats,
        "fiber_g": entry.nutrition.fiber,
    }
