"""Supabase repository for admin curation of the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.rows import parse_addon, parse_food, parse_portion
from macro_tracker.domain.foods import Food, FoodAddon, FoodPortion
from macro_tracker.services.admin import ApprovalFilter, CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase implementation for foods, portions and add-ons."""

    client: Client

    def list_foods(self, category: str | None, approval: ApprovalFilter) -> list[Food]:
        """Return foods newest first."""
        query = self.client.table("foods").select("*")
        if category:
            query = query.eq("category", category)
        if approval == ApprovalFilter.APPROVED:
            query = query.eq("is_approved", True)
        elif approval == ApprovalFilter.PENDING:
            query = query.or_("is_approved.eq.false,is_approved.is.null")
        response = query.order("created_at", desc=True).execute()
        return [parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food row."""
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> Food:
        """Update a food row."""
        response = (
            self.client.table("foods").update(payload).eq("id", str(food_id)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food")
        return parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food row."""
        self.client.table("foods").delete().eq("id", str(food_id)).execute()

    def list_portions(self, food_id: UUID) -> list[FoodPortion]:
        """Return portions in creation order."""
        response = (
            self.client.table("food_portions")
            .select("*")
            .eq("food_id", str(food_id))
            .order("created_at")
            .execute()
        )
        return [parse_portion(row) for row in response.data or []]

    def create_portion(self, food_id: UUID, payload: dict[str, object]) -> FoodPortion:
        """Create a portion row."""
        response = (
            self.client.table("food_portions")
            .insert({**payload, "food_id": str(food_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create portion")
        return parse_portion(response.data[0])

    def get_portion(self, portion_id: UUID) -> FoodPortion | None:
        """Return a portion by id."""
        response = (
            self.client.table("food_portions")
            .select("*")
            .eq("id", str(portion_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_portion(response.data[0])

    def update_portion(
        self, portion_id: UUID, payload: dict[str, object]
    ) -> FoodPortion:
        """Update a portion row."""
        response = (
            self.client.table("food_portions")
            .update(payload)
            .eq("id", str(portion_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update portion")
        return parse_portion(response.data[0])

    def delete_portion(self, portion_id: UUID) -> None:
        """Delete a portion row."""
        self.client.table("food_portions").delete().eq("id", str(portion_id)).execute()

    def list_addons(self, food_id: UUID) -> list[FoodAddon]:
        """Return add-ons in creation order."""
        response = (
            self.client.table("food_addons")
            .select("*")
            .eq("food_id", str(food_id))
            .order("created_at")
            .execute()
        )
        return [parse_addon(row) for row in response.data or []]

    def create_addon(self, food_id: UUID, payload: dict[str, object]) -> FoodAddon:
        """Create an add-on row."""
        response = (
            self.client.table("food_addons")
            .insert({**payload, "food_id": str(food_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create add-on")
        return parse_addon(response.data[0])

    def get_addon(self, addon_id: UUID) -> FoodAddon | None:
        """Return an add-on by id."""
        response = (
            self.client.table("food_addons")
            .select("*")
            .eq("id", str(addon_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_addon(response.data[0])

    def update_addon(self, addon_id: UUID, payload: dict[str, object]) -> FoodAddon:
        """Update an add-on row."""
        response = (
            self.client.table("food_addons")
            .update(payload)
            .eq("id", str(addon_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update add-on")
        return parse_addon(response.data[0])

    def delete_addon(self, addon_id: UUID) -> None:
        """Delete an add-on row."""
        self.client.table("food_addons").delete().eq("id", str(addon_id)).execute()
