"""Admin curation of the shared food database."""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import NotFoundError
from macro_tracker.domain.foods import Food, FoodAddon, FoodPortion

logger = logging.getLogger(__name__)


class ApprovalFilter(StrEnum):
    """Approval states the food table can be filtered by."""

    ALL = "all"
    APPROVED = "approved"
    PENDING = "pending"


class CatalogRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_foods(
        self, category: str | None, approval: ApprovalFilter
    ) -> list[Food]:
        """Return foods newest first, optionally filtered."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> Food:
        """Update a food and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food."""

    def list_portions(self, food_id: UUID) -> list[FoodPortion]:
        """Return portions for a food by creation time."""

    def create_portion(self, food_id: UUID, payload: dict[str, object]) -> FoodPortion:
        """Create a portion and return it."""

    def get_portion(self, portion_id: UUID) -> FoodPortion | None:
        """Return a portion by id, if present."""

    def update_portion(
        self, portion_id: UUID, payload: dict[str, object]
    ) -> FoodPortion:
        """Update a portion and return it."""

    def delete_portion(self, portion_id: UUID) -> None:
        """Delete a portion."""

    def list_addons(self, food_id: UUID) -> list[FoodAddon]:
        """Return add-ons for a food by creation time."""

    def create_addon(self, food_id: UUID, payload: dict[str, object]) -> FoodAddon:
        """Create an add-on and return it."""

    def get_addon(self, addon_id: UUID) -> FoodAddon | None:
        """Return an add-on by id, if present."""

    def update_addon(self, addon_id: UUID, payload: dict[str, object]) -> FoodAddon:
        """Update an add-on and return it."""

    def delete_addon(self, addon_id: UUID) -> None:
        """Delete an add-on."""


@dataclass
class AdminService:
    """Service backing the admin food editor and tables."""

    repository: CatalogRepository

    def list_foods(
        self,
        category: str | None = None,
        approval: ApprovalFilter = ApprovalFilter.ALL,
    ) -> list[Food]:
        """Return foods for the admin table."""
        return self.repository.list_foods(category or None, approval)

    def get_food(self, food_id: UUID) -> Food:
        """Return a food or raise when it does not exist."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError(f"Food {food_id} not found")
        return food

    def save_food(
        self, payload: dict[str, object], food_id: UUID | None = None
    ) -> Food:
        """Create a food, or update it when an id is given."""
        if food_id is None:
            return self.repository.create_food(payload)
        self.get_food(food_id)
        return self.repository.update_food(food_id, payload)

    def approve_food(self, food_id: UUID, admin_id: UUID) -> Food:
        """Mark a food approved by the given admin."""
        self.get_food(food_id)
        food = self.repository.update_food(
            food_id, {"is_approved": True, "approved_by": str(admin_id)}
        )
        logger.info(
            "Approved food",
            extra={"food_id": str(food_id), "admin_id": str(admin_id)},
        )
        return food

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food and, through cascades, its portions and add-ons."""
        self.get_food(food_id)
        self.repository.delete_food(food_id)

    def list_portions(self, food_id: UUID) -> list[FoodPortion]:
        """Return a food's portions."""
        return self.repository.list_portions(food_id)

    def save_portion(
        self,
        food_id: UUID,
        payload: dict[str, object],
        portion_id: UUID | None = None,
    ) -> FoodPortion:
        """Create or update a portion of a food."""
        if portion_id is None:
            self.get_food(food_id)
            return self.repository.create_portion(food_id, payload)
        self.get_portion(food_id, portion_id)
        return self.repository.update_portion(portion_id, payload)

    def get_portion(self, food_id: UUID, portion_id: UUID) -> FoodPortion:
        """Return a portion of the given food or raise when there is none."""
        portion = self.repository.get_portion(portion_id)
        if portion is None or portion.food_id != food_id:
            raise NotFoundError(f"Portion {portion_id} not found for food {food_id}")
        return portion

    def delete_portion(self, food_id: UUID, portion_id: UUID) -> None:
        """Delete a portion of a food."""
        self.get_portion(food_id, portion_id)
        self.repository.delete_portion(portion_id)

    def list_addons(self, food_id: UUID) -> list[FoodAddon]:
        """Return a food's add-ons."""
        return self.repository.list_addons(food_id)

    def save_addon(
        self,
        food_id: UUID,
        payload: dict[str, object],
        addon_id: UUID | None = None,
    ) -> FoodAddon:
        """Create or update an add-on of a food."""
        if addon_id is None:
            self.get_food(food_id)
            return self.repository.create_addon(food_id, payload)
        self.get_addon(food_id, addon_id)
        return self.repository.update_addon(addon_id, payload)

    def get_addon(self, food_id: UUID, addon_id: UUID) -> FoodAddon:
        """Return an add-on of the given food or raise when there is none."""
        addon = self.repository.get_addon(addon_id)
        if addon is None or addon.food_id != food_id:
            raise NotFoundError(f"Add-on {addon_id} not found for food {food_id}")
        return addon

    def delete_addon(self, food_id: UUID, addon_id: UUID) -> None:
        """Delete an add-on of a food."""
        self.get_addon(food_id, addon_id)
        self.repository.delete_addon(addon_id)
