"""Domain models for drawer navigation."""

from dataclasses import dataclass, field
from enum import StrEnum


class DrawerType(StrEnum):
    """Overlay panels used for single data-entry steps."""

    ACTION_MENU = "action-menu"
    MEAL_TYPE = "meal-type"
    FOOD_SEARCH = "food-search"
    FOOD_FORM = "food-form"
    CUSTOM_FOOD_FORM = "custom-food-form"
    WEIGHT_FORM = "weight-form"
    PROFILE_FORM = "profile-form"
    GOALS_FORM = "goals-form"


@dataclass(frozen=True)
class DrawerState:
    """The drawer currently open for a user, with the data it carries."""

    drawer_type: DrawerType | None = None
    data: dict[str, object] = field(default_factory=dict)

    @property
    def is_open(self) -> bool:
        """Return True when a drawer is open."""
        return self.drawer_type is not None
