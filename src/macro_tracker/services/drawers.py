"""Drawer navigation for multi-step data entry.

Each user has at most one open drawer. Logging a meal chains
action menu -> meal type -> food search -> (custom food) -> food form,
with every step carrying the data gathered so far into the next drawer.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from macro_tracker.domain.drawers import DrawerState, DrawerType
from macro_tracker.domain.errors import InvalidInputError, InvalidTransitionError
from macro_tracker.domain.meals import MEAL_ORDER, MealFood
from macro_tracker.services.dates import utc_today
from macro_tracker.services.foods import FoodService
from macro_tracker.services.meals import MealService

logger = logging.getLogger(__name__)

ACTIONS = (DrawerType.MEAL_TYPE, DrawerType.WEIGHT_FORM)


@dataclass
class DrawerService:
    """Per-user drawer state machine."""

    food_service: FoodService
    meal_service: MealService
    _states: dict[UUID, DrawerState] = field(default_factory=dict)

    def current(self, user_id: UUID) -> DrawerState:
        """Return the user's open drawer, or the closed state."""
        state = self._states.get(user_id)
        return state if state is not None else DrawerState()

    def open_drawer(
        self,
        user_id: UUID,
        drawer_type: DrawerType,
        data: dict[str, object] | None = None,
    ) -> DrawerState:
        """Replace whatever is open with the given drawer."""
        state = DrawerState(drawer_type=drawer_type, data=dict(data or {}))
        self._states[user_id] = state
        return state

    def close_drawer(self, user_id: UUID) -> DrawerState:
        """Close the open drawer and drop its data."""
        self._states.pop(user_id, None)
        return DrawerState()

    def select_action(
        self,
        user_id: UUID,
        action: DrawerType,
        selected_date: date | None = None,
    ) -> DrawerState:
        """Pick an entry from the action menu."""
        self._expect(user_id, DrawerType.ACTION_MENU)
        if action not in ACTIONS:
            raise InvalidInputError(f"Unknown action: {action}")
        if action == DrawerType.MEAL_TYPE and selected_date is not None:
            return self.open_drawer(
                user_id, action, {"target_date": selected_date.isoformat()}
            )
        return self.open_drawer(user_id, action)

    def select_meal_type(self, user_id: UUID, meal_type: str) -> DrawerState:
        """Pick breakfast, lunch, dinner or snack and move on to food search."""
        state = self._expect(user_id, DrawerType.MEAL_TYPE)
        if meal_type not in MEAL_ORDER:
            raise InvalidInputError(f"Unknown meal type: {meal_type}")
        target_date = state.data.get("target_date") or utc_today().isoformat()
        return self.open_drawer(
            user_id,
            DrawerType.FOOD_SEARCH,
            {"meal_type": meal_type, "target_date": target_date},
        )

    def select_food(self, user_id: UUID, food_id: UUID, food_name: str) -> DrawerState:
        """Pick a search result or recent food and open the food form."""
        state = self._expect(user_id, DrawerType.FOOD_SEARCH)
        return self.open_drawer(
            user_id,
            DrawerType.FOOD_FORM,
            {**state.data, "food_id": str(food_id), "food_name": food_name},
        )

    def start_custom_food(self, user_id: UUID, suggested_name: str = "") -> DrawerState:
        """Leave search for the custom food form, prefilled with the query."""
        state = self._expect(user_id, DrawerType.FOOD_SEARCH)
        return self.open_drawer(
            user_id,
            DrawerType.CUSTOM_FOOD_FORM,
            {**state.data, "suggested_name": suggested_name},
        )

    def submit_custom_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        calories: int,
        protein_g: float = 0.0,
        carbs_g: float = 0.0,
        fats_g: float = 0.0,
        portion_name: str | None = None,
    ) -> DrawerState:
        """Create the custom food and continue to its food form."""
        state = self._expect(user_id, DrawerType.CUSTOM_FOOD_FORM)
        food = self.food_service.create_custom_food(
            user_id,
            name=name,
            calories=calories,
            protein_g=protein_g,
            carbs_g=carbs_g,
            fats_g=fats_g,
            portion_name=portion_name,
        )
        data = dict(state.data)
        data.pop("suggested_name", None)
        return self.open_drawer(
            user_id,
            DrawerType.FOOD_FORM,
            {**data, "food_id": str(food.id), "food_name": food.display_name},
        )

    def start_edit(self, user_id: UUID, meal_food: MealFood) -> DrawerState:
        """Open the food form to change a logged food."""
        return self.open_drawer(
            user_id,
            DrawerType.FOOD_FORM,
            {
                "is_edit": True,
                "meal_food_id": str(meal_food.id),
                "food_id": str(meal_food.food_id) if meal_food.food_id else None,
                "food_name": meal_food.food_name,
                "portion_id": str(meal_food.portion_id)
                if meal_food.portion_id
                else None,
                "selected_addons": [str(addon) for addon in meal_food.selected_addons],
            },
        )

    async def save_food_form(
        self, user_id: UUID, portion_id: UUID, addon_ids: list[UUID]
    ) -> MealFood:
        """Save the chosen portion and add-ons, then close the drawer."""
        state = self._expect(user_id, DrawerType.FOOD_FORM)
        data = state.data
        if data.get("is_edit"):
            meal_food = await self.meal_service.update_meal_food(
                user_id,
                _require_uuid(data, "meal_food_id"),
                portion_id,
                addon_ids,
            )
        else:
            target_date = data.get("target_date")
            meal_food = await self.meal_service.add_meal_food(
                user_id,
                food_id=_require_uuid(data, "food_id"),
                food_name=str(data.get("food_name") or ""),
                portion_id=portion_id,
                addon_ids=addon_ids,
                meal_type=_optional_str(data.get("meal_type")),
                meal_date=date.fromisoformat(target_date)
                if isinstance(target_date, str)
                else None,
                meal_id=_optional_uuid(data.get("meal_id")),
            )
        self.close_drawer(user_id)
        return meal_food

    def _expect(self, user_id: UUID, drawer_type: DrawerType) -> DrawerState:
        state = self.current(user_id)
        if state.drawer_type != drawer_type:
            logger.info(
                "Rejected drawer step",
                extra={
                    "user_id": str(user_id),
                    "expected": drawer_type.value,
                    "current": state.drawer_type.value if state.drawer_type else None,
                },
            )
            raise InvalidTransitionError(
                f"Expected {drawer_type.value} drawer, "
                f"found {state.drawer_type.value if state.drawer_type else 'none'}"
            )
        return state


def _require_uuid(data: dict[str, object], key: str) -> UUID:
    value = _optional_uuid(data.get(key))
    if value is None:
        raise InvalidInputError(f"Missing {key}")
    return value


def _optional_uuid(value: object) -> UUID | None:
    if isinstance(value, UUID):
        return value
    if isinstance(value, str) and value:
        try:
            return UUID(value)
        except ValueError:
            return None
    return None


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) and value else None
