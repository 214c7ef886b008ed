"""Drawer navigation endpoints.

Each step returns the drawer that is open afterwards so clients can render it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from macro_tracker.api.auth import get_current_user_id
from macro_tracker.api.errors import alert_on_failure
from macro_tracker.api.models import (  # noqa: TC001
    CustomFoodCreate,
    DrawerActionSelect,
    DrawerCustomFoodStart,
    DrawerFoodSelect,
    DrawerMealTypeSelect,
    DrawerOpen,
    DrawerSave,
)

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer
    from macro_tracker.domain.drawers import DrawerState

router = APIRouter(prefix="/drawer", tags=["drawer"])


def _render(state: DrawerState) -> dict[str, object]:
    return {
        "is_open": state.is_open,
        "drawer_type": state.drawer_type,
        "data": state.data,
    }


@router.get("")
async def current_drawer(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Return the open drawer."""
    container: AppContainer = request.app.state.container
    return _render(container.drawer_service.current(user_id))


@router.post("/open")
async def open_drawer(
    payload: DrawerOpen,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Open a drawer, replacing the current one."""
    container: AppContainer = request.app.state.container
    return _render(
        container.drawer_service.open_drawer(user_id, payload.drawer_type, payload.data)
    )


@router.post("/close")
async def close_drawer(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Close the open drawer."""
    container: AppContainer = request.app.state.container
    return _render(container.drawer_service.close_drawer(user_id))


@router.post("/action")
async def select_action(
    payload: DrawerActionSelect,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Pick an entry from the action menu."""
    container: AppContainer = request.app.state.container
    return _render(
        container.drawer_service.select_action(
            user_id, payload.action, payload.selected_date
        )
    )


@router.post("/meal-type")
async def select_meal_type(
    payload: DrawerMealTypeSelect,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Pick the meal type and move on to food search."""
    container: AppContainer = request.app.state.container
    return _render(
        container.drawer_service.select_meal_type(user_id, payload.meal_type)
    )


@router.post("/food")
async def select_food(
    payload: DrawerFoodSelect,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Pick a food and open its form."""
    container: AppContainer = request.app.state.container
    return _render(
        container.drawer_service.select_food(
            user_id, payload.food_id, payload.food_name
        )
    )


@router.post("/custom-food")
async def start_custom_food(
    payload: DrawerCustomFoodStart,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Switch to the custom food form."""
    container: AppContainer = request.app.state.container
    return _render(
        container.drawer_service.start_custom_food(user_id, payload.suggested_name)
    )


@router.post("/custom-food/submit")
async def submit_custom_food(
    payload: CustomFoodCreate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Create the custom food and continue to its form."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to create food. Please try again.", user_id=user_id):
        state = container.drawer_service.submit_custom_food(
            user_id,
            name=payload.name,
            calories=payload.calories,
            protein_g=payload.protein_g,
            carbs_g=payload.carbs_g,
            fats_g=payload.fats_g,
            portion_name=payload.portion_name,
        )
    return _render(state)


@router.post("/edit/{meal_food_id}")
async def start_edit(
    meal_food_id: UUID,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Open the food form for a logged food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load food item", meal_food_id=meal_food_id):
        meal_food = container.meal_service.get_meal_food(user_id, meal_food_id)
    return _render(container.drawer_service.start_edit(user_id, meal_food))


@router.post("/save")
async def save_food_form(
    payload: DrawerSave,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Save the food form and close the drawer."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save meal. Please try again.", user_id=user_id):
        meal_food = await container.drawer_service.save_food_form(
            user_id, payload.portion_id, payload.addon_ids
        )
    state = container.drawer_service.current(user_id)
    return {"meal_food": meal_food, **_render(state)}
