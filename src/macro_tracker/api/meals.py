"""Dashboard and meal logging endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from macro_tracker.api.auth import get_current_user_id
from macro_tracker.api.errors import alert_on_failure
from macro_tracker.api.models import MealFoodCreate, MealFoodUpdate  # noqa: TC001
from macro_tracker.services.dates import utc_today

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(tags=["meals"])

SAVE_MEAL_FAILED = "Failed to save meal. Please try again."


@router.get("/today")
async def today(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Return today's grouped meals, summary and goal."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load today's data", user_id=user_id):
        data = await container.meal_service.get_today(user_id)
    return {
        "date": data.day,
        "meals": data.meals,
        "groups": data.groups,
        "summary": data.summary,
        "goal": data.goal,
    }


@router.get("/meals")
async def meals_for_day(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Return meals and the summary for one day."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load meals", user_id=user_id):
        if day is None:
            current = utc_today()
            loaded = await container.meal_service.prefetch_range(user_id, current)
            meal_day = loaded[current]
        else:
            meal_day = await container.meal_service.get_day(user_id, day)
    return {"date": meal_day.day, "meals": meal_day.meals, "summary": meal_day.summary}


@router.post("/meals/prefetch")
async def prefetch_meals(
    request: Request,
    end: date | None = None,
    days: int | None = Query(default=None, ge=1, le=31),
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Warm the per-day cache for a window of days ending at `end`."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load meals", user_id=user_id):
        loaded = await container.meal_service.prefetch_range(user_id, end, days)
    return {"days": sorted(day.isoformat() for day in loaded)}


@router.post("/meal-foods", status_code=status.HTTP_201_CREATED)
async def add_meal_food(
    payload: MealFoodCreate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Log a food into a meal."""
    container: AppContainer = request.app.state.container
    with alert_on_failure(SAVE_MEAL_FAILED, user_id=user_id):
        meal_food = await container.meal_service.add_meal_food(
            user_id,
            food_id=payload.food_id,
            food_name=payload.food_name,
            portion_id=payload.portion_id,
            addon_ids=payload.addon_ids,
            meal_type=payload.meal_type,
            meal_date=payload.meal_date,
            meal_id=payload.meal_id,
        )
    return {"meal_food": meal_food}


@router.patch("/meal-foods/{meal_food_id}")
async def update_meal_food(
    meal_food_id: UUID,
    payload: MealFoodUpdate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Change the portion and add-ons of a logged food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure(SAVE_MEAL_FAILED, meal_food_id=meal_food_id):
        meal_food = await container.meal_service.update_meal_food(
            user_id, meal_food_id, payload.portion_id, payload.addon_ids
        )
    return {"meal_food": meal_food}


@router.delete("/meal-foods/{meal_food_id}")
async def delete_meal_food(
    meal_food_id: UUID,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, str]:
    """Remove a logged food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to delete food item", meal_food_id=meal_food_id):
        await container.meal_service.delete_meal_food(user_id, meal_food_id)
    return {"status": "ok"}
