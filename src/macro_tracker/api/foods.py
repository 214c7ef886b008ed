"""Food search and custom food endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from macro_tracker.api.auth import get_current_user_id
from macro_tracker.api.errors import alert_on_failure
from macro_tracker.api.models import CustomFoodCreate  # noqa: TC001

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("/search", dependencies=[Depends(get_current_user_id)])
async def search_foods(request: Request, q: str = "") -> dict[str, object]:
    """Search the catalog by display name."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to search foods", query=q):
        results = container.food_service.search(q)
    return {"results": results}


@router.get("/recent")
async def recent_foods(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Return foods the caller logged recently."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load recent foods", user_id=user_id):
        foods = container.food_service.recent_foods(user_id)
    return {"foods": foods}


@router.get("/{food_id}/options", dependencies=[Depends(get_current_user_id)])
async def food_options(food_id: UUID, request: Request) -> dict[str, object]:
    """Return the portions and add-ons offered for a food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load food options", food_id=food_id):
        options = await container.food_service.get_options(food_id)
    return {"portions": options.portions, "addons": options.addons}


@router.post("/custom", status_code=status.HTTP_201_CREATED)
async def create_custom_food(
    payload: CustomFoodCreate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Submit a custom food for later approval."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to create food. Please try again.", user_id=user_id):
        food = container.food_service.create_custom_food(
            user_id,
            name=payload.name,
            calories=payload.calories,
            protein_g=payload.protein_g,
            carbs_g=payload.carbs_g,
            fats_g=payload.fats_g,
            portion_name=payload.portion_name,
        )
    return {"food": food}
