"""Profile, weight and goal endpoints for the signed-in user."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from macro_tracker.api.auth import get_current_user_id
from macro_tracker.api.errors import alert_on_failure
from macro_tracker.api.models import (  # noqa: TC001
    GoalUpdate,
    ProfileUpdate,
    WeightLogCreate,
    WeightLogUpdate,
)

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/me", tags=["me"])

SAVE_WEIGHT_FAILED = "Failed to save weight. Please try again."


@router.get("")
async def get_profile(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Return the caller's profile."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load profile", user_id=user_id):
        profile = container.profile_service.get_profile(user_id)
    return {"profile": profile, "is_admin": profile.is_admin}


@router.patch("")
async def update_profile(
    payload: ProfileUpdate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Update body metrics."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save profile. Please try again.", user_id=user_id):
        profile = await container.profile_service.update_profile(
            user_id,
            height_cm=payload.height_cm,
            age=payload.age,
            activity_level=payload.activity_level,
        )
    return {"profile": profile}


@router.get("/overview")
async def overview(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Return the profile screen: metrics, weights, goal and weight change."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load profile", user_id=user_id):
        data = await container.overview_service.get_overview(user_id)
    return {
        "profile": data.profile,
        "weight_logs": data.weight_logs,
        "current_goal": data.current_goal,
        "weight_change": data.weight_change,
    }


@router.get("/weights")
async def list_weights(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Return recent weight entries."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load weights", user_id=user_id):
        logs = container.weight_service.list_recent(user_id)
    return {"weight_logs": logs}


@router.post("/weights", status_code=status.HTTP_201_CREATED)
async def log_weight(
    payload: WeightLogCreate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Record today's weight, or the given day's."""
    container: AppContainer = request.app.state.container
    with alert_on_failure(SAVE_WEIGHT_FAILED, user_id=user_id):
        entry = await container.weight_service.log_weight(
            user_id, payload.weight_kg, payload.log_date, payload.notes
        )
    return {"weight_log": entry}


@router.put("/weights/{weight_log_id}")
async def update_weight(
    weight_log_id: UUID,
    payload: WeightLogUpdate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Edit a weight entry."""
    container: AppContainer = request.app.state.container
    with alert_on_failure(SAVE_WEIGHT_FAILED, weight_log_id=weight_log_id):
        entry = await container.weight_service.update_weight(
            user_id, weight_log_id, payload.weight_kg, payload.log_date, payload.notes
        )
    return {"weight_log": entry}


@router.delete("/weights/{weight_log_id}")
async def delete_weight(
    weight_log_id: UUID,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, str]:
    """Delete a weight entry."""
    container: AppContainer = request.app.state.container
    with alert_on_failure(
        "Failed to delete weight entry", weight_log_id=weight_log_id
    ):
        await container.weight_service.delete_weight(user_id, weight_log_id)
    return {"status": "ok"}


@router.get("/goals")
async def current_goal(
    request: Request, user_id: UUID = Depends(get_current_user_id)
) -> dict[str, object]:
    """Return the goal in effect today."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load goals", user_id=user_id):
        goal = container.goal_service.get_active_goal(user_id)
    return {"goal": goal}


@router.put("/goals")
async def save_goal(
    payload: GoalUpdate,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> dict[str, object]:
    """Update the current goal or start a new one today."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save goals. Please try again.", user_id=user_id):
        goal = await container.goal_service.save_goal(
            user_id,
            daily_calorie=payload.daily_calorie,
            daily_protein_g=payload.daily_protein_g,
            daily_carbs_g=payload.daily_carbs_g,
            daily_fats_g=payload.daily_fats_g,
            daily_fiber_g=payload.daily_fiber_g,
            goal_id=payload.goal_id,
        )
    return {"goal": goal}
