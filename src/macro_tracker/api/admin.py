"""Admin endpoints for curating the shared food catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from macro_tracker.api.auth import require_admin
from macro_tracker.api.errors import alert_on_failure
from macro_tracker.api.models import (  # noqa: TC001
    AddonPayload,
    FoodPayload,
    PortionPayload,
)
from macro_tracker.services.admin import ApprovalFilter

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/foods", dependencies=[Depends(require_admin)])
async def list_foods(
    request: Request,
    category: str | None = None,
    approval: ApprovalFilter = ApprovalFilter.ALL,
) -> dict[str, object]:
    """Return foods newest first."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load foods", category=category):
        foods = container.admin_service.list_foods(category, approval)
    return {"foods": foods}


@router.post(
    "/foods",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def create_food(payload: FoodPayload, request: Request) -> dict[str, object]:
    """Create a catalog food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save food"):
        food = container.admin_service.save_food(_fields(payload))
    return {"food": food}


@router.get("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def get_food(food_id: UUID, request: Request) -> dict[str, object]:
    """Return a food with its portions and add-ons."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load food", food_id=food_id):
        food = container.admin_service.get_food(food_id)
        portions = container.admin_service.list_portions(food_id)
        addons = container.admin_service.list_addons(food_id)
    return {"food": food, "portions": portions, "addons": addons}


@router.patch("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def update_food(
    food_id: UUID, payload: FoodPayload, request: Request
) -> dict[str, object]:
    """Update a catalog food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save food", food_id=food_id):
        food = container.admin_service.save_food(_fields(payload), food_id)
    return {"food": food}


@router.post("/foods/{food_id}/approve")
async def approve_food(
    food_id: UUID, request: Request, admin_id: UUID = Depends(require_admin)
) -> dict[str, object]:
    """Approve a pending food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to approve food", food_id=food_id):
        food = container.admin_service.approve_food(food_id, admin_id)
    return {"food": food}


@router.delete("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def delete_food(food_id: UUID, request: Request) -> dict[str, str]:
    """Delete a food with its portions and add-ons."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to delete food", food_id=food_id):
        container.admin_service.delete_food(food_id)
    return {"status": "ok"}


@router.get("/foods/{food_id}/portions", dependencies=[Depends(require_admin)])
async def list_portions(food_id: UUID, request: Request) -> dict[str, object]:
    """Return a food's portions."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load portions", food_id=food_id):
        portions = container.admin_service.list_portions(food_id)
    return {"portions": portions}


@router.post(
    "/foods/{food_id}/portions",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def create_portion(
    food_id: UUID, payload: PortionPayload, request: Request
) -> dict[str, object]:
    """Add a portion to a food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save portion", food_id=food_id):
        portion = container.admin_service.save_portion(food_id, _fields(payload))
    return {"portion": portion}


@router.patch(
    "/foods/{food_id}/portions/{portion_id}", dependencies=[Depends(require_admin)]
)
async def update_portion(
    food_id: UUID, portion_id: UUID, payload: PortionPayload, request: Request
) -> dict[str, object]:
    """Update a portion."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save portion", portion_id=portion_id):
        portion = container.admin_service.save_portion(
            food_id, _fields(payload), portion_id
        )
    return {"portion": portion}


@router.delete(
    "/foods/{food_id}/portions/{portion_id}", dependencies=[Depends(require_admin)]
)
async def delete_portion(
    food_id: UUID, portion_id: UUID, request: Request
) -> dict[str, str]:
    """Delete a portion."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to delete portion", portion_id=portion_id):
        container.admin_service.delete_portion(food_id, portion_id)
    return {"status": "ok"}


@router.get("/foods/{food_id}/addons", dependencies=[Depends(require_admin)])
async def list_addons(food_id: UUID, request: Request) -> dict[str, object]:
    """Return a food's add-ons."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to load addons", food_id=food_id):
        addons = container.admin_service.list_addons(food_id)
    return {"addons": addons}


@router.post(
    "/foods/{food_id}/addons",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def create_addon(
    food_id: UUID, payload: AddonPayload, request: Request
) -> dict[str, object]:
    """Add an add-on to a food."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save addon", food_id=food_id):
        addon = container.admin_service.save_addon(food_id, _fields(payload))
    return {"addon": addon}


@router.patch(
    "/foods/{food_id}/addons/{addon_id}", dependencies=[Depends(require_admin)]
)
async def update_addon(
    food_id: UUID, addon_id: UUID, payload: AddonPayload, request: Request
) -> dict[str, object]:
    """Update an add-on."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to save addon", addon_id=addon_id):
        addon = container.admin_service.save_addon(
            food_id, _fields(payload), addon_id
        )
    return {"addon": addon}


@router.delete(
    "/foods/{food_id}/addons/{addon_id}", dependencies=[Depends(require_admin)]
)
async def delete_addon(
    food_id: UUID, addon_id: UUID, request: Request
) -> dict[str, str]:
    """Delete an add-on."""
    container: AppContainer = request.app.state.container
    with alert_on_failure("Failed to delete addon", addon_id=addon_id):
        container.admin_service.delete_addon(food_id, addon_id)
    return {"status": "ok"}


def _fields(payload: FoodPayload | PortionPayload | AddonPayload) -> dict[str, object]:
    """Return only the fields the client sent."""
    return payload.model_dump(exclude_unset=True)
