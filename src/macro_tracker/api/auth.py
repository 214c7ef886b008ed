"""Request authentication dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer


async def get_current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Resolve the bearer token to the caller's user id."""
    container: AppContainer = request.app.state.container
    user_id = container.auth_service.authenticate(authorization)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


async def require_admin(
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
) -> UUID:
    """Ensure the caller's profile has the admin role."""
    container: AppContainer = request.app.state.container
    if not container.profile_service.is_admin(user_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
    return user_id
