"""Profile services."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import NotFoundError
from macro_tracker.domain.models import Profile
from macro_tracker.services.refresh import RefreshBus, RefreshEvent


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""

    def update_profile(self, user_id: UUID, updates: dict[str, object]) -> Profile:
        """Apply partial updates and return the profile."""

    def ping(self) -> None:
        """Perform a trivial read; raise when the backend is unreachable."""


@dataclass
class ProfileService:
    """Application service for profile reads and edits."""

    repository: ProfileRepository
    refresh_bus: RefreshBus

    def get_profile(self, user_id: UUID) -> Profile:
        """Return the user's profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError(f"Profile {user_id} not found")
        return profile

    def is_admin(self, user_id: UUID) -> bool:
        """Return True when the user has the admin role."""
        profile = self.repository.get_profile(user_id)
        return profile is not None and profile.is_admin

    async def update_profile(
        self,
        user_id: UUID,
        height_cm: int | None = None,
        age: int | None = None,
        activity_level: str | None = None,
    ) -> Profile:
        """Write only the provided body metrics."""
        updates: dict[str, object] = {}
        if height_cm:
            updates["height_cm"] = height_cm
        if age:
            updates["age"] = age
        if activity_level:
            updates["activity_level"] = activity_level
        if not updates:
            return self.get_profile(user_id)
        profile = self.repository.update_profile(user_id, updates)
        await self.refresh_bus.emit(RefreshEvent.PROFILE, user_id)
        return profile

    def check_health(self) -> None:
        """Raise when the backing store cannot be read."""
        self.repository.ping()
