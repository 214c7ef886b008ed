"""Profile screen data: body metrics, weights and current goal."""

import asyncio
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from macro_tracker.domain.goals import UserGoal
from macro_tracker.domain.models import Profile, WeightLog
from macro_tracker.services.cache import Cache
from macro_tracker.services.dates import utc_today
from macro_tracker.services.goals import GoalService
from macro_tracker.services.profiles import ProfileService
from macro_tracker.services.refresh import RefreshBus, RefreshEvent
from macro_tracker.services.weights import WeightService, weight_change

_INVALIDATING_EVENTS = (RefreshEvent.WEIGHT, RefreshEvent.GOALS, RefreshEvent.PROFILE)


@dataclass(frozen=True)
class ProfileOverview:
    """Aggregated profile view."""

    profile: Profile
    weight_logs: list[WeightLog]
    current_goal: UserGoal | None
    weight_change: float | None


@dataclass
class ProfileOverviewService:
    """Builds the profile view and keeps it until weight, goals or profile change."""

    profile_service: ProfileService
    weight_service: WeightService
    goal_service: GoalService
    refresh_bus: RefreshBus
    cache: Cache
    cache_ttl_seconds: int = 300
    _generations: dict[UUID, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for event in _INVALIDATING_EVENTS:
            self.refresh_bus.subscribe(event, self._invalidate)

    def close(self) -> None:
        """Detach cache invalidation from the refresh bus."""
        for event in _INVALIDATING_EVENTS:
            self.refresh_bus.unsubscribe(event, self._invalidate)

    async def get_overview(
        self, user_id: UUID, today: date | None = None
    ) -> ProfileOverview:
        """Return the cached overview or fetch its parts together."""
        day = today or utc_today()
        key = f"overview:{user_id}:{day.isoformat()}"
        cached = self.cache.get(key)
        if isinstance(cached, ProfileOverview):
            return cached
        generation = self._generations.get(user_id, 0)
        profile, logs, goal = await asyncio.gather(
            asyncio.to_thread(self.profile_service.get_profile, user_id),
            asyncio.to_thread(self.weight_service.list_recent, user_id),
            asyncio.to_thread(self.goal_service.get_active_goal, user_id, day),
        )
        overview = ProfileOverview(
            profile=profile,
            weight_logs=logs,
            current_goal=goal,
            weight_change=weight_change(logs),
        )
        if self._generations.get(user_id, 0) == generation:
            self.cache.set(key, overview, self.cache_ttl_seconds)
        return overview

    def _invalidate(self, user_id: UUID) -> None:
        self._generations[user_id] = self._generations.get(user_id, 0) + 1
        self.cache.delete_prefix(f"overview:{user_id}:")
