"""Nutrition goal services."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import InvalidInputError, NotFoundError
from macro_tracker.domain.goals import UserGoal
from macro_tracker.services.dates import utc_today
from macro_tracker.services.refresh import RefreshBus, RefreshEvent

SELF_SET = "self"


class GoalRepository(Protocol):
    """Persistence interface for user goals."""

    def get_active_goal(self, user_id: UUID, day: date) -> UserGoal | None:
        """Return the latest-starting active goal effective on the day."""

    def get_goal(self, goal_id: UUID) -> UserGoal | None:
        """Return a goal by id, if present."""

    def create_goal(self, payload: dict[str, object]) -> UserGoal:
        """Create a goal row and return it."""

    def update_goal(self, goal_id: UUID, payload: dict[str, object]) -> UserGoal:
        """Update a goal row and return it."""


@dataclass
class GoalService:
    """Application service for reading and setting goals."""

    repository: GoalRepository
    refresh_bus: RefreshBus

    def get_active_goal(
        self, user_id: UUID, day: date | None = None
    ) -> UserGoal | None:
        """Return the goal in effect for the user on the given day."""
        return self.repository.get_active_goal(user_id, day or utc_today())

    async def save_goal(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        daily_calorie: int | None,
        daily_protein_g: float | None,
        daily_carbs_g: float | None,
        daily_fats_g: float | None,
        daily_fiber_g: float | None = None,
        goal_id: UUID | None = None,
        today: date | None = None,
    ) -> UserGoal:
        """Update the given goal or start a new self-set goal today."""
        if (
            daily_calorie is None
            or daily_protein_g is None
            or daily_carbs_g is None
            or daily_fats_g is None
        ):
            raise InvalidInputError(
                "Please fill in all required fields (calories, protein, carbs, fats)"
            )
        targets: dict[str, object] = {
            "daily_calorie": int(daily_calorie),
            "daily_protein_g": daily_protein_g,
            "daily_carbs_g": daily_carbs_g,
            "daily_fats_g": daily_fats_g,
            "daily_fiber_g": daily_fiber_g or 0,
        }
        if goal_id is not None:
            current = self.repository.get_goal(goal_id)
            if current is None or current.user_id != user_id:
                raise NotFoundError(f"Goal {goal_id} not found")
            goal = self.repository.update_goal(goal_id, targets)
        else:
            start = today or utc_today()
            goal = self.repository.create_goal(
                {
                    **targets,
                    "user_id": str(user_id),
                    "set_by": SELF_SET,
                    "set_by_user_id": str(user_id),
                    "start_date": start.isoformat(),
                    "is_active": True,
                }
            )
        await self.refresh_bus.emit(RefreshEvent.GOALS, user_id)
        return goal
