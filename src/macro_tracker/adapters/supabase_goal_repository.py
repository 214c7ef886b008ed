"""Supabase repository for user goals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.rows import parse_goal
from macro_tracker.domain.goals import UserGoal
from macro_tracker.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals."""

    client: Client

    def get_active_goal(self, user_id: UUID, day: date) -> UserGoal | None:
        """Return the active goal whose date range covers the day."""
        response = (
            self.client.table("user_goals")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("is_active", True)
            .lte("start_date", day.isoformat())
            .or_(f"end_date.is.null,end_date.gte.{day.isoformat()}")
            .order("start_date", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_goal(response.data[0])

    def get_goal(self, goal_id: UUID) -> UserGoal | None:
        """Return a goal by id."""
        response = (
            self.client.table("user_goals")
            .select("*")
            .eq("id", str(goal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_goal(response.data[0])

    def create_goal(self, payload: dict[str, object]) -> UserGoal:
        """Create a goal row."""
        response = self.client.table("user_goals").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create goal")
        return parse_goal(response.data[0])

    def update_goal(self, goal_id: UUID, payload: dict[str, object]) -> UserGoal:
        """Update a goal row."""
        response = (
            self.client.table("user_goals")
            .update(payload)
            .eq("id", str(goal_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update goal")
        return parse_goal(response.data[0])
