"""Domain models for nutrition goals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class UserGoal:
    """Effective-dated daily nutrition targets."""

    id: UUID
    user_id: UUID
    daily_calorie: int
    daily_protein_g: float
    daily_carbs_g: float
    daily_fats_g: float
    daily_fiber_g: float
    start_date: date
    end_date: date | None = None
    is_active: bool | None = True
    set_by: str = "self"
    set_by_user_id: UUID | None = None
    reason: str | None = None

    def is_effective_on(self, day: date) -> bool:
        """Return True when the goal applies to the given day."""
        if not self.is_active or self.start_date > day:
            return False
        return self.end_date is None or self.end_date >= day
