"""Domain models for users and body-weight tracking."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class Profile:
    """Represents a user profile stored in the database."""

    id: UUID
    full_name: str
    role: str
    height_cm: int | None = None
    age: int | None = None
    weight_kg: float | None = None
    activity_level: str | None = None
    is_active: bool | None = None

    @property
    def is_admin(self) -> bool:
        """Return True when the profile may curate the food catalog."""
        return self.role == ADMIN_ROLE


@dataclass(frozen=True)
class WeightLog:
    """A single body-weight entry; at most one per user per day."""

    id: UUID
    user_id: UUID
    log_date: date
    weight_kg: float
    notes: str | None = None
