"""Body-weight logging services."""

import math
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import InvalidInputError, NotFoundError
from macro_tracker.domain.models import WeightLog
from macro_tracker.services.dates import utc_today
from macro_tracker.services.refresh import RefreshBus, RefreshEvent

MAX_WEIGHT_KG = 500
RECENT_WEIGHT_LIMIT = 10


class WeightRepository(Protocol):
    """Persistence interface for weight logs."""

    def list_recent(self, user_id: UUID, limit: int) -> list[WeightLog]:
        """Return the latest weight logs by log date, newest first."""

    def get_weight_log(self, weight_log_id: UUID) -> WeightLog | None:
        """Return a weight log by id, if present."""

    def upsert_weight_log(
        self, user_id: UUID, log_date: date, weight_kg: float, notes: str | None
    ) -> WeightLog:
        """Insert or replace the user's entry for the day."""

    def update_weight_log(
        self, weight_log_id: UUID, log_date: date, weight_kg: float, notes: str | None
    ) -> WeightLog:
        """Update an existing weight log."""

    def delete_weight_log(self, weight_log_id: UUID) -> None:
        """Delete a weight log."""


@dataclass
class WeightService:
    """Application service for weight entries."""

    repository: WeightRepository
    refresh_bus: RefreshBus

    def list_recent(
        self, user_id: UUID, limit: int = RECENT_WEIGHT_LIMIT
    ) -> list[WeightLog]:
        """Return recent weight logs."""
        return self.repository.list_recent(user_id, limit)

    async def log_weight(
        self,
        user_id: UUID,
        weight_kg: float,
        log_date: date | None = None,
        notes: str | None = None,
    ) -> WeightLog:
        """Record the weight for a day, replacing any entry for that day."""
        _validate_weight(weight_kg)
        entry = self.repository.upsert_weight_log(
            user_id, log_date or utc_today(), weight_kg, _clean_notes(notes)
        )
        await self.refresh_bus.emit(RefreshEvent.WEIGHT, user_id)
        return entry

    async def update_weight(
        self,
        user_id: UUID,
        weight_log_id: UUID,
        weight_kg: float,
        log_date: date,
        notes: str | None = None,
    ) -> WeightLog:
        """Edit an existing weight entry."""
        _validate_weight(weight_kg)
        self._require_owned(user_id, weight_log_id)
        entry = self.repository.update_weight_log(
            weight_log_id, log_date, weight_kg, _clean_notes(notes)
        )
        await self.refresh_bus.emit(RefreshEvent.WEIGHT, user_id)
        return entry

    async def delete_weight(self, user_id: UUID, weight_log_id: UUID) -> None:
        """Delete a weight entry."""
        self._require_owned(user_id, weight_log_id)
        self.repository.delete_weight_log(weight_log_id)
        await self.refresh_bus.emit(RefreshEvent.WEIGHT, user_id)

    def _require_owned(self, user_id: UUID, weight_log_id: UUID) -> WeightLog:
        entry = self.repository.get_weight_log(weight_log_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError(f"Weight log {weight_log_id} not found")
        return entry


def weight_change(logs: list[WeightLog]) -> float | None:
    """Return latest minus previous weight, rounded to 0.1 kg."""
    if len(logs) < 2:  # noqa: PLR2004
        return None
    return round(logs[0].weight_kg - logs[1].weight_kg, 1)


def _validate_weight(weight_kg: float) -> None:
    if math.isnan(weight_kg) or weight_kg <= 0 or weight_kg > MAX_WEIGHT_KG:
        raise InvalidInputError("Please enter a valid weight between 0 and 500 kg")


def _clean_notes(notes: str | None) -> str | None:
    if notes is None:
        return None
    return notes.strip() or None
