"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.rows import parse_weight_log
from macro_tracker.domain.models import WeightLog
from macro_tracker.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def list_recent(self, user_id: UUID, limit: int) -> list[WeightLog]:
        """Return recent weight logs, newest day first."""
        response = (
            self.client.table("weight_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("log_date", desc=True)
            .limit(limit)
            .execute()
        )
        return [parse_weight_log(row) for row in response.data or []]

    def get_weight_log(self, weight_log_id: UUID) -> WeightLog | None:
        """Return a weight log by id."""
        response = (
            self.client.table("weight_logs")
            .select("*")
            .eq("id", str(weight_log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_weight_log(response.data[0])

    def upsert_weight_log(
        self, user_id: UUID, log_date: date, weight_kg: float, notes: str | None
    ) -> WeightLog:
        """Insert the day's entry or overwrite the existing one."""
        response = (
            self.client.table("weight_logs")
            .upsert(
                {
                    "user_id": str(user_id),
                    "log_date": log_date.isoformat(),
                    "weight_kg": weight_kg,
                    "notes": notes,
                },
                on_conflict="user_id,log_date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save weight log")
        return parse_weight_log(response.data[0])

    def update_weight_log(
        self, weight_log_id: UUID, log_date: date, weight_kg: float, notes: str | None
    ) -> WeightLog:
        """Update a weight log row."""
        response = (
            self.client.table("weight_logs")
            .update(
                {
                    "log_date": log_date.isoformat(),
                    "weight_kg": weight_kg,
                    "notes": notes,
                }
            )
            .eq("id", str(weight_log_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update weight log")
        return parse_weight_log(response.data[0])

    def delete_weight_log(self, weight_log_id: UUID) -> None:
        """Delete a weight log row."""
        self.client.table("weight_logs").delete().eq("id", str(weight_log_id)).execute()
