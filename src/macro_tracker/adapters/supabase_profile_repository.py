"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.rows import parse_profile
from macro_tracker.domain.models import Profile
from macro_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_profile(response.data[0])

    def update_profile(self, user_id: UUID, updates: dict[str, object]) -> Profile:
        """Apply partial updates to the profile row."""
        response = (
            self.client.table("profiles")
            .update(updates)
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile")
        return parse_profile(response.data[0])

    def ping(self) -> None:
        """Run a trivial count read to prove the connection works."""
        self.client.table("profiles").select("count").limit(1).execute()
