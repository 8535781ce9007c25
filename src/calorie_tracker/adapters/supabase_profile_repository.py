"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import (
    fetch_single,
    optional_float,
    optional_int,
    parse_uuid,
)
from calorie_tracker.domain.models import Profile
from calorie_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile reads."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user, if present."""
        row = fetch_single(
            self.client.table("profiles").select("*").eq("user_id", str(user_id))
        )
        if row is None:
            return None
        return Profile(
            id=parse_uuid(row["id"]),
            user_id=parse_uuid(row["user_id"]),
            email=row.get("email"),
            full_name=row.get("full_name"),
            age=optional_int(row.get("age")),
            gender=row.get("gender"),
            height_cm=optional_float(row.get("height_cm")),
            activity_level=str(row.get("activity_level") or "moderate"),
            goal_type=str(row.get("goal_type") or "maintain"),
        )
