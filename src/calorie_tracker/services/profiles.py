"""User profile lookups."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.models import AuthSession, Profile


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if one exists."""


@dataclass
class ProfileService:
    """Application service for profile reads."""

    repository: ProfileRepository

    def get_profile(self, session: AuthSession) -> Profile | None:
        """Return the signed-in user's profile; absence is not an error."""
        return self.repository.get_profile(session.user_id)
