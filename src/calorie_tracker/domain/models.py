"""Domain models for users and sessions."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Profile:
    """Represents a user profile stored in the database."""

    id: UUID
    user_id: UUID
    email: str | None
    full_name: str | None
    age: int | None
    gender: str | None
    height_cm: float | None
    activity_level: str
    goal_type: str


@dataclass(frozen=True)
class AuthSession:
    """Authenticated session passed to every user-scoped operation."""

    user_id: UUID
    email: str | None
    access_token: str
    refresh_token: str | None = None


@dataclass(frozen=True)
class SignUpResult:
    """Outcome of a sign-up request."""

    user_id: UUID
    email: str | None
    confirmation_required: bool
