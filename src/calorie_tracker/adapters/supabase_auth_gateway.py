"""Supabase Auth gateway."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client, ClientOptions, create_client

from calorie_tracker.domain.models import AuthSession, SignUpResult
from calorie_tracker.errors import AuthenticationError
from calorie_tracker.services.auth import AuthGateway

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Supabase Auth implementation.

    Credential exchanges run on a fresh client that never persists its
    session, so the shared data client keeps its service credentials.
    """

    client: Client
    client_factory: Callable[[], Client]

    @classmethod
    def create(cls, client: Client, url: str, anon_key: str) -> "SupabaseAuthGateway":
        """Create a gateway that opens throwaway clients with the anon key."""

        def client_factory() -> Client:
            return create_client(
                url,
                anon_key,
                options=ClientOptions(persist_session=False, auto_refresh_token=False),
            )

        return cls(client=client, client_factory=client_factory)

    def sign_up(self, email: str, password: str, full_name: str | None) -> SignUpResult:
        """Register an account with the full name stored as user metadata."""
        try:
            response = self.client_factory().auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"full_name": full_name}},
                }
            )
        except AuthError as exc:
            raise AuthenticationError(exc.message) from exc
        if response.user is None:
            raise AuthenticationError("Sign up failed")
        return SignUpResult(
            user_id=UUID(str(response.user.id)),
            email=response.user.email,
            confirmation_required=response.session is None,
        )

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange email and password for a session."""
        try:
            response = self.client_factory().auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(exc.message) from exc
        if response.user is None or response.session is None:
            raise AuthenticationError("Invalid login credentials")
        return AuthSession(
            user_id=UUID(str(response.user.id)),
            email=response.user.email,
            access_token=response.session.access_token,
            refresh_token=response.session.refresh_token,
        )

    def sign_out(self, access_token: str) -> None:
        """Revoke every refresh token issued for the session's user."""
        try:
            self.client.auth.admin.sign_out(access_token)
        except AuthError as exc:
            raise AuthenticationError(exc.message) from exc

    def get_session(self, access_token: str) -> AuthSession | None:
        """Return the session for an access token; invalid tokens are absent."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc.message)
            return None
        if response is None or response.user is None:
            return None
        return AuthSession(
            user_id=UUID(str(response.user.id)),
            email=response.user.email,
            access_token=access_token,
        )
