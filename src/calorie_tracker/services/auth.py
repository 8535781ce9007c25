"""Authentication and session lifecycle."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from calorie_tracker.domain.forms import SignInForm, SignUpForm
from calorie_tracker.domain.models import AuthSession, SignUpResult

_logger = logging.getLogger(__name__)


class AuthEvent(StrEnum):
    """Session lifecycle events delivered to subscribers."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


AuthListener = Callable[[AuthEvent, AuthSession], None]


class AuthGateway(Protocol):
    """Interface to the identity provider."""

    def sign_up(self, email: str, password: str, full_name: str | None) -> SignUpResult:
        """Register a new account."""

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a session."""

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""

    def get_session(self, access_token: str) -> AuthSession | None:
        """Return the session for a valid access token."""


@dataclass
class AuthService:
    """Application service for sign-up, sign-in and sign-out.

    Sessions are never stored here. Callers resolve a session per request and
    pass it explicitly; lifecycle changes are published to subscribers.
    """

    gateway: AuthGateway
    listeners: list[AuthListener] = field(default_factory=list)

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def sign_up(self, form: SignUpForm) -> SignUpResult:
        """Create an account; the user may still need to confirm the email."""
        result = self.gateway.sign_up(form.email, form.password, form.full_name)
        _logger.info("User signed up", extra={"user_id": str(result.user_id)})
        return result

    def sign_in(self, form: SignInForm) -> AuthSession:
        """Sign in with email and password."""
        session = self.gateway.sign_in(form.email, form.password)
        self._publish(AuthEvent.SIGNED_IN, session)
        return session

    def sign_out(self, session: AuthSession) -> None:
        """Revoke the session and notify subscribers."""
        self.gateway.sign_out(session.access_token)
        self._publish(AuthEvent.SIGNED_OUT, session)

    def resolve_session(self, access_token: str | None) -> AuthSession | None:
        """Return the session for a bearer token, or None when unauthenticated."""
        if not access_token:
            return None
        return self.gateway.get_session(access_token)

    def _publish(self, event: AuthEvent, session: AuthSession) -> None:
        for listener in list(self.listeners):
            listener(event, session)
