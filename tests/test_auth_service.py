"""Tests for the auth service."""

import pytest

from calorie_tracker.domain.forms import SignInForm, SignUpForm
from calorie_tracker.errors import AuthenticationError
from calorie_tracker.services.auth import AuthEvent


def test_sign_up_returns_confirmation_state(container) -> None:
    result = container.auth_service.sign_up(
        SignUpForm(email="grace@example.com", password="hopper", full_name="Grace")
    )

    assert result.email == "grace@example.com"
    assert result.confirmation_required is True


def test_sign_in_publishes_event(container, session) -> None:
    events = []
    container.auth_service.subscribe(lambda event, current: events.append(event))

    signed_in = container.auth_service.sign_in(
        SignInForm(email="ada@example.com", password="secret-password")
    )

    assert signed_in.user_id == session.user_id
    assert events == [AuthEvent.SIGNED_IN]


def test_sign_in_with_wrong_password(container, session) -> None:
    with pytest.raises(AuthenticationError, match="Invalid login credentials"):
        container.auth_service.sign_in(
            SignInForm(email="ada@example.com", password="wrong")
        )


def test_sign_out_revokes_and_notifies(container, session, auth_gateway) -> None:
    events = []
    unsubscribe = container.auth_service.subscribe(
        lambda event, current: events.append((event, current.user_id))
    )

    container.auth_service.sign_out(session)
    unsubscribe()
    container.auth_service.sign_out(session)

    assert events == [(AuthEvent.SIGNED_OUT, session.user_id)]
    assert container.auth_service.resolve_session(session.access_token) is None
    assert auth_gateway.signed_out == [session.access_token, session.access_token]


def test_resolve_session_without_token(container) -> None:
    assert container.auth_service.resolve_session(None) is None
    assert container.auth_service.resolve_session("") is None
