"""Authentication endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, status

from calorie_tracker.api.dependencies import (
    collaborator_failure,
    get_container,
    notification,
    require_session,
)
from calorie_tracker.domain.forms import SignInForm, SignUpForm
from calorie_tracker.domain.models import AuthSession
from calorie_tracker.errors import AuthenticationError

router = APIRouter(prefix="/auth", tags=["auth"])

_logger = logging.getLogger(__name__)


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
def sign_up(form: SignUpForm, request: Request) -> dict[str, object]:
    """Register a new account."""
    container = get_container(request)
    try:
        result = container.auth_service.sign_up(form)
    except AuthenticationError as exc:
        _logger.warning("Sign up failed: %s", exc.message)
        raise collaborator_failure(
            "Sign up failed", exc, status.HTTP_400_BAD_REQUEST
        ) from exc
    description = (
        "Please check your email to verify your account."
        if result.confirmation_required
        else "Your account is ready."
    )
    return {
        "user_id": str(result.user_id),
        "email": result.email,
        "confirmation_required": result.confirmation_required,
        "notification": notification("Success!", description),
    }


@router.post("/sign-in")
def sign_in(form: SignInForm, request: Request) -> dict[str, object]:
    """Exchange credentials for a bearer token."""
    container = get_container(request)
    try:
        session = container.auth_service.sign_in(form)
    except AuthenticationError as exc:
        _logger.warning("Sign in failed: %s", exc.message)
        raise collaborator_failure(
            "Sign in failed", exc, status.HTTP_401_UNAUTHORIZED
        ) from exc
    return {
        "user_id": str(session.user_id),
        "email": session.email,
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "token_type": "bearer",
    }


@router.post("/sign-out")
def sign_out(
    request: Request, session: AuthSession = Depends(require_session)
) -> dict[str, str]:
    """Revoke the caller's session."""
    container = get_container(request)
    try:
        container.auth_service.sign_out(session)
    except AuthenticationError as exc:
        _logger.exception(
            "Failed to sign out", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error signing out", exc) from exc
    return {"status": "ok"}
