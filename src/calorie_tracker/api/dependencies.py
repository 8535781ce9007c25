"""Request dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Header, HTTPException, Request, status

from calorie_tracker.domain.models import AuthSession

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.errors import TrackerError


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def require_session(
    request: Request, authorization: str | None = Header(default=None)
) -> AuthSession:
    """Resolve the caller's session from a bearer token or reject with 401."""
    container = get_container(request)
    session = container.auth_service.resolve_session(_bearer_token(authorization))
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=notification("Not signed in", "Please sign in to continue."),
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


def resolve_timezone(request: Request, tz: str | None = None) -> str:
    """Return the requested IANA timezone or the configured default."""
    timezone_name = tz or get_container(request).settings.default_timezone
    if not _is_valid_timezone(timezone_name):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=notification("Unknown timezone", timezone_name),
        )
    return timezone_name


def notification(title: str, description: str) -> dict[str, str]:
    """Build a user-facing notification payload."""
    return {"title": title, "description": description}


def collaborator_failure(
    title: str, exc: TrackerError, status_code: int = status.HTTP_502_BAD_GATEWAY
) -> HTTPException:
    """Turn a data store or auth failure into a dismissible notification."""
    return HTTPException(
        status_code=status_code, detail=notification(title, exc.message)
    )


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
