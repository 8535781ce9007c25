"""Weight and body composition endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, status

from calorie_tracker.api.dependencies import (
    collaborator_failure,
    get_container,
    notification,
    require_session,
    resolve_timezone,
)
from calorie_tracker.api.serializers import (
    serialize_body_progress,
    serialize_composition,
    serialize_measurement,
    serialize_weight_log,
    serialize_weight_progress,
)
from calorie_tracker.domain.forms import (
    BodyCompositionForm,
    BodyMeasurementForm,
    WeightLogForm,
)
from calorie_tracker.domain.models import AuthSession
from calorie_tracker.errors import PersistenceError

router = APIRouter(tags=["body"])

_logger = logging.getLogger(__name__)


@router.post("/weight-logs", status_code=status.HTTP_201_CREATED)
def log_weight(
    form: WeightLogForm,
    request: Request,
    session: AuthSession = Depends(require_session),
) -> dict[str, object]:
    """Record a body weight."""
    container = get_container(request)
    try:
        entry = container.weight_service.log_weight(session, form)
    except PersistenceError as exc:
        _logger.exception(
            "Error logging weight", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error logging weight", exc) from exc
    return {
        "entry": serialize_weight_log(entry),
        "notification": notification(
            "Weight logged!", f"Recorded {entry.weight_kg:g} kg"
        ),
    }


@router.get("/weight-logs/progress")
def weight_progress(
    request: Request,
    session: AuthSession = Depends(require_session),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return the weight chart with current value and trend."""
    container = get_container(request)
    try:
        progress = container.weight_service.get_progress(session, timezone_name)
    except PersistenceError as exc:
        _logger.exception(
            "Error fetching weight logs", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error loading weight data", exc) from exc
    return serialize_weight_progress(progress)


@router.post("/body/composition", status_code=status.HTTP_201_CREATED)
def log_composition(
    form: BodyCompositionForm,
    request: Request,
    session: AuthSession = Depends(require_session),
) -> dict[str, object]:
    """Record a body composition reading."""
    container = get_container(request)
    try:
        entry = container.body_service.log_composition(session, form)
    except PersistenceError as exc:
        _logger.exception(
            "Error logging body composition", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error logging data", exc) from exc
    return {
        "entry": serialize_composition(entry),
        "notification": notification(
            "Body composition logged!",
            "Your body composition data has been recorded.",
        ),
    }


@router.post("/body/measurements", status_code=status.HTTP_201_CREATED)
def log_measurement(
    form: BodyMeasurementForm,
    request: Request,
    session: AuthSession = Depends(require_session),
) -> dict[str, object]:
    """Record a body measurement."""
    container = get_container(request)
    try:
        entry = container.body_service.log_measurement(session, form)
    except PersistenceError as exc:
        _logger.exception(
            "Error logging measurement", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error logging measurement", exc) from exc
    return {
        "entry": serialize_measurement(entry),
        "notification": notification(
            "Measurement logged!",
            f"{form.measurement_type.value.capitalize()} measurement recorded.",
        ),
    }


@router.get("/body/progress")
async def body_progress(
    request: Request,
    session: AuthSession = Depends(require_session),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return composition and measurement charts."""
    container = get_container(request)
    try:
        progress = await container.body_service.get_progress(session, timezone_name)
    except PersistenceError as exc:
        _logger.exception(
            "Error fetching body data", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error loading body data", exc) from exc
    return serialize_body_progress(progress)
