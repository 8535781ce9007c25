"""Dashboard, goal and food logging endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from calorie_tracker.api.dependencies import (
    collaborator_failure,
    get_container,
    notification,
    require_session,
    resolve_timezone,
)
from calorie_tracker.api.serializers import (
    serialize_food_log,
    serialize_goal,
    serialize_summary,
)
from calorie_tracker.domain.forms import FoodLogForm, GoalForm
from calorie_tracker.domain.models import AuthSession
from calorie_tracker.errors import GoalNotFoundError, PersistenceError

router = APIRouter(tags=["nutrition"])

_logger = logging.getLogger(__name__)


@router.get("/dashboard")
async def dashboard(
    request: Request,
    session: AuthSession = Depends(require_session),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return today's consumed totals, remaining amounts and progress."""
    container = get_container(request)
    try:
        summary = await container.dashboard_service.get_today(session, timezone_name)
    except PersistenceError as exc:
        _logger.exception(
            "Error fetching user data", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error loading data", exc) from exc
    return serialize_summary(summary)


@router.put("/goals")
async def update_goals(
    form: GoalForm,
    request: Request,
    session: AuthSession = Depends(require_session),
) -> dict[str, object]:
    """Replace the targets of the active daily goal."""
    container = get_container(request)
    try:
        goal = await container.dashboard_service.update_goals(session, form)
    except GoalNotFoundError as exc:
        raise collaborator_failure(
            "Error updating goals", exc, status.HTTP_404_NOT_FOUND
        ) from exc
    except PersistenceError as exc:
        _logger.exception(
            "Error updating goals", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error updating goals", exc) from exc
    return {
        "goal": serialize_goal(goal),
        "notification": notification(
            "Goals updated!", "Your daily nutrition goals have been saved."
        ),
    }


@router.post("/food-logs", status_code=status.HTTP_201_CREATED)
async def add_food_log(
    form: FoodLogForm,
    request: Request,
    session: AuthSession = Depends(require_session),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Log a food entry and return the updated day summary."""
    return await _log_food(request, session, form, timezone_name)


@router.get("/foods")
def search_foods(request: Request, q: str | None = None) -> dict[str, object]:
    """Search the built-in food catalog."""
    container = get_container(request)
    foods = container.food_catalog.search(q)
    message = None
    if not foods and q:
        message = f'No foods found matching "{q}"'
    return {
        "foods": [
            {
                "name": food.name,
                "calories": food.calories,
                "protein": food.protein,
                "carbs": food.carbs,
                "fat": food.fat,
                "serving": food.serving,
            }
            for food in foods
        ],
        "message": message,
    }


@router.post("/foods/{name}/log", status_code=status.HTTP_201_CREATED)
async def log_catalog_food(
    name: str,
    request: Request,
    meal_type: str | None = None,
    session: AuthSession = Depends(require_session),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Log a food picked from the catalog."""
    container = get_container(request)
    food = container.food_catalog.get(name)
    if food is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=notification("Food not found", name),
        )
    form = container.food_catalog.to_form(food, meal_type=meal_type)
    return await _log_food(request, session, form, timezone_name)


async def _log_food(
    request: Request, session: AuthSession, form: FoodLogForm, timezone_name: str
) -> dict[str, object]:
    container = get_container(request)
    try:
        entry, summary = await container.dashboard_service.add_food_log(
            session, form, timezone_name
        )
    except PersistenceError as exc:
        _logger.exception(
            "Error adding food log", extra={"user_id": str(session.user_id)}
        )
        raise collaborator_failure("Error logging food", exc) from exc
    return {
        "entry": serialize_food_log(entry),
        "summary": serialize_summary(summary),
        "notification": notification(
            "Food logged!", f"Added {entry.food_name} to your diary."
        ),
    }
