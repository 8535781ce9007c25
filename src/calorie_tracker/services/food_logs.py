"""Food logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_tracker.domain.forms import FoodLogForm
from calorie_tracker.domain.models import AuthSession
from calorie_tracker.domain.nutrition import FoodLogEntry

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_food_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> FoodLogEntry:
        """Insert a food log row and return it."""

    def list_food_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food logs in [start, end), newest first."""


@dataclass
class FoodLogService:
    """Service that validates and persists food log entries."""

    repository: FoodLogRepository

    def add_food_log(self, session: AuthSession, form: FoodLogForm) -> FoodLogEntry:
        """Insert one food entry for the signed-in user."""
        entry = self.repository.create_food_log(session.user_id, form.to_payload())
        _logger.info(
            "Food logged: %s (%s kcal)",
            entry.food_name,
            entry.calories,
            extra={"user_id": str(session.user_id)},
        )
        return entry

    def list_between(
        self, session: AuthSession, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return the user's food logs within a UTC time range."""
        return self.repository.list_food_logs(session.user_id, start, end)


def day_window(
    timezone_name: str, now: datetime | None = None
) -> tuple[date, datetime, datetime]:
    """Return the local calendar day and its UTC [start, end) bounds."""
    tz = ZoneInfo(timezone_name)
    current = (now or datetime.now(tz=UTC)).astimezone(tz)
    start = current.replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1)
    return start.date(), start.astimezone(UTC), end.astimezone(UTC)
