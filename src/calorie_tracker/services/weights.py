"""Weight logging and progress."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_tracker.domain.body import WeightLogEntry, WeightProgress
from calorie_tracker.domain.forms import WeightLogForm
from calorie_tracker.domain.models import AuthSession
from calorie_tracker.services.trends import (
    compute_trend,
    latest_value,
    to_chart_series,
    total_change,
)

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for weight logs."""

    def create_weight_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightLogEntry:
        """Insert a weight log row and return it."""

    def list_weight_logs(self, user_id: UUID) -> list[WeightLogEntry]:
        """Return all weight logs, oldest first."""


@dataclass
class WeightService:
    """Service for weight entries and their chart."""

    repository: WeightRepository

    def log_weight(self, session: AuthSession, form: WeightLogForm) -> WeightLogEntry:
        """Record a weight for the signed-in user."""
        entry = self.repository.create_weight_log(session.user_id, form.to_payload())
        _logger.info(
            "Weight logged: %s kg",
            entry.weight_kg,
            extra={"user_id": str(session.user_id)},
        )
        return entry

    def get_progress(self, session: AuthSession, timezone_name: str) -> WeightProgress:
        """Return the weight series with current value and trend."""
        rows = self.repository.list_weight_logs(session.user_id)
        series = to_chart_series(rows, "weight_kg", ZoneInfo(timezone_name))
        return WeightProgress(
            series=series,
            current_weight=latest_value(series),
            trend=compute_trend(series),
            total_change=total_change(series),
        )
