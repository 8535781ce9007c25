"""Body composition and measurement tracking."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_tracker.domain.body import (
    BodyCompositionEntry,
    BodyMeasurementEntry,
    BodyProgress,
)
from calorie_tracker.domain.forms import BodyCompositionForm, BodyMeasurementForm
from calorie_tracker.domain.models import AuthSession
from calorie_tracker.services.trends import (
    composition_series,
    group_by_measurement_type,
    latest_value,
)

_logger = logging.getLogger(__name__)


class BodyRepository(Protocol):
    """Persistence interface for body composition and measurements."""

    def create_composition_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> BodyCompositionEntry:
        """Insert a body composition row and return it."""

    def list_composition_logs(self, user_id: UUID) -> list[BodyCompositionEntry]:
        """Return body composition rows, oldest first."""

    def create_measurement(
        self, user_id: UUID, payload: dict[str, object]
    ) -> BodyMeasurementEntry:
        """Insert a body measurement row and return it."""

    def list_measurements(self, user_id: UUID) -> list[BodyMeasurementEntry]:
        """Return body measurement rows, oldest first."""


@dataclass
class BodyService:
    """Service for body composition entries and their charts."""

    repository: BodyRepository

    def log_composition(
        self, session: AuthSession, form: BodyCompositionForm
    ) -> BodyCompositionEntry:
        """Record a partial composition reading; empty fields are not sent."""
        entry = self.repository.create_composition_log(
            session.user_id, form.to_payload()
        )
        _logger.info("Body composition logged", extra={"user_id": str(session.user_id)})
        return entry

    def log_measurement(
        self, session: AuthSession, form: BodyMeasurementForm
    ) -> BodyMeasurementEntry:
        """Record a single body measurement."""
        entry = self.repository.create_measurement(session.user_id, form.to_payload())
        _logger.info(
            "Measurement logged: %s",
            entry.measurement_type,
            extra={"user_id": str(session.user_id)},
        )
        return entry

    async def get_progress(
        self, session: AuthSession, timezone_name: str
    ) -> BodyProgress:
        """Fetch composition logs and measurements together and chart them."""
        compositions, measurements = await asyncio.gather(
            asyncio.to_thread(self.repository.list_composition_logs, session.user_id),
            asyncio.to_thread(self.repository.list_measurements, session.user_id),
        )
        tz = ZoneInfo(timezone_name)
        grouped = group_by_measurement_type(measurements, tz)
        return BodyProgress(
            composition=composition_series(compositions, tz) if compositions else {},
            latest_composition=compositions[-1] if compositions else None,
            measurements=grouped,
            latest_measurements={
                measurement_type: latest_value(series)
                for measurement_type, series in grouped.items()
            },
        )
