"""Supabase repository for body composition logs and measurements."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import (
    execute_rows,
    insert_row,
    optional_float,
    optional_int,
    parse_timestamp,
    parse_uuid,
)
from calorie_tracker.domain.body import BodyCompositionEntry, BodyMeasurementEntry
from calorie_tracker.services.body import BodyRepository


@dataclass
class SupabaseBodyRepository(BodyRepository):
    """Supabase implementation for body tracking tables."""

    client: Client

    def create_composition_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> BodyCompositionEntry:
        """Insert a composition row with only the provided fields."""
        row = insert_row(
            self.client,
            "body_composition_logs",
            {"user_id": str(user_id), **payload},
        )
        return _parse_composition(row)

    def list_composition_logs(self, user_id: UUID) -> list[BodyCompositionEntry]:
        """Return composition rows in chronological order."""
        rows = execute_rows(
            self.client.table("body_composition_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("logged_at", desc=False)
        )
        return [_parse_composition(row) for row in rows]

    def create_measurement(
        self, user_id: UUID, payload: dict[str, object]
    ) -> BodyMeasurementEntry:
        """Insert a measurement row and return it."""
        row = insert_row(
            self.client, "body_measurements", {"user_id": str(user_id), **payload}
        )
        return _parse_measurement(row)

    def list_measurements(self, user_id: UUID) -> list[BodyMeasurementEntry]:
        """Return measurement rows in chronological order."""
        rows = execute_rows(
            self.client.table("body_measurements")
            .select("*")
            .eq("user_id", str(user_id))
            .order("logged_at", desc=False)
        )
        return [_parse_measurement(row) for row in rows]


def _parse_composition(row: dict[str, object]) -> BodyCompositionEntry:
    return BodyCompositionEntry(
        id=parse_uuid(row["id"]),
        user_id=parse_uuid(row["user_id"]),
        logged_at=parse_timestamp(row["logged_at"]),
        body_fat_percentage=optional_float(row.get("body_fat_percentage")),
        muscle_mass_kg=optional_float(row.get("muscle_mass_kg")),
        bone_mass_kg=optional_float(row.get("bone_mass_kg")),
        water_percentage=optional_float(row.get("water_percentage")),
        visceral_fat_rating=optional_int(row.get("visceral_fat_rating")),
        notes=row.get("notes"),
    )


def _parse_measurement(row: dict[str, object]) -> BodyMeasurementEntry:
    return BodyMeasurementEntry(
        id=parse_uuid(row["id"]),
        user_id=parse_uuid(row["user_id"]),
        measurement_type=str(row["measurement_type"]),
        value_cm=float(row["value_cm"]),
        logged_at=parse_timestamp(row["logged_at"]),
        notes=row.get("notes"),
    )
