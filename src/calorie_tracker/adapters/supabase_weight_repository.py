"""Supabase repository for weight logs."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import (
    execute_rows,
    insert_row,
    parse_timestamp,
    parse_uuid,
)
from calorie_tracker.domain.body import WeightLogEntry
from calorie_tracker.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def create_weight_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightLogEntry:
        """Insert a weight log row and return it."""
        row = insert_row(
            self.client, "weight_logs", {"user_id": str(user_id), **payload}
        )
        return _parse_row(row)

    def list_weight_logs(self, user_id: UUID) -> list[WeightLogEntry]:
        """Return all weight logs for a user in chronological order."""
        rows = execute_rows(
            self.client.table("weight_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("logged_at", desc=False)
        )
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> WeightLogEntry:
    return WeightLogEntry(
        id=parse_uuid(row["id"]),
        user_id=parse_uuid(row["user_id"]),
        weight_kg=float(row["weight_kg"]),
        logged_at=parse_timestamp(row["logged_at"]),
        notes=row.get("notes"),
    )
