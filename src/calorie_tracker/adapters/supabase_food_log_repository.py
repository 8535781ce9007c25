"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import (
    execute_rows,
    insert_row,
    parse_timestamp,
    parse_uuid,
)
from calorie_tracker.domain.nutrition import FoodLogEntry
from calorie_tracker.services.food_logs import FoodLogRepository


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_food_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> FoodLogEntry:
        """Insert a food log row and return it."""
        row = insert_row(
            self.client, "food_logs", {"user_id": str(user_id), **payload}
        )
        return _parse_row(row)

    def list_food_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food logs in the time range, newest first."""
        rows = execute_rows(
            self.client.table("food_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=True)
        )
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> FoodLogEntry:
    return FoodLogEntry(
        id=parse_uuid(row["id"]),
        user_id=parse_uuid(row["user_id"]),
        food_name=str(row.get("food_name", "")),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        serving_size=row.get("serving_size"),
        meal_type=str(row.get("meal_type") or "snack"),
        logged_at=parse_timestamp(row["logged_at"]),
    )
