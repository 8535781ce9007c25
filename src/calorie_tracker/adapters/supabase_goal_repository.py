"""Supabase repository for daily goals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import (
    execute_rows,
    fetch_single,
    parse_uuid,
    required_float,
)
from calorie_tracker.domain.nutrition import DailyGoal
from calorie_tracker.errors import PersistenceError
from calorie_tracker.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for daily goals."""

    client: Client

    def get_active_goal(self, user_id: UUID) -> DailyGoal | None:
        """Return the user's active goal row."""
        row = fetch_single(
            self.client.table("daily_goals")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("is_active", True)
        )
        return _parse_goal(row) if row else None

    def update_goal(self, goal_id: UUID, payload: dict[str, object]) -> DailyGoal:
        """Update goal targets and return the stored row."""
        rows = execute_rows(
            self.client.table("daily_goals").update(payload).eq("id", str(goal_id))
        )
        if not rows:
            raise PersistenceError("Failed to update daily goals")
        return _parse_goal(rows[0])


def _parse_goal(row: dict[str, object]) -> DailyGoal:
    return DailyGoal(
        id=parse_uuid(row["id"]),
        user_id=parse_uuid(row["user_id"]),
        calories=required_float(row, "calories"),
        protein=required_float(row, "protein"),
        carbs=required_float(row, "carbs"),
        fat=required_float(row, "fat"),
        is_active=bool(row.get("is_active", False)),
    )
