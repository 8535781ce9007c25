"""Daily macro goal management."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.forms import GoalForm
from calorie_tracker.domain.models import AuthSession
from calorie_tracker.domain.nutrition import DEFAULT_GOAL, DailyGoal, MacroTotals
from calorie_tracker.errors import GoalNotFoundError

_logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for daily goals."""

    def get_active_goal(self, user_id: UUID) -> DailyGoal | None:
        """Return the user's active goal, if one exists."""

    def update_goal(self, goal_id: UUID, payload: dict[str, object]) -> DailyGoal:
        """Update a goal row and return it."""


@dataclass
class GoalService:
    """Service for reading and updating daily goals."""

    repository: GoalRepository

    def get_active_goal(self, session: AuthSession) -> DailyGoal | None:
        """Return the active goal row, or None when the user has none."""
        return self.repository.get_active_goal(session.user_id)

    def update_goals(self, session: AuthSession, form: GoalForm) -> DailyGoal:
        """Overwrite the active goal with new targets."""
        current = self.repository.get_active_goal(session.user_id)
        if current is None:
            raise GoalNotFoundError("No active daily goal to update")
        updated = self.repository.update_goal(current.id, form.to_payload())
        _logger.info("Daily goals updated", extra={"user_id": str(session.user_id)})
        return updated


def resolve_goal(goal: DailyGoal | None) -> tuple[MacroTotals, bool]:
    """Return goal targets and whether the default goal was substituted."""
    if goal is None:
        return DEFAULT_GOAL, True
    return goal.totals, False
