"""Today's nutrition dashboard."""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from uuid import UUID

from calorie_tracker.domain.forms import FoodLogForm, GoalForm
from calorie_tracker.domain.models import AuthSession, Profile
from calorie_tracker.domain.nutrition import (
    DailyGoal,
    FoodLogEntry,
    MacroSlice,
    MacroTotals,
)
from calorie_tracker.services.aggregation import (
    compute_consumed,
    compute_macro_breakdown,
    compute_progress_pct,
    compute_remaining,
)
from calorie_tracker.services.auth import AuthEvent
from calorie_tracker.services.cache import Cache, FetchGenerations
from calorie_tracker.services.food_logs import FoodLogService, day_window
from calorie_tracker.services.goals import GoalService, resolve_goal
from calorie_tracker.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySnapshot:
    """Rows fetched for one user and one local day."""

    day: date
    start: datetime
    end: datetime
    profile: Profile | None
    goal: DailyGoal | None
    food_logs: list[FoodLogEntry]


@dataclass(frozen=True)
class DailySummary:
    """Derived dashboard values for a day."""

    day: date
    profile: Profile | None
    goal: MacroTotals
    goal_is_default: bool
    food_logs: list[FoodLogEntry]
    consumed: MacroTotals
    remaining: MacroTotals
    progress: MacroTotals
    macro_breakdown: list[MacroSlice]


def summarize(snapshot: DaySnapshot) -> DailySummary:
    """Recompute consumed, remaining and progress from a snapshot."""
    goal, is_default = resolve_goal(snapshot.goal)
    consumed = compute_consumed(snapshot.food_logs)
    return DailySummary(
        day=snapshot.day,
        profile=snapshot.profile,
        goal=goal,
        goal_is_default=is_default,
        food_logs=snapshot.food_logs,
        consumed=consumed,
        remaining=compute_remaining(goal, consumed),
        progress=compute_progress_pct(consumed, goal),
        macro_breakdown=compute_macro_breakdown(consumed),
    )


@dataclass
class DashboardService:
    """Builds today's summary and keeps cached snapshots consistent.

    Snapshots are cached per fetch generation. Every write advances the
    user's generation, so a fetch that started before the write can still
    answer its own caller but never replaces newer cached state.
    """

    profile_service: ProfileService
    goal_service: GoalService
    food_log_service: FoodLogService
    cache: Cache
    generations: FetchGenerations
    cache_ttl_seconds: int = 30

    async def get_today(
        self, session: AuthSession, timezone_name: str, now: datetime | None = None
    ) -> DailySummary:
        """Return today's summary in the given timezone."""
        day, start, end = day_window(timezone_name, now)
        key = _generation_key(session.user_id)
        generation = self.generations.current(key)
        cache_key = _snapshot_key(session.user_id, timezone_name, day, generation)
        cached = self.cache.get(cache_key)
        if isinstance(cached, DaySnapshot):
            return summarize(cached)

        profile, goal, food_logs = await asyncio.gather(
            asyncio.to_thread(self.profile_service.get_profile, session),
            asyncio.to_thread(self.goal_service.get_active_goal, session),
            asyncio.to_thread(self.food_log_service.list_between, session, start, end),
        )
        snapshot = DaySnapshot(
            day=day,
            start=start,
            end=end,
            profile=profile,
            goal=goal,
            food_logs=food_logs,
        )
        if self.generations.is_current(key, generation):
            self.cache.set(cache_key, snapshot, ttl_seconds=self.cache_ttl_seconds)
        else:
            _logger.info(
                "Discarding superseded dashboard fetch",
                extra={"user_id": str(session.user_id), "generation": generation},
            )
        return summarize(snapshot)

    async def add_food_log(
        self,
        session: AuthSession,
        form: FoodLogForm,
        timezone_name: str,
        now: datetime | None = None,
    ) -> tuple[FoodLogEntry, DailySummary]:
        """Log a food and return it with the recomputed summary."""
        entry = await asyncio.to_thread(
            self.food_log_service.add_food_log, session, form
        )
        day, _, _ = day_window(timezone_name, now)
        key = _generation_key(session.user_id)
        previous = self.cache.get(
            _snapshot_key(
                session.user_id, timezone_name, day, self.generations.current(key)
            )
        )
        generation = self.generations.advance(key)
        if not isinstance(previous, DaySnapshot):
            return entry, await self.get_today(session, timezone_name, now)

        food_logs = previous.food_logs
        if previous.start <= entry.logged_at < previous.end:
            food_logs = [entry, *food_logs]
        snapshot = replace(previous, food_logs=food_logs)
        self.cache.set(
            _snapshot_key(session.user_id, timezone_name, day, generation),
            snapshot,
            ttl_seconds=self.cache_ttl_seconds,
        )
        return entry, summarize(snapshot)

    async def update_goals(self, session: AuthSession, form: GoalForm) -> DailyGoal:
        """Update the active goal and drop cached snapshots."""
        goal = await asyncio.to_thread(self.goal_service.update_goals, session, form)
        self.invalidate(session.user_id)
        return goal

    def invalidate(self, user_id: UUID) -> None:
        """Supersede every cached snapshot and in-flight fetch for a user."""
        self.generations.advance(_generation_key(user_id))

    def handle_auth_event(self, event: AuthEvent, session: AuthSession) -> None:
        """Forget cached state when a user signs out."""
        if event == AuthEvent.SIGNED_OUT:
            self.generations.forget(_generation_key(session.user_id))


def _generation_key(user_id: UUID) -> str:
    return f"dashboard:{user_id}"


def _snapshot_key(
    user_id: UUID, timezone_name: str, day: date, generation: int
) -> str:
    return f"dashboard:{user_id}:{timezone_name}:{day.isoformat()}:{generation}"
