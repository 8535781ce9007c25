"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.supabase_auth_gateway import SupabaseAuthGateway
from calorie_tracker.adapters.supabase_body_repository import SupabaseBodyRepository
from calorie_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from calorie_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from calorie_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from calorie_tracker.config import Settings
from calorie_tracker.services.auth import AuthService
from calorie_tracker.services.body import BodyService
from calorie_tracker.services.cache import FetchGenerations, InMemoryCache
from calorie_tracker.services.dashboard import DashboardService
from calorie_tracker.services.food_logs import FoodLogService
from calorie_tracker.services.foods import FoodCatalog
from calorie_tracker.services.goals import GoalService
from calorie_tracker.services.profiles import ProfileService
from calorie_tracker.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    profile_service: ProfileService
    goal_service: GoalService
    food_log_service: FoodLogService
    dashboard_service: DashboardService
    weight_service: WeightService
    body_service: BodyService
    food_catalog: FoodCatalog


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_service = AuthService(
        SupabaseAuthGateway.create(
            supabase_client,
            url=resolved_settings.supabase_url,
            anon_key=resolved_settings.supabase_anon_key,
        )
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    goal_service = GoalService(SupabaseGoalRepository(supabase_client))
    food_log_service = FoodLogService(SupabaseFoodLogRepository(supabase_client))
    dashboard_service = DashboardService(
        profile_service=profile_service,
        goal_service=goal_service,
        food_log_service=food_log_service,
        cache=InMemoryCache(),
        generations=FetchGenerations(),
        cache_ttl_seconds=resolved_settings.dashboard_cache_ttl_seconds,
    )
    auth_service.subscribe(dashboard_service.handle_auth_event)

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        profile_service=profile_service,
        goal_service=goal_service,
        food_log_service=food_log_service,
        dashboard_service=dashboard_service,
        weight_service=WeightService(SupabaseWeightRepository(supabase_client)),
        body_service=BodyService(SupabaseBodyRepository(supabase_client)),
        food_catalog=FoodCatalog(),
    )
