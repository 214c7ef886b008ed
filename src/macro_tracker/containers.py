"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.supabase_auth_gateway import SupabaseAuthGateway
from macro_tracker.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from macro_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from macro_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from macro_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from macro_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.admin import AdminService
from macro_tracker.services.auth import AuthService
from macro_tracker.services.cache import InMemoryCache
from macro_tracker.services.drawers import DrawerService
from macro_tracker.services.foods import FoodService
from macro_tracker.services.goals import GoalService
from macro_tracker.services.meals import MealService
from macro_tracker.services.overview import ProfileOverviewService
from macro_tracker.services.profiles import ProfileService
from macro_tracker.services.refresh import RefreshBus
from macro_tracker.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    refresh_bus: RefreshBus
    auth_service: AuthService
    profile_service: ProfileService
    weight_service: WeightService
    goal_service: GoalService
    food_service: FoodService
    meal_service: MealService
    overview_service: ProfileOverviewService
    drawer_service: DrawerService
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if not resolved_settings.is_supabase_configured:
        raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    refresh_bus = RefreshBus()
    cache = InMemoryCache()
    auth_service = AuthService(SupabaseAuthGateway(supabase_client))
    profile_service = ProfileService(
        SupabaseProfileRepository(supabase_client), refresh_bus
    )
    weight_service = WeightService(
        SupabaseWeightRepository(supabase_client), refresh_bus
    )
    goal_service = GoalService(SupabaseGoalRepository(supabase_client), refresh_bus)
    food_service = FoodService(
        SupabaseFoodRepository(supabase_client),
        search_limit=resolved_settings.food_search_limit,
        recent_limit=resolved_settings.recent_foods_limit,
    )
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        food_service=food_service,
        goal_service=goal_service,
        refresh_bus=refresh_bus,
        cache=cache,
        cache_ttl_seconds=resolved_settings.cache_ttl_seconds,
        prefetch_days=resolved_settings.meals_prefetch_days,
    )
    overview_service = ProfileOverviewService(
        profile_service=profile_service,
        weight_service=weight_service,
        goal_service=goal_service,
        refresh_bus=refresh_bus,
        cache=cache,
        cache_ttl_seconds=resolved_settings.cache_ttl_seconds,
    )
    drawer_service = DrawerService(food_service, meal_service)
    admin_service = AdminService(SupabaseCatalogRepository(supabase_client))

    async def close_resources() -> None:
        meal_service.close()
        overview_service.close()

    return AppContainer(
        settings=resolved_settings,
        refresh_bus=refresh_bus,
        auth_service=auth_service,
        profile_service=profile_service,
        weight_service=weight_service,
        goal_service=goal_service,
        food_service=food_service,
        meal_service=meal_service,
        overview_service=overview_service,
        drawer_service=drawer_service,
        admin_service=admin_service,
        close_resources=close_resources,
    )
