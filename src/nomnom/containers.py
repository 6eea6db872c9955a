"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nomnom.adapters.supabase_goal_repository import SupabaseGoalRepository
from nomnom.adapters.supabase_stats_repository import SupabaseStatsRepository
from nomnom.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from nomnom.config import Settings
from nomnom.services.goals import GoalService
from nomnom.services.progress import ProgressService
from nomnom.services.stats import StatsService
from nomnom.services.user_settings import UserSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    stats_service: StatsService
    goal_service: GoalService
    user_settings_service: UserSettingsService
    progress_service: ProgressService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    stats_service = StatsService(SupabaseStatsRepository(supabase_client))
    goal_service = GoalService(SupabaseGoalRepository(supabase_client))
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client),
        default_timezone=resolved_settings.default_timezone,
    )
    progress_service = ProgressService(
        stats_service=stats_service,
        goal_service=goal_service,
    )
    return AppContainer(
        settings=resolved_settings,
        stats_service=stats_service,
        goal_service=goal_service,
        user_settings_service=user_settings_service,
        progress_service=progress_service,
    )
