"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from chompquest.adapters.supabase_admin_repository import SupabaseAdminRepository
from chompquest.adapters.supabase_audit_repository import SupabaseAuditRepository
from chompquest.adapters.supabase_gamification_repository import (
    SupabaseGamificationRepository,
)
from chompquest.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from chompquest.adapters.supabase_stats_repository import SupabaseStatsRepository
from chompquest.adapters.supabase_user_repository import SupabaseUserRepository
from chompquest.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from chompquest.adapters.supabase_water_repository import SupabaseWaterRepository
from chompquest.config import Settings
from chompquest.services.admin import AdminService
from chompquest.services.audit import AuditService
from chompquest.services.gamification import GamificationService
from chompquest.services.meals import MealLogService
from chompquest.services.stats import StatsService
from chompquest.services.user_settings import UserSettingsService
from chompquest.services.users import UserService
from chompquest.services.water import WaterService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    user_settings_service: UserSettingsService
    meal_log_service: MealLogService
    water_service: WaterService
    stats_service: StatsService
    gamification_service: GamificationService
    admin_service: AdminService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client),
        default_goals=resolved_settings.default_goals(),
    )
    meal_log_service = MealLogService(SupabaseMealLogRepository(supabase_client))
    water_service = WaterService(SupabaseWaterRepository(supabase_client))
    stats_service = StatsService(SupabaseStatsRepository(supabase_client))
    gamification_service = GamificationService(
        repository=SupabaseGamificationRepository(supabase_client),
        stats_service=stats_service,
        user_settings_service=user_settings_service,
    )
    admin_service = AdminService(
        admin_repository=SupabaseAdminRepository(supabase_client),
        gamification_service=gamification_service,
        user_settings_service=user_settings_service,
        audit_service=AuditService(SupabaseAuditRepository(supabase_client)),
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        user_settings_service=user_settings_service,
        meal_log_service=meal_log_service,
        water_service=water_service,
        stats_service=stats_service,
        gamification_service=gamification_service,
        admin_service=admin_service,
    )
