"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_plan_insights.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from meal_plan_insights.config import Settings
from meal_plan_insights.services.analysis import MealPlanAnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: MealPlanAnalysisService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_plan_repository = SupabaseMealPlanRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        analysis_service=MealPlanAnalysisService(meal_plan_repository),
    )
