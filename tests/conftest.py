"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from meal_plan_insights.config import Settings
from meal_plan_insights.containers import AppContainer
from meal_plan_insights.domain.plans import PlanEntry
from meal_plan_insights.services.analysis import (
    MealPlanAnalysisService,
    MealPlanRepository,
)

# Shaped like a Supabase service key so client construction accepts it.
FAKE_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    entries: dict[str, list[PlanEntry]] = field(default_factory=dict)
    calls: list[tuple[str, date, date]] = field(default_factory=list)
    error: Exception | None = None

    def list_plan_entries(
        self, plan_id: str, start: date, end: date
    ) -> list[PlanEntry]:
        self.calls.append((plan_id, start, end))
        if self.error is not None:
            raise self.error
        return [
            entry
            for entry in self.entries.get(plan_id, [])
            if entry.plan_date is None or start <= entry.plan_date <= end
        ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=FAKE_SERVICE_KEY,
        api_token="api-token",
    )


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def container(
    settings: Settings, meal_plan_repository: InMemoryMealPlanRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        analysis_service=MealPlanAnalysisService(meal_plan_repository),
    )
