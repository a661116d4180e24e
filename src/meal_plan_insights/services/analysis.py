"""Weekly nutrition analysis: report assembly and plan-backed service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

from meal_plan_insights.domain.analysis import (
    AnalysisReport,
    AnalysisSummary,
    Severity,
)
from meal_plan_insights.domain.plans import PlanEntry
from meal_plan_insights.domain.reference import NUTRIENT_TARGETS
from meal_plan_insights.domain.stats import DailyTotals
from meal_plan_insights.services.aggregation import (
    DAYS_PER_WEEK,
    calculate_daily_averages,
    calculate_daily_breakdown,
    calculate_weekly_totals,
    ensure_plan_entries,
)
from meal_plan_insights.services.deficiencies import identify_deficiencies
from meal_plan_insights.services.recommendations import generate_recommendations
from meal_plan_insights.services.scoring import calculate_health_score, count_adequate
from meal_plan_insights.services.shopping import (
    ShoppingList,
    build_shopping_list,
    format_shopping_list,
)

_logger = logging.getLogger(__name__)


def analyze_weekly_nutrition(entries: Iterable[PlanEntry]) -> AnalysisReport:
    """Run the full analysis pipeline over one week of plan entries."""
    weekly_totals = calculate_weekly_totals(ensure_plan_entries(entries))
    daily_averages = calculate_daily_averages(weekly_totals)
    deficiencies = identify_deficiencies(daily_averages, NUTRIENT_TARGETS)
    recommendations = generate_recommendations(deficiencies)
    excess_count = sum(1 for d in deficiencies if d.severity == Severity.EXCESS)
    summary = AnalysisSummary(
        total_nutrients=len(NUTRIENT_TARGETS),
        adequate_nutrients=count_adequate(daily_averages, NUTRIENT_TARGETS),
        deficient_nutrients=len(deficiencies) - excess_count,
        excess_nutrients=excess_count,
    )
    return AnalysisReport(
        weekly_totals=weekly_totals,
        daily_averages=daily_averages,
        deficiencies=deficiencies,
        recommendations=recommendations,
        health_score=calculate_health_score(daily_averages, NUTRIENT_TARGETS),
        summary=summary,
    )


class MealPlanRepository(Protocol):
    """Persistence interface for weekly meal plan entries."""

    def list_plan_entries(
        self, plan_id: str, start: date, end: date
    ) -> list[PlanEntry]:
        """Return plan entries dated within ``[start, end]`` with nested meals."""


@dataclass
class MealPlanAnalysisService:
    """Service that loads a plan week and runs the analysis pipelines."""

    repository: MealPlanRepository

    def analyze_week(self, plan_id: str, week_start: date) -> AnalysisReport:
        """Return the nutrition report for a plan week."""
        entries = self._load_week(plan_id, week_start)
        report = analyze_weekly_nutrition(entries)
        _logger.info(
            "Nutrition analysis: plan=%s week=%s entries=%s score=%s flagged=%s",
            plan_id,
            week_start.isoformat(),
            len(entries),
            report.health_score,
            len(report.deficiencies),
        )
        return report

    def shopping_list(self, plan_id: str, week_start: date) -> ShoppingList:
        """Return the category-grouped shopping list for a plan week."""
        return build_shopping_list(self._load_week(plan_id, week_start))

    def shopping_list_text(self, plan_id: str, week_start: date) -> str:
        """Return the shopping list rendered for sharing."""
        return format_shopping_list(self.shopping_list(plan_id, week_start), week_start)

    def daily_breakdown(self, plan_id: str, week_start: date) -> list[DailyTotals]:
        """Return calories and macros per day for a plan week."""
        entries = self._load_week(plan_id, week_start)
        return calculate_daily_breakdown(entries, week_start)

    def _load_week(self, plan_id: str, week_start: date) -> list[PlanEntry]:
        week_end = week_start + timedelta(days=DAYS_PER_WEEK - 1)
        try:
            entries = self.repository.list_plan_entries(plan_id, week_start, week_end)
        except Exception:
            _logger.exception(
                "Failed to load plan entries: plan=%s week=%s",
                plan_id,
                week_start.isoformat(),
            )
            raise
        return ensure_plan_entries(entries)
