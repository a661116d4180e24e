"""Meal plan analysis endpoints with simple token auth."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

if TYPE_CHECKING:
    from meal_plan_insights.containers import AppContainer
    from meal_plan_insights.domain.analysis import (
        AnalysisReport,
        DeficiencyRecord,
        Recommendation,
    )
    from meal_plan_insights.domain.shopping import ShoppingListItem
    from meal_plan_insights.domain.stats import DailyTotals

router = APIRouter(prefix="/plans", tags=["plans"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/{plan_id}/analysis", dependencies=[Depends(require_api_token)])
async def plan_analysis(
    plan_id: str, week_start: date, request: Request
) -> dict[str, object]:
    """Return the weekly nutrition analysis for a plan."""
    container: AppContainer = request.app.state.container
    report = container.analysis_service.analyze_week(plan_id, week_start)
    return _serialize_report(report)


@router.get("/{plan_id}/shopping-list", dependencies=[Depends(require_api_token)])
async def plan_shopping_list(
    plan_id: str, week_start: date, request: Request
) -> dict[str, object]:
    """Return the category-grouped shopping list for a plan week."""
    container: AppContainer = request.app.state.container
    shopping_list = container.analysis_service.shopping_list(plan_id, week_start)
    return {
        "week_start": week_start.isoformat(),
        "categories": {
            category: [_serialize_item(item) for item in items]
            for category, items in shopping_list.items()
        },
    }


@router.get(
    "/{plan_id}/shopping-list.txt",
    dependencies=[Depends(require_api_token)],
    response_class=PlainTextResponse,
)
async def plan_shopping_list_text(
    plan_id: str, week_start: date, request: Request
) -> PlainTextResponse:
    """Return the shopping list as shareable plain text."""
    container: AppContainer = request.app.state.container
    text = container.analysis_service.shopping_list_text(plan_id, week_start)
    return PlainTextResponse(text)


@router.get("/{plan_id}/daily", dependencies=[Depends(require_api_token)])
async def plan_daily_breakdown(
    plan_id: str, week_start: date, request: Request
) -> dict[str, object]:
    """Return per-day calories and macros for a plan week."""
    container: AppContainer = request.app.state.container
    days = container.analysis_service.daily_breakdown(plan_id, week_start)
    return {"days": [_serialize_day(day) for day in days]}


def _serialize_report(report: AnalysisReport) -> dict[str, object]:
    return {
        "weekly_totals": report.weekly_totals,
        "daily_averages": report.daily_averages,
        "deficiencies": [_serialize_deficiency(d) for d in report.deficiencies],
        "recommendations": [
            _serialize_recommendation(r) for r in report.recommendations
        ],
        "health_score": report.health_score,
        "summary": {
            "total_nutrients": report.summary.total_nutrients,
            "adequate_nutrients": report.summary.adequate_nutrients,
            "deficient_nutrients": report.summary.deficient_nutrients,
            "excess_nutrients": report.summary.excess_nutrients,
        },
    }


def _serialize_deficiency(record: DeficiencyRecord) -> dict[str, object]:
    return {
        "nutrient": record.nutrient,
        "display_name": record.display_name,
        "intake": record.intake,
        "target": record.target,
        "min": record.min,
        "max": record.max,
        "percentage": record.percentage,
        "percent_of_target": record.percent_of_target,
        "unit": record.unit,
        "severity": record.severity.value,
        "severity_label": record.severity.label,
        "category": record.category,
        "top_foods": list(record.top_foods),
        "description": record.description,
    }


def _serialize_recommendation(recommendation: Recommendation) -> dict[str, object]:
    payload: dict[str, object] = {
        "type": recommendation.type.value,
        "severity": recommendation.severity,
        "nutrient": recommendation.nutrient,
        "message": recommendation.message,
        "suggestion": recommendation.suggestion,
        "current": recommendation.current,
        "target": recommendation.target,
        "shortfall": recommendation.shortfall,
        "max": recommendation.max,
        "description": recommendation.description,
        "top_foods": list(recommendation.top_foods),
    }
    return {key: value for key, value in payload.items() if value is not None}


def _serialize_item(item: ShoppingListItem) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "category": item.category,
        "serving_description": item.serving_description,
    }


def _serialize_day(day: DailyTotals) -> dict[str, object]:
    return {
        "day": day.day.isoformat(),
        "calories": day.calories,
        "protein_g": day.protein_g,
        "carbs_g": day.carbs_g,
        "fat_g": day.fat_g,
    }
