"""Weekly nutrient aggregation over planned meals."""

from collections.abc import Iterable, Iterator, Mapping
from datetime import date, timedelta

from meal_plan_insights.domain.nutrients import NUTRIENT_KEYS, empty_totals, safe_number
from meal_plan_insights.domain.plans import FoodServing, PlanEntry
from meal_plan_insights.domain.stats import DailyTotals

# Averages always divide by a full week, however many days have entries.
DAYS_PER_WEEK = 7

_MACRO_KEYS = ("calories", "protein_g", "carbs_g", "fat_g")


def ensure_plan_entries(entries: object) -> list[PlanEntry]:
    """Materialize plan entries, rejecting structurally invalid input."""
    if not isinstance(entries, Iterable) or isinstance(
        entries, str | bytes | Mapping
    ):
        kind = type(entries).__name__
        raise TypeError(f"plan entries must be an iterable of PlanEntry, got {kind}")
    materialized = list(entries)
    for entry in materialized:
        if not isinstance(entry, PlanEntry):
            raise TypeError(f"expected PlanEntry, got {type(entry).__name__}")
    return materialized


def iter_planned_foods(
    entries: Iterable[PlanEntry],
) -> Iterator[tuple[PlanEntry, FoodServing, float]]:
    """Yield each planned food with its quantity scaled by entry servings.

    Entries without a meal and lines without food data are skipped.
    """
    for entry in entries:
        if entry.meal is None:
            continue
        servings = safe_number(entry.servings, default=1.0)
        for line in entry.meal.foods:
            if line.food is None:
                continue
            yield entry, line.food, safe_number(line.quantity) * servings


def calculate_weekly_totals(entries: Iterable[PlanEntry]) -> dict[str, float]:
    """Sum nutrient contributions of every planned food."""
    totals = empty_totals()
    for _entry, food, quantity in iter_planned_foods(ensure_plan_entries(entries)):
        for key in NUTRIENT_KEYS:
            totals[key] += food.nutrients.amount(key) * quantity
    return totals


def calculate_daily_averages(
    weekly_totals: Mapping[str, float], days: int = DAYS_PER_WEEK
) -> dict[str, float]:
    """Divide weekly totals by a fixed number of days."""
    return {key: value / days for key, value in weekly_totals.items()}


def calculate_daily_breakdown(
    entries: Iterable[PlanEntry], week_start: date, days: int = DAYS_PER_WEEK
) -> list[DailyTotals]:
    """Return calories and macros per day of the week starting at ``week_start``."""
    week = [week_start + timedelta(days=offset) for offset in range(days)]
    sums = {day: dict.fromkeys(_MACRO_KEYS, 0.0) for day in week}
    for entry, food, quantity in iter_planned_foods(ensure_plan_entries(entries)):
        day_sums = sums.get(entry.plan_date) if entry.plan_date else None
        if day_sums is None:
            continue
        for key in day_sums:
            day_sums[key] += food.nutrients.amount(key) * quantity
    return [
        DailyTotals(
            day=day,
            calories=sums[day]["calories"],
            protein_g=sums[day]["protein_g"],
            carbs_g=sums[day]["carbs_g"],
            fat_g=sums[day]["fat_g"],
        )
        for day in week
    ]
