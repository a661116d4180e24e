"""Supabase repository for weekly meal plan entries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from meal_plan_insights.domain.nutrients import NUTRIENT_KEYS, NutrientProfile
from meal_plan_insights.domain.plans import FoodServing, Meal, MealFoodLine, PlanEntry
from meal_plan_insights.services.analysis import MealPlanRepository

_FOOD_COLUMNS = ", ".join(
    ("id", "food_name", "serving_description", "category", *NUTRIENT_KEYS)
)

_PLAN_ENTRY_SELECT = (
    "id, plan_date, meal_type, servings, "
    "meals (id, name, category, meal_foods (quantity, "
    f"food_servings ({_FOOD_COLUMNS})))"
)


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plan entries."""

    client: Client

    def list_plan_entries(
        self, plan_id: str, start: date, end: date
    ) -> list[PlanEntry]:
        """Return plan entries dated within the inclusive range."""
        response = (
            self.client.table("weekly_meal_plan_entries")
            .select(_PLAN_ENTRY_SELECT)
            .eq("plan_id", plan_id)
            .gte("plan_date", start.isoformat())
            .lte("plan_date", end.isoformat())
            .order("plan_date", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> PlanEntry:
    meal_row = row.get("meals")
    return PlanEntry(
        meal=_parse_meal(meal_row) if isinstance(meal_row, dict) else None,
        servings=_optional_float(row.get("servings")),
        plan_date=_parse_date(row.get("plan_date")),
        meal_type=_optional_str(row.get("meal_type")),
    )


def _parse_meal(row: dict[str, object]) -> Meal:
    lines = row.get("meal_foods")
    return Meal(
        id=str(row.get("id", "")),
        name=str(row.get("name") or ""),
        category=_optional_str(row.get("category")),
        foods=tuple(
            _parse_line(line) for line in lines or [] if isinstance(line, dict)
        ),
    )


def _parse_line(row: dict[str, object]) -> MealFoodLine:
    food_row = row.get("food_servings")
    return MealFoodLine(
        quantity=_optional_float(row.get("quantity")),
        food=_parse_food(food_row) if isinstance(food_row, dict) else None,
    )


def _parse_food(row: dict[str, object]) -> FoodServing:
    return FoodServing(
        id=str(row.get("id", "")),
        name=str(row.get("food_name") or ""),
        category=_optional_str(row.get("category")),
        serving_description=_optional_str(row.get("serving_description")),
        nutrients=NutrientProfile(
            **{key: _optional_float(row.get(key)) for key in NUTRIENT_KEYS}
        ),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _optional_str(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _parse_date(value: object) -> date | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None
