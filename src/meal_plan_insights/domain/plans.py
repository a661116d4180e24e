"""Domain models for weekly meal plans."""

from dataclasses import dataclass, field
from datetime import date

from meal_plan_insights.domain.nutrients import NutrientProfile


@dataclass(frozen=True)
class FoodServing:
    """A food serving with its per-serving nutrients."""

    id: str
    name: str
    nutrients: NutrientProfile = field(default_factory=NutrientProfile)
    category: str | None = None
    serving_description: str | None = None


@dataclass(frozen=True)
class MealFoodLine:
    """A food within a meal; ``food`` is None when the reference is broken."""

    quantity: float | None
    food: FoodServing | None


@dataclass(frozen=True)
class Meal:
    """A saved meal made of food lines."""

    id: str
    name: str
    foods: tuple[MealFoodLine, ...] = ()
    category: str | None = None


@dataclass(frozen=True)
class PlanEntry:
    """One scheduled occurrence of a meal within a weekly plan."""

    meal: Meal | None
    servings: float | None = None
    plan_date: date | None = None
    meal_type: str | None = None
