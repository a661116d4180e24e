"""Tests for shopping list aggregation."""

import pytest

from meal_plan_insights.services.analysis import MealPlanAnalysisService
from meal_plan_insights.services.shopping import (
    build_shopping_list,
    format_shopping_list,
)
from tests.builders import WEEK_START, make_entry, make_food
from tests.conftest import InMemoryMealPlanRepository


def test_same_food_identity_is_merged() -> None:
    chicken = make_food("chicken", "Chicken Breast", category="Proteins")
    entries = [make_entry((2, chicken)), make_entry((3, chicken))]

    shopping_list = build_shopping_list(entries)

    (item,) = shopping_list["Proteins"]
    assert item.id == "chicken"
    assert item.quantity == 5


def test_same_name_distinct_identity_is_not_merged() -> None:
    first = make_food("rice-1", "Rice", category="Grains")
    second = make_food("rice-2", "Rice", category="Grains")

    shopping_list = build_shopping_list([make_entry((1, first), (2, second))])

    assert [item.id for item in shopping_list["Grains"]] == ["rice-1", "rice-2"]


def test_quantities_scale_with_servings_and_skip_missing_food() -> None:
    eggs = make_food("eggs", "Eggs", category="Dairy & Eggs")
    entries = [
        make_entry((2, eggs), (1, None), servings=3),
        make_entry((1, eggs), servings=None),
    ]

    shopping_list = build_shopping_list(entries)

    assert list(shopping_list) == ["Dairy & Eggs"]
    assert shopping_list["Dairy & Eggs"][0].quantity == 7


def test_categories_and_items_are_sorted() -> None:
    entries = [
        make_entry(
            (1, make_food("z", "zucchini", category="Vegetables")),
            (1, make_food("b", "Broccoli", category="Vegetables")),
            (1, make_food("a", "Apple")),
            (1, make_food("s", "Salmon", category="Proteins")),
        )
    ]

    shopping_list = build_shopping_list(entries)

    assert list(shopping_list) == ["Other", "Proteins", "Vegetables"]
    assert [item.name for item in shopping_list["Vegetables"]] == [
        "Broccoli",
        "zucchini",
    ]
    assert shopping_list["Other"][0].category == "Other"


def test_empty_plan_gives_empty_list() -> None:
    assert build_shopping_list([]) == {}


def test_structurally_invalid_input_raises() -> None:
    with pytest.raises(TypeError):
        build_shopping_list(None)  # type: ignore[arg-type]


def test_format_shopping_list_text() -> None:
    entries = [
        make_entry(
            (2.5, make_food("apple", "Apple", serving_description="1 medium")),
            (
                5,
                make_food(
                    "chicken",
                    "Chicken Breast",
                    category="Proteins",
                    serving_description="100 g",
                ),
            ),
        )
    ]

    text = format_shopping_list(build_shopping_list(entries), WEEK_START)

    assert text == (
        "Shopping List - Week of 2025-01-06\n"
        "\n"
        "OTHER\n"
        "  • Apple - 2.5× 1 medium\n"
        "\n"
        "PROTEINS\n"
        "  • Chicken Breast - 5× 100 g\n"
        "\n"
        "Total: 2 items\n"
    )


def test_service_shopping_list_text(
    meal_plan_repository: InMemoryMealPlanRepository,
) -> None:
    oats = make_food("oats", "Oats", category="Grains", serving_description="40 g")
    meal_plan_repository.entries["plan-1"] = [make_entry((1.25, oats), servings=2)]
    service = MealPlanAnalysisService(meal_plan_repository)

    text = service.shopping_list_text("plan-1", WEEK_START)

    assert "GRAINS\n  • Oats - 2.5× 40 g\n" in text
    assert text.endswith("Total: 1 items\n")
