"""Tests for nutrient profile helpers."""

import math

import pytest

from meal_plan_insights.domain.nutrients import (
    NutrientProfile,
    format_nutrient_name,
    nutrient_unit,
    round_half_up,
    round_to,
    safe_number,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, 0.0),
        (math.nan, 0.0),
        (math.inf, 0.0),
        ("abc", 0.0),
        (True, 0.0),
        ("2.5", 2.5),
        (3, 3.0),
        (-1.5, -1.5),
    ],
)
def test_safe_number_coalesces_to_finite(value: object, expected: float) -> None:
    assert safe_number(value) == expected


def test_safe_number_uses_default() -> None:
    assert safe_number(None, default=1.0) == 1.0


def test_profile_amount_treats_unknown_as_zero() -> None:
    profile = NutrientProfile(protein_g=12.5, iron_mg=math.nan)

    assert profile.amount("protein_g") == 12.5
    assert profile.amount("iron_mg") == 0.0
    assert profile.amount("calories") == 0.0


def test_profile_amount_rejects_unknown_key() -> None:
    with pytest.raises(KeyError):
        NutrientProfile().amount("caffeine_mg")


@pytest.mark.parametrize(
    ("key", "name", "unit"),
    [
        ("protein_g", "Protein (g)", "g"),
        ("vitamin_c_mg", "Vitamin C (mg)", "mg"),
        ("vitamin_b12_mcg", "Vitamin B12 (µg)", "µg"),
        ("calories", "Calories", "kcal"),
    ],
)
def test_display_helpers(key: str, name: str, unit: str) -> None:
    assert format_nutrient_name(key) == name
    assert nutrient_unit(key) == unit


def test_rounding_is_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-0.4) == 0
    assert round_to(12.345, 1) == 12.3
