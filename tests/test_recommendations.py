"""Tests for recommendation generation."""

from meal_plan_insights.domain.analysis import RecommendationType
from meal_plan_insights.domain.reference import NUTRIENT_TARGETS
from meal_plan_insights.services.deficiencies import identify_deficiencies
from meal_plan_insights.services.recommendations import (
    MAX_DEFICIENCY_RECOMMENDATIONS,
    SUCCESS_MESSAGE,
    generate_recommendations,
)


def _averages(**overrides: float) -> dict[str, float]:
    averages = {key: target.optimal for key, target in NUTRIENT_TARGETS.items()}
    averages.update(overrides)
    return averages


def test_success_when_nothing_is_deficient() -> None:
    recommendations = generate_recommendations([])

    assert len(recommendations) == 1
    assert recommendations[0].type == RecommendationType.SUCCESS
    assert recommendations[0].message == SUCCESS_MESSAGE


def test_deficiencies_capped_at_three_most_severe() -> None:
    deficiencies = identify_deficiencies({})

    recommendations = generate_recommendations(deficiencies)

    assert MAX_DEFICIENCY_RECOMMENDATIONS == 3
    assert [r.type for r in recommendations] == [RecommendationType.DEFICIENCY] * 3
    assert [r.nutrient for r in recommendations] == [
        "Calories",
        "Protein (g)",
        "Carbs (g)",
    ]


def test_deficiency_recommendation_details() -> None:
    deficiencies = identify_deficiencies(_averages(protein_g=30.4))

    (recommendation,) = generate_recommendations(deficiencies)

    assert recommendation.severity == "critical"
    assert recommendation.current == 30
    assert recommendation.target == 100
    assert recommendation.shortfall == 70
    assert recommendation.suggestion == (
        "Add more Chicken Breast, Salmon, Eggs to increase your Protein (g) intake."
    )


def test_deficiency_without_known_foods_still_suggests() -> None:
    deficiencies = identify_deficiencies(_averages(niacin_mg=1))

    (recommendation,) = generate_recommendations(deficiencies)

    assert recommendation.top_foods == ()
    assert "Niacin (mg)" in recommendation.suggestion


def test_every_excess_is_reported_outside_the_cap() -> None:
    deficiencies = identify_deficiencies(
        _averages(
            protein_g=10,
            fiber_g=5,
            iron_mg=1,
            calcium_mg=10,
            sodium_mg=4600,
            sugar_g=75,
            niacin_mg=70,
        )
    )

    recommendations = generate_recommendations(deficiencies)
    kinds = [r.type for r in recommendations]

    assert kinds.count(RecommendationType.DEFICIENCY) == 3
    assert kinds.count(RecommendationType.EXCESS) == 3
    sodium = next(r for r in recommendations if r.nutrient == "Sodium (mg)")
    assert sodium.severity == "warning"
    assert sodium.current == 4600
    assert sodium.max == 2300


def test_only_excess_yields_success() -> None:
    deficiencies = identify_deficiencies(_averages(sodium_mg=4600))

    recommendations = generate_recommendations(deficiencies)

    assert [r.type for r in recommendations] == [RecommendationType.SUCCESS]
