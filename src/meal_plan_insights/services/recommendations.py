"""Recommendations derived from classified deficiencies."""

from collections.abc import Sequence

from meal_plan_insights.domain.analysis import (
    DeficiencyRecord,
    Recommendation,
    RecommendationType,
    Severity,
)
from meal_plan_insights.domain.nutrients import round_half_up

MAX_DEFICIENCY_RECOMMENDATIONS = 3
SUGGESTED_FOODS_PER_NUTRIENT = 3

SUCCESS_MESSAGE = "Great job! Your nutrition is well-balanced."
SUCCESS_SUGGESTION = "Maintain your current meal plan for consistent results."


def generate_recommendations(
    deficiencies: Sequence[DeficiencyRecord],
    limit: int = MAX_DEFICIENCY_RECOMMENDATIONS,
) -> list[Recommendation]:
    """Build suggestions for the most severe deficiencies and every excess.

    ``deficiencies`` must already be sorted by severity rank.
    """
    top = [record for record in deficiencies if record.severity != Severity.EXCESS]
    top = top[:limit]
    if not top:
        return [
            Recommendation(
                type=RecommendationType.SUCCESS,
                message=SUCCESS_MESSAGE,
                suggestion=SUCCESS_SUGGESTION,
            )
        ]

    recommendations = [_deficiency_recommendation(record) for record in top]
    recommendations.extend(
        _excess_recommendation(record)
        for record in deficiencies
        if record.severity == Severity.EXCESS
    )
    return recommendations


def _deficiency_recommendation(record: DeficiencyRecord) -> Recommendation:
    foods = record.top_foods[:SUGGESTED_FOODS_PER_NUTRIENT]
    if foods:
        suggestion = (
            f"Add more {', '.join(foods)} to increase your "
            f"{record.display_name} intake."
        )
    else:
        suggestion = f"Add foods rich in {record.display_name} to your plan."
    return Recommendation(
        type=RecommendationType.DEFICIENCY,
        severity=record.severity.value,
        nutrient=record.display_name,
        current=round_half_up(record.intake),
        target=round_half_up(record.target),
        shortfall=round_half_up(record.target - record.intake),
        description=record.description,
        top_foods=record.top_foods,
        suggestion=suggestion,
    )


def _excess_recommendation(record: DeficiencyRecord) -> Recommendation:
    return Recommendation(
        type=RecommendationType.EXCESS,
        severity="warning",
        nutrient=record.display_name,
        current=round_half_up(record.intake),
        max=round_half_up(record.max),
        suggestion=(
            f"Consider reducing {record.display_name} intake. "
            "Current consumption exceeds recommended maximum."
        ),
    )
