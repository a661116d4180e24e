"""Overall nutrient adequacy score."""

from collections.abc import Mapping

from meal_plan_insights.domain.nutrients import round_half_up, safe_number
from meal_plan_insights.domain.reference import NUTRIENT_TARGETS, NutrientTarget


def is_adequate(intake: float, target: NutrientTarget) -> bool:
    """Return True when a recorded intake lies within ``[min, max]``."""
    # Zero intake means nothing was planned, even where the minimum is zero.
    if intake <= 0:
        return False
    return target.min <= intake <= target.max


def count_adequate(
    daily_averages: Mapping[str, float],
    targets: Mapping[str, NutrientTarget] = NUTRIENT_TARGETS,
) -> int:
    """Count targeted nutrients whose daily average is adequate."""
    return sum(
        1
        for nutrient, target in targets.items()
        if is_adequate(safe_number(daily_averages.get(nutrient)), target)
    )


def calculate_health_score(
    daily_averages: Mapping[str, float],
    targets: Mapping[str, NutrientTarget] = NUTRIENT_TARGETS,
) -> int:
    """Return the percentage (0-100) of targeted nutrients that are adequate."""
    if not targets:
        return 0
    adequate = count_adequate(daily_averages, targets)
    return round_half_up(adequate / len(targets) * 100)
