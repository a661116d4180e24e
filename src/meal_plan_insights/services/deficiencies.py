"""Deficiency classification against daily nutrient targets."""

import math
from collections.abc import Mapping

from meal_plan_insights.domain.analysis import DeficiencyRecord, Severity
from meal_plan_insights.domain.nutrients import (
    format_nutrient_name,
    nutrient_unit,
    round_half_up,
    round_to,
    safe_number,
)
from meal_plan_insights.domain.reference import (
    NUTRIENT_TARGETS,
    NutrientTarget,
    source_info,
)

CRITICAL_BELOW_PERCENT = 50
MODERATE_BELOW_PERCENT = 75
MILD_BELOW_PERCENT = 90


def percent_of_target(intake: float, target: NutrientTarget) -> float:
    """Return intake as a percentage of the optimal target, or 0 if undefined."""
    if not target.optimal:
        return 0.0
    percent = intake / target.optimal * 100
    return percent if math.isfinite(percent) else 0.0


def classify_severity(intake: float, target: NutrientTarget) -> Severity | None:
    """Return the severity tier for an intake, or None when adequate."""
    if intake > target.max:
        return Severity.EXCESS
    percent = percent_of_target(intake, target)
    if percent < CRITICAL_BELOW_PERCENT:
        return Severity.CRITICAL
    if percent < MODERATE_BELOW_PERCENT:
        return Severity.MODERATE
    if percent < MILD_BELOW_PERCENT:
        return Severity.MILD
    return None


def identify_deficiencies(
    daily_averages: Mapping[str, float],
    targets: Mapping[str, NutrientTarget] = NUTRIENT_TARGETS,
) -> list[DeficiencyRecord]:
    """Flag every targeted nutrient outside its adequate band.

    Nutrients missing from ``daily_averages`` are evaluated at zero intake.
    Records are sorted by severity rank; ties keep target-table order.
    """
    records: list[DeficiencyRecord] = []
    for nutrient, target in targets.items():
        intake = safe_number(daily_averages.get(nutrient))
        severity = classify_severity(intake, target)
        if severity is None:
            continue
        percent = percent_of_target(intake, target)
        source = source_info(nutrient)
        records.append(
            DeficiencyRecord(
                nutrient=nutrient,
                display_name=format_nutrient_name(nutrient),
                intake=round_to(intake, 2),
                target=target.optimal,
                min=target.min,
                max=target.max,
                percentage=round_half_up(percent),
                percent_of_target=percent,
                unit=nutrient_unit(nutrient),
                severity=severity,
                category=source.category,
                top_foods=source.top_foods,
                description=source.description,
            )
        )
    records.sort(key=lambda record: record.severity.rank)
    return records
