"""Nutrient keys and per-serving nutrient profiles."""

import math
import re
from dataclasses import dataclass

NUTRIENT_KEYS: tuple[str, ...] = (
    # Macros
    "calories",
    "protein_g",
    "carbs_g",
    "fat_g",
    "fiber_g",
    "sugar_g",
    # Minerals
    "sodium_mg",
    "calcium_mg",
    "iron_mg",
    "potassium_mg",
    "magnesium_mg",
    "phosphorus_mg",
    "zinc_mg",
    "copper_mg",
    "selenium_mcg",
    # Vitamins
    "vitamin_a_mcg",
    "vitamin_c_mg",
    "vitamin_e_mg",
    "vitamin_k_mcg",
    "thiamin_mg",
    "riboflavin_mg",
    "niacin_mg",
    "vitamin_b6_mg",
    "folate_mcg",
    "vitamin_b12_mcg",
)


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient amounts for one food serving; unknown values are None."""

    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    fiber_g: float | None = None
    sugar_g: float | None = None
    sodium_mg: float | None = None
    calcium_mg: float | None = None
    iron_mg: float | None = None
    potassium_mg: float | None = None
    magnesium_mg: float | None = None
    phosphorus_mg: float | None = None
    zinc_mg: float | None = None
    copper_mg: float | None = None
    selenium_mcg: float | None = None
    vitamin_a_mcg: float | None = None
    vitamin_c_mg: float | None = None
    vitamin_e_mg: float | None = None
    vitamin_k_mcg: float | None = None
    thiamin_mg: float | None = None
    riboflavin_mg: float | None = None
    niacin_mg: float | None = None
    vitamin_b6_mg: float | None = None
    folate_mcg: float | None = None
    vitamin_b12_mcg: float | None = None

    def amount(self, key: str) -> float:
        """Return the amount for a nutrient key, treating unknown values as zero."""
        if key not in NUTRIENT_KEYS:
            raise KeyError(key)
        return safe_number(getattr(self, key))


def safe_number(value: object, default: float = 0.0) -> float:
    """Coerce a value to a finite float, falling back to the default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        number = float(value)
        return number if math.isfinite(number) else default
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return default
        return number if math.isfinite(number) else default
    return default


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def round_to(value: float, digits: int) -> float:
    """Round half up to a fixed number of decimal places."""
    scale = 10**digits
    return round_half_up(value * scale) / scale


def empty_totals() -> dict[str, float]:
    """Return a zeroed mapping over every nutrient key."""
    return dict.fromkeys(NUTRIENT_KEYS, 0.0)


def format_nutrient_name(key: str) -> str:
    """Format a nutrient key for display: ``vitamin_c_mg`` -> ``Vitamin C (mg)``."""
    words = key.replace("_", " ")
    titled = re.sub(r"\b\w", lambda match: match.group(0).upper(), words)
    titled = re.sub(r" Mcg$", " (µg)", titled)
    titled = re.sub(r" Mg$", " (mg)", titled)
    return re.sub(r" G$", " (g)", titled)


def nutrient_unit(key: str) -> str:
    """Return the display unit for a nutrient key."""
    if key.endswith("_mg"):
        return "mg"
    if key.endswith("_mcg"):
        return "µg"
    if key.endswith("_g"):
        return "g"
    if key == "calories":
        return "kcal"
    return ""
