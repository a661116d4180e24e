"""Domain models for per-day statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros for planned meals."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
