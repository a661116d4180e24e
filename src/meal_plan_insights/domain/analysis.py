"""Domain models for weekly nutrition analysis."""

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    """Deficiency tier, ordered by rank (most severe first)."""

    CRITICAL = "critical"
    MODERATE = "moderate"
    MILD = "mild"
    EXCESS = "excess"

    @property
    def rank(self) -> int:
        """Sort rank; lower sorts first."""
        return _SEVERITY_RANKS[self]

    @property
    def label(self) -> str:
        """Human-readable label."""
        return self.value.capitalize()


_SEVERITY_RANKS = {
    Severity.CRITICAL: 1,
    Severity.MODERATE: 2,
    Severity.MILD: 3,
    Severity.EXCESS: 4,
}


class RecommendationType(StrEnum):
    """Kind of recommendation produced from an analysis."""

    DEFICIENCY = "deficiency"
    EXCESS = "excess"
    SUCCESS = "success"


@dataclass(frozen=True)
class DeficiencyRecord:
    """A nutrient whose daily average falls outside the adequate band."""

    nutrient: str
    display_name: str
    intake: float
    target: float
    min: float
    max: float
    percentage: int
    percent_of_target: float
    unit: str
    severity: Severity
    category: str
    top_foods: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class Recommendation:
    """Actionable suggestion derived from deficiency records."""

    type: RecommendationType
    suggestion: str
    severity: str | None = None
    nutrient: str | None = None
    message: str | None = None
    current: int | None = None
    target: int | None = None
    shortfall: int | None = None
    max: int | None = None
    description: str | None = None
    top_foods: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisSummary:
    """Counts of nutrients by outcome."""

    total_nutrients: int
    adequate_nutrients: int
    deficient_nutrients: int
    excess_nutrients: int


@dataclass(frozen=True)
class AnalysisReport:
    """Complete weekly nutrition analysis."""

    weekly_totals: dict[str, float]
    daily_averages: dict[str, float]
    deficiencies: list[DeficiencyRecord]
    recommendations: list[Recommendation]
    health_score: int
    summary: AnalysisSummary
