"""Crop health result entity."""

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .health_issue import HealthIssue, Severity
from .health_status import HealthStatus, health_grade


@dataclass(frozen=True)
class HealthDetails:
    """Composite sub-scores as integer percentages (0-100)."""

    nutrient_score: int
    growth_score: int
    environmental_score: int
    disease_score: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "nutrient_score": self.nutrient_score,
            "growth_score": self.growth_score,
            "environmental_score": self.environmental_score,
            "disease_score": self.disease_score,
        }


@dataclass(frozen=True)
class CropHealthResult:
    """Outcome of one crop health calculation."""

    overall_health: float  # 0-1
    growth_rate: float  # -25 to 25
    issues: Tuple[HealthIssue, ...]
    recommendations: Tuple[str, ...]
    details: HealthDetails

    @property
    def health_percent(self) -> int:
        """Overall health as a rounded percentage."""
        return math.floor(self.overall_health * 100 + 0.5)

    @property
    def status(self) -> HealthStatus:
        return HealthStatus.from_percent(self.health_percent)

    @property
    def grade(self) -> str:
        return health_grade(self.health_percent)

    @property
    def critical_issues(self) -> Tuple[HealthIssue, ...]:
        return tuple(i for i in self.issues if i.severity == Severity.CRITICAL)

    @property
    def has_critical_issues(self) -> bool:
        return bool(self.critical_issues)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "overall_health": self.overall_health,
            "growth_rate": self.growth_rate,
            "issues": [issue.to_dict() for issue in self.issues],
            "recommendations": list(self.recommendations),
            "details": self.details.to_dict(),
        }
