"""Health issue entity and its enumerations."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class IssueType(str, Enum):
    """Category of a detected health issue."""

    DISEASE = "disease"
    PEST = "pest"
    NUTRIENT = "nutrient"
    ENVIRONMENTAL = "environmental"


class Severity(str, Enum):
    """Severity of an issue; doubles as priority for insights and alerts."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def weight(self) -> float:
        """Weight applied to an issue's impact when deriving the disease score."""
        weights = {
            Severity.LOW: 0.1,
            Severity.MEDIUM: 0.3,
            Severity.HIGH: 0.6,
            Severity.CRITICAL: 1.0,
        }
        return weights[self]

    @property
    def rank(self) -> int:
        """Sort rank, higher is more urgent."""
        ranks = {
            Severity.LOW: 1,
            Severity.MEDIUM: 2,
            Severity.HIGH: 3,
            Severity.CRITICAL: 4,
        }
        return ranks[self]


@dataclass(frozen=True)
class HealthIssue:
    """Represents a detected deviation from optimal growing conditions."""

    type: IssueType
    severity: Severity
    description: str
    impact: int  # 1-10

    @property
    def weighted_impact(self) -> float:
        return self.impact * self.severity.weight

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "description": self.description,
            "impact": self.impact,
        }

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.description}"
