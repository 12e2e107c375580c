"""Insight entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .health_issue import Severity


class InsightCategory(str, Enum):
    """Source area of an insight or alert."""

    WEATHER = "weather"
    CROP = "crop"
    NUTRIENT = "nutrient"
    PEST = "pest"
    GENERAL = "general"
    SYSTEM = "system"


@dataclass(frozen=True)
class Insight:
    """Represents an actionable dashboard insight."""

    title: str
    description: str
    priority: Severity
    category: InsightCategory

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "priority": self.priority.value,
            "category": self.category.value,
        }
