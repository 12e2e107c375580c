"""Alert entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from .health_issue import Severity
from .insight import InsightCategory


@dataclass(frozen=True)
class Alert:
    """Represents a dashboard alert raised from weather or crop health."""

    id: str
    title: str
    description: str
    category: InsightCategory
    priority: Severity
    timestamp: datetime
    resolved: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "priority": self.priority.value,
            "timestamp": self.timestamp.isoformat(),
            "resolved": self.resolved,
        }

    def __str__(self) -> str:
        return self.id
