"""Crop metrics entity."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CropMetrics:
    """Represents measured crop growth indicators."""

    height: float = 80.0  # cm
    leaf_area_index: float = 3.2
    antioxidant_score: float = 85.0  # total antioxidant capacity

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CropMetrics":
        """Create CropMetrics from dictionary definition, defaulting missing fields."""
        default = cls()
        return cls(
            height=float(data.get("height", default.height)),
            leaf_area_index=float(data.get("leaf_area_index", default.leaf_area_index)),
            antioxidant_score=float(data.get("antioxidant_score", default.antioxidant_score)),
        )
