"""Nutrient reading entity."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class NutrientReading:
    """Represents one soil-sample snapshot."""

    nitrogen: float  # % dry weight
    phosphorus: float  # % dry weight
    potassium: float  # % dry weight
    ph: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NutrientReading":
        """Create NutrientReading from dictionary definition."""
        return cls(
            nitrogen=float(data["nitrogen"]),
            phosphorus=float(data["phosphorus"]),
            potassium=float(data["potassium"]),
            ph=float(data["ph"]),
        )
