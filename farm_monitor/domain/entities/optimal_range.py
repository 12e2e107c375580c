"""Optimal range entity."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class OptimalRange:
    """Deficiency / adequacy / toxicity boundaries for one quantity."""

    minimum: float
    optimal: float
    maximum: float

    def __post_init__(self):
        # The deficiency ramp divides by minimum
        if self.minimum <= 0:
            raise ValueError(f"Range minimum must be positive, got {self.minimum}")
        if not self.minimum <= self.optimal <= self.maximum:
            raise ValueError(
                f"Range must satisfy minimum <= optimal <= maximum, "
                f"got ({self.minimum}, {self.optimal}, {self.maximum})"
            )

    @property
    def bounds(self) -> Tuple[float, float]:
        """Get (minimum, maximum) as tuple."""
        return (self.minimum, self.maximum)

    def contains(self, value: float) -> bool:
        """Whether value lies within [minimum, maximum]."""
        low, high = self.bounds
        return low <= value <= high

    def __str__(self) -> str:
        return f"{self.minimum:g}-{self.maximum:g} (optimal {self.optimal:g})"
