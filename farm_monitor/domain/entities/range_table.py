"""Range table entity and the compiled-in wheat table."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Tuple, Union

from .optimal_range import OptimalRange
from .quantity import Quantity


class RangeTable(Mapping):
    """Read-only lookup of optimal ranges by quantity.

    Every quantity in ``Quantity`` must be present; ranges are validated by
    ``OptimalRange`` on construction.
    """

    def __init__(self, crop: str, ranges: Mapping[Quantity, OptimalRange]):
        missing = [q.value for q in Quantity if q not in ranges]
        if missing:
            raise ValueError(f"Range table for {crop} is missing: {', '.join(missing)}")
        self.crop = crop
        self._ranges = MappingProxyType(dict(ranges))

    @classmethod
    def from_dict(
        cls, crop: str, definitions: Mapping[str, Tuple[float, float, float]]
    ) -> "RangeTable":
        """Create RangeTable from {quantity_name: (min, optimal, max)} definitions."""
        return cls(
            crop,
            {
                Quantity(name): OptimalRange(minimum, optimal, maximum)
                for name, (minimum, optimal, maximum) in definitions.items()
            },
        )

    def __getitem__(self, quantity: Union[Quantity, str]) -> OptimalRange:
        try:
            return self._ranges[Quantity(quantity)]
        except ValueError:
            raise KeyError(quantity) from None

    def __iter__(self) -> Iterator[Quantity]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Plain dictionary view, keyed by quantity name."""
        return {
            q.value: {"min": r.minimum, "optimal": r.optimal, "max": r.maximum}
            for q, r in self._ranges.items()
        }

    def __repr__(self) -> str:
        return f"RangeTable(crop={self.crop!r}, quantities={len(self)})"


# Wheat ranges (dry-weight %, pH units, cm, index, score, Celsius, %, mm/month)
WHEAT_RANGE_DEFINITIONS = {
    "nitrogen": (2.0, 2.8, 4.0),
    "phosphorus": (0.3, 0.8, 1.2),
    "potassium": (1.0, 1.6, 2.5),
    "ph": (6.0, 7.0, 8.0),
    "height": (60.0, 100.0, 120.0),
    "leaf_area_index": (2.0, 4.0, 6.0),
    "antioxidant_score": (70.0, 100.0, 100.0),
    "temperature": (15.0, 22.0, 30.0),
    "humidity": (40.0, 65.0, 80.0),
    "rainfall": (20.0, 50.0, 100.0),
}

WHEAT_RANGE_TABLE = RangeTable.from_dict("wheat", WHEAT_RANGE_DEFINITIONS)
