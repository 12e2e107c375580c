"""Weather reading entity."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class WeatherReading:
    """Represents one atmospheric snapshot used for scoring."""

    temperature: float  # Celsius
    humidity: float  # percentage
    rainfall: float  # mm
    wind_speed: float  # m/s

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherReading":
        """Create WeatherReading from dictionary definition."""
        return cls(
            temperature=float(data["temperature"]),
            humidity=float(data["humidity"]),
            rainfall=float(data.get("rainfall", 0.0)),
            wind_speed=float(data.get("wind_speed", 0.0)),
        )
