"""Current weather entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .location import Location
from .weather_reading import WeatherReading


@dataclass(frozen=True)
class CurrentWeather:
    """Represents current conditions reported by a weather provider."""

    city: str
    country: str
    latitude: float
    longitude: float
    temperature: float  # Celsius
    humidity: float  # percentage
    wind_speed: float  # m/s
    feels_like: Optional[float] = None  # Celsius
    pressure: Optional[float] = None  # hPa
    wind_deg: Optional[float] = None
    conditions: Tuple[str, ...] = field(default_factory=tuple)  # e.g. ('Rain',)
    description: str = ""

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude, self.city, self.country)

    @property
    def is_raining(self) -> bool:
        return "Rain" in self.conditions

    def to_weather_reading(self, rainfall: float = 0.0) -> WeatherReading:
        """Build a scoring input; current conditions carry no monthly rainfall."""
        return WeatherReading(
            temperature=self.temperature,
            humidity=self.humidity,
            rainfall=rainfall,
            wind_speed=self.wind_speed,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "city": self.city,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "temperature": self.temperature,
            "feels_like": self.feels_like,
            "humidity": self.humidity,
            "pressure": self.pressure,
            "wind_speed": self.wind_speed,
            "wind_deg": self.wind_deg,
            "conditions": list(self.conditions),
            "description": self.description,
        }
