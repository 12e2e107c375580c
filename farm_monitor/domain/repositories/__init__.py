"""Repository interfaces."""

from .weather_repository import WeatherRepository, WeatherServiceError

__all__ = [
    "WeatherRepository",
    "WeatherServiceError",
]
