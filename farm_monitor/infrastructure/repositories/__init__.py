"""Concrete repository implementations."""

from .openweather_repository import OpenWeatherRepository

__all__ = [
    "OpenWeatherRepository",
]
