"""Use cases - core business operations."""

from .calculate_crop_health import CalculateCropHealthUseCase, calculate_crop_health
from .collect_weather_data import CollectWeatherDataUseCase
from .generate_insights import GenerateInsightsUseCase
from .generate_alerts import GenerateAlertsUseCase, count_by_priority

__all__ = [
    "CalculateCropHealthUseCase",
    "calculate_crop_health",
    "CollectWeatherDataUseCase",
    "GenerateInsightsUseCase",
    "GenerateAlertsUseCase",
    "count_by_priority",
]
