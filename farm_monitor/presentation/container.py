"""Service wiring shared by the CLI and the HTTP API."""

import logging
from typing import Optional

from ..application.services.farm_monitor_service import FarmMonitorService
from ..infrastructure.repositories.openweather_repository import OpenWeatherRepository

from config.settings import (
    DEFAULT_CROP,
    DEFAULT_NUTRIENTS,
    DEFAULT_WEATHER,
    FALLBACK_CITY,
    FALLBACK_LOCATION,
    INSIGHT_SETTINGS,
    OPENWEATHER_SETTINGS,
    TEST_SCENARIOS,
)

logger = logging.getLogger(__name__)


def build_service() -> FarmMonitorService:
    """Wire the service; weather lookups are unavailable without an API key."""
    weather_repo: Optional[OpenWeatherRepository] = None
    if OPENWEATHER_SETTINGS["api_key"]:
        weather_repo = OpenWeatherRepository(**OPENWEATHER_SETTINGS)
    else:
        logger.warning("OPENWEATHER_API_KEY not set, weather lookups disabled")

    return FarmMonitorService(
        weather_repo=weather_repo,
        fallback_location=FALLBACK_LOCATION,
        fallback_city=FALLBACK_CITY,
        default_nutrients=DEFAULT_NUTRIENTS,
        default_weather=DEFAULT_WEATHER,
        default_crop=DEFAULT_CROP,
        scenarios=TEST_SCENARIOS,
        max_insights=INSIGHT_SETTINGS["max_insights"],
    )
