"""Shared fixtures."""

from typing import Dict, List, Optional

import pytest

from farm_monitor.application.services import FarmMonitorService
from farm_monitor.domain.entities.current_weather import CurrentWeather
from farm_monitor.domain.entities.location import Location
from farm_monitor.domain.repositories.weather_repository import (
    WeatherRepository,
    WeatherServiceError,
)

from config.settings import (
    DEFAULT_CROP,
    DEFAULT_NUTRIENTS,
    DEFAULT_WEATHER,
    FALLBACK_CITY,
    FALLBACK_LOCATION,
    TEST_SCENARIOS,
)


def make_weather(
    city: str = "Delhi",
    country: str = "IN",
    temperature: float = 26.0,
    humidity: float = 70.0,
    wind_speed: float = 3.5,
    conditions=("Clear",),
) -> CurrentWeather:
    return CurrentWeather(
        city=city,
        country=country,
        latitude=28.61,
        longitude=77.21,
        temperature=temperature,
        humidity=humidity,
        wind_speed=wind_speed,
        conditions=tuple(conditions),
        description="clear sky",
    )


class FakeWeatherRepository(WeatherRepository):
    """In-memory weather provider that can be told to fail."""

    def __init__(
        self,
        cities: Optional[Dict[str, CurrentWeather]] = None,
        fail_location: bool = False,
        fail_geocode: bool = False,
    ):
        self.cities = cities if cities is not None else {"Delhi": make_weather()}
        self.fail_location = fail_location
        self.fail_geocode = fail_geocode
        self.calls: List[tuple] = []

    def get_weather_by_location(self, location: Location) -> CurrentWeather:
        self.calls.append(("location", location))
        if self.fail_location:
            raise WeatherServiceError("Weather API error: 500")
        return make_weather(city=location.city or "", country=location.country or "")

    def get_weather_by_city(self, city: str) -> CurrentWeather:
        self.calls.append(("city", city))
        if city not in self.cities:
            raise WeatherServiceError("Weather API error: 404")
        return self.cities[city]

    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        self.calls.append(("geocode", (latitude, longitude)))
        if self.fail_geocode:
            raise WeatherServiceError("Weather API error: 401")
        return Location(latitude, longitude, "Karnal", "IN")


@pytest.fixture
def fake_repo():
    return FakeWeatherRepository()


@pytest.fixture
def fallback_location():
    return Location(28.6139, 77.2090, "Delhi", "IN")


def make_service(weather_repo: Optional[WeatherRepository] = None) -> FarmMonitorService:
    """Service wired from settings, with an optional fake weather provider."""
    return FarmMonitorService(
        weather_repo=weather_repo,
        fallback_location=FALLBACK_LOCATION,
        fallback_city=FALLBACK_CITY,
        default_nutrients=DEFAULT_NUTRIENTS,
        default_weather=DEFAULT_WEATHER,
        default_crop=DEFAULT_CROP,
        scenarios=TEST_SCENARIOS,
    )
