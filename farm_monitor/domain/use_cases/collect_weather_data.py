"""Use case for collecting current weather data."""

import logging
from typing import Optional
from ..entities.current_weather import CurrentWeather
from ..entities.location import Location
from ..repositories.weather_repository import WeatherRepository, WeatherServiceError

logger = logging.getLogger(__name__)

UNRESOLVED_CITY = "Current Location"
UNRESOLVED_COUNTRY = "Unknown"


class CollectWeatherDataUseCase:
    """Use case to collect current weather, falling back to a default city."""

    def __init__(
        self,
        repository: WeatherRepository,
        fallback_location: Location,
        fallback_city: str,
    ):
        """
        Initialize use case.

        Args:
            repository: Repository for weather data access
            fallback_location: Location used when the caller supplies none
            fallback_city: City queried when a lookup fails
        """
        self.repository = repository
        self.fallback_location = fallback_location
        self.fallback_city = fallback_city

    def resolve_location(self, latitude: float, longitude: float) -> Location:
        """
        Name the location at the given coordinates.

        Reverse geocoding failures keep the coordinates with placeholder names.
        """
        try:
            return self.repository.reverse_geocode(latitude, longitude)
        except WeatherServiceError as e:
            logger.warning(f"Reverse geocoding failed: {e}")
            return Location(latitude, longitude, UNRESOLVED_CITY, UNRESOLVED_COUNTRY)

    def _fallback(self) -> CurrentWeather:
        logger.info(f"Falling back to {self.fallback_city} weather")
        return self.repository.get_weather_by_city(self.fallback_city)

    def current(self, location: Optional[Location] = None) -> CurrentWeather:
        """
        Execute the use case for a location.

        Args:
            location: Location to query (default: fallback location)

        Returns:
            CurrentWeather entity, for the fallback city if the lookup failed

        Raises:
            WeatherServiceError: If the fallback lookup fails too
        """
        location = location or self.fallback_location
        if location.city is None:
            location = self.resolve_location(location.latitude, location.longitude)

        logger.info(f"Collecting current weather: location={location.display_name}")
        try:
            weather = self.repository.get_weather_by_location(location)
        except WeatherServiceError as e:
            logger.warning(f"Weather lookup for {location.display_name} failed: {e}")
            return self._fallback()

        logger.info(
            f"Collected weather for {weather.city}, {weather.country}: "
            f"{weather.temperature:g}°C"
        )
        return weather

    def by_city(self, city: str) -> CurrentWeather:
        """
        Execute the use case for a city name.

        Raises:
            WeatherServiceError: If the fallback lookup fails too
        """
        logger.info(f"Collecting current weather: city={city}")
        try:
            return self.repository.get_weather_by_city(city)
        except WeatherServiceError as e:
            logger.warning(f"Weather lookup for {city} failed: {e}")
            if city == self.fallback_city:
                raise
            return self._fallback()
