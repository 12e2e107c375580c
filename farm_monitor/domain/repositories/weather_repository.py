"""Weather repository interface."""

from abc import ABC, abstractmethod
from ..entities.current_weather import CurrentWeather
from ..entities.location import Location


class WeatherServiceError(RuntimeError):
    """Raised when a weather provider cannot return usable data."""


class WeatherRepository(ABC):
    """Abstract repository for current weather access."""

    @abstractmethod
    def get_weather_by_location(self, location: Location) -> CurrentWeather:
        """
        Retrieve current weather at a location.

        Args:
            location: Coordinates to query

        Returns:
            CurrentWeather entity

        Raises:
            WeatherServiceError: If the provider fails
        """
        pass

    @abstractmethod
    def get_weather_by_city(self, city: str) -> CurrentWeather:
        """
        Retrieve current weather for a city name.

        Args:
            city: City name, optionally with country code (e.g. 'Delhi,IN')

        Returns:
            CurrentWeather entity

        Raises:
            WeatherServiceError: If the provider fails
        """
        pass

    @abstractmethod
    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        """
        Resolve coordinates to a named location.

        Raises:
            WeatherServiceError: If the provider fails
        """
        pass
