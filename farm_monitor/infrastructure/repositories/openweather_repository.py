"""OpenWeatherMap API weather repository implementation."""

import logging
from typing import Any, Dict
import requests
from ...domain.entities.current_weather import CurrentWeather
from ...domain.entities.location import Location
from ...domain.repositories.weather_repository import WeatherRepository, WeatherServiceError

logger = logging.getLogger(__name__)


class OpenWeatherRepository(WeatherRepository):
    """Repository for current weather from the OpenWeatherMap API."""

    WEATHER_PATH = "/data/2.5/weather"
    REVERSE_GEOCODE_PATH = "/geo/1.0/reverse"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org",
        timeout: float = 10.0,
    ):
        """
        Initialize repository.

        Args:
            api_key: OpenWeatherMap API key
            base_url: API root URL
            timeout: Request timeout in seconds
        """
        if not api_key:
            raise ValueError("OpenWeatherMap API key is not configured")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        """Perform a GET request and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        try:
            response = requests.get(
                url, params={**params, "appid": self.api_key}, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise WeatherServiceError(f"Weather API request failed: {e}") from e

        if not response.ok:
            raise WeatherServiceError(f"Weather API error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise WeatherServiceError("Weather API returned invalid JSON") from e

    @staticmethod
    def _parse_weather(payload: Dict[str, Any]) -> CurrentWeather:
        """Convert a current-weather payload into an entity."""
        try:
            main = payload["main"]
            wind = payload.get("wind", {})
            conditions = payload.get("weather", [])
            return CurrentWeather(
                city=payload.get("name", ""),
                country=payload.get("sys", {}).get("country", ""),
                latitude=float(payload["coord"]["lat"]),
                longitude=float(payload["coord"]["lon"]),
                temperature=float(main["temp"]),
                humidity=float(main["humidity"]),
                wind_speed=float(wind.get("speed", 0.0)),
                feels_like=(
                    float(main["feels_like"]) if main.get("feels_like") is not None else None
                ),
                pressure=float(main["pressure"]) if main.get("pressure") is not None else None,
                wind_deg=float(wind["deg"]) if wind.get("deg") is not None else None,
                conditions=tuple(c["main"] for c in conditions if "main" in c),
                description=conditions[0].get("description", "") if conditions else "",
            )
        except (KeyError, TypeError, ValueError) as e:
            raise WeatherServiceError(f"Unexpected weather payload: {e}") from e

    def get_weather_by_location(self, location: Location) -> CurrentWeather:
        """Retrieve current weather at coordinates."""
        logger.info(f"Fetching weather for {location.latitude}, {location.longitude}")
        payload = self._get(
            self.WEATHER_PATH,
            {"lat": location.latitude, "lon": location.longitude, "units": "metric"},
        )
        return self._parse_weather(payload)

    def get_weather_by_city(self, city: str) -> CurrentWeather:
        """Retrieve current weather for a city name."""
        logger.info(f"Fetching weather for {city}")
        payload = self._get(self.WEATHER_PATH, {"q": city, "units": "metric"})
        return self._parse_weather(payload)

    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        """Resolve coordinates to the nearest named place."""
        payload = self._get(
            self.REVERSE_GEOCODE_PATH, {"lat": latitude, "lon": longitude, "limit": 1}
        )
        place = payload[0] if isinstance(payload, list) and payload else {}
        return Location(
            latitude=latitude,
            longitude=longitude,
            city=place.get("name") or "Current Location",
            country=place.get("country") or "Unknown",
        )
