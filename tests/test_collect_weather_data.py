"""Tests for CollectWeatherDataUseCase."""

import pytest
from conftest import FakeWeatherRepository, make_weather
from farm_monitor.domain.entities.location import Location
from farm_monitor.domain.repositories.weather_repository import WeatherServiceError
from farm_monitor.domain.use_cases.collect_weather_data import (
    UNRESOLVED_CITY,
    UNRESOLVED_COUNTRY,
    CollectWeatherDataUseCase,
)


def make_use_case(repo, fallback_location):
    return CollectWeatherDataUseCase(repo, fallback_location, "Delhi")


def test_current_defaults_to_fallback_location(fake_repo, fallback_location):
    weather = make_use_case(fake_repo, fallback_location).current()

    assert weather.city == "Delhi"
    assert fake_repo.calls == [("location", fallback_location)]


def test_current_resolves_unnamed_location(fake_repo, fallback_location):
    weather = make_use_case(fake_repo, fallback_location).current(Location(29.69, 76.99))

    assert weather.city == "Karnal"
    assert [kind for kind, _ in fake_repo.calls] == ["geocode", "location"]


def test_geocode_failure_keeps_coordinates(fallback_location):
    repo = FakeWeatherRepository(fail_geocode=True)
    use_case = make_use_case(repo, fallback_location)

    location = use_case.resolve_location(29.69, 76.99)
    assert location == Location(29.69, 76.99, UNRESOLVED_CITY, UNRESOLVED_COUNTRY)

    weather = use_case.current(Location(29.69, 76.99))
    assert weather.city == UNRESOLVED_CITY


def test_location_failure_falls_back_to_city(fallback_location):
    repo = FakeWeatherRepository(fail_location=True)
    weather = make_use_case(repo, fallback_location).current()

    assert weather.city == "Delhi"
    assert repo.calls[-1] == ("city", "Delhi")


def test_by_city(fake_repo, fallback_location):
    fake_repo.cities["Pune"] = make_weather(city="Pune")
    weather = make_use_case(fake_repo, fallback_location).by_city("Pune")

    assert weather.city == "Pune"
    assert fake_repo.calls == [("city", "Pune")]


def test_unknown_city_falls_back(fake_repo, fallback_location):
    weather = make_use_case(fake_repo, fallback_location).by_city("Atlantis")

    assert weather.city == "Delhi"
    assert fake_repo.calls == [("city", "Atlantis"), ("city", "Delhi")]


def test_fallback_failure_propagates(fallback_location):
    repo = FakeWeatherRepository(cities={}, fail_location=True)
    use_case = make_use_case(repo, fallback_location)

    with pytest.raises(WeatherServiceError):
        use_case.current()
    with pytest.raises(WeatherServiceError):
        use_case.by_city("Atlantis")


def test_failing_fallback_city_is_not_retried(fallback_location):
    repo = FakeWeatherRepository(cities={})

    with pytest.raises(WeatherServiceError):
        make_use_case(repo, fallback_location).by_city("Delhi")
    assert repo.calls == [("city", "Delhi")]
