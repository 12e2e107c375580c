"""Tests for GenerateAlertsUseCase."""

from datetime import datetime

from conftest import make_weather
from farm_monitor.domain.entities.health_issue import Severity
from farm_monitor.domain.entities.nutrient_reading import NutrientReading
from farm_monitor.domain.entities.weather_reading import WeatherReading
from farm_monitor.domain.use_cases.calculate_crop_health import calculate_crop_health
from farm_monitor.domain.use_cases.generate_alerts import GenerateAlertsUseCase, count_by_priority

NOW = datetime(2024, 3, 1, 9, 30)

STARVED = calculate_crop_health(
    NutrientReading(0.0, 0.0, 0.0, 0.0), WeatherReading(0.0, 0.0, 0.0, 0.0)
)
OPTIMAL = calculate_crop_health(
    NutrientReading(2.8, 0.8, 1.6, 7.0), WeatherReading(22.0, 65.0, 50.0, 5.0)
)


def test_no_alerts_for_calm_conditions():
    alerts = GenerateAlertsUseCase().execute(make_weather(), OPTIMAL, now=NOW)
    assert alerts == []
    assert count_by_priority(alerts) == {"low": 0, "medium": 0, "high": 0, "critical": 0}


def test_alert_order_and_counts():
    weather = make_weather(temperature=38.0, humidity=85.0, wind_speed=20.0)
    alerts = GenerateAlertsUseCase().execute(weather, STARVED, now=NOW)

    assert [str(alert) for alert in alerts] == [
        "health-critical",
        "issue-critical-0",
        "issue-critical-1",
        "issue-critical-2",
        "issue-critical-3",
        "temp-high",
        "growth-negative",
        "humidity-high",
        "wind-high",
    ]
    assert count_by_priority(alerts) == {"low": 0, "medium": 2, "high": 2, "critical": 5}
    assert all(alert.timestamp == NOW for alert in alerts)
    assert not any(alert.resolved for alert in alerts)


def test_frost_alert():
    alerts = GenerateAlertsUseCase().execute(make_weather(temperature=-3.0), None, now=NOW)

    assert len(alerts) == 1
    assert alerts[0].id == "temp-low"
    assert alerts[0].priority == Severity.CRITICAL
    assert "-3°C" in alerts[0].description


def test_alert_to_dict():
    alerts = GenerateAlertsUseCase().execute(make_weather(temperature=38.0), None, now=NOW)

    assert alerts[0].to_dict() == {
        "id": "temp-high",
        "title": "High Temperature Alert",
        "description": "Temperature in Delhi is 38°C. Crops may experience heat stress.",
        "category": "weather",
        "priority": "high",
        "timestamp": "2024-03-01T09:30:00",
        "resolved": False,
    }


def test_timestamp_defaults_to_now():
    before = datetime.now()
    alerts = GenerateAlertsUseCase().execute(make_weather(temperature=38.0), None)
    assert alerts[0].timestamp >= before
