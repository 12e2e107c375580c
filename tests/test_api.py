"""Tests for the HTTP API."""

import asyncio
import time

import httpx
import pytest
from conftest import FakeWeatherRepository, make_service
from fastapi.testclient import TestClient
from farm_monitor.presentation.api import main as api

from config.settings import TEST_SCENARIOS


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(api, "service", make_service(FakeWeatherRepository()))
    return TestClient(api.app)


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "Farm Monitor API"
    assert client.get("/health").json() == {"status": "healthy"}


def test_crop_health_optimal(client):
    response = client.post(
        "/crop-health",
        json={
            "nutrients": {"nitrogen": 2.8, "phosphorus": 0.8, "potassium": 1.6, "ph": 7.0},
            "weather": {"temperature": 22, "humidity": 65, "rainfall": 50, "wind_speed": 5},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["health_percent"] == 92
    assert body["status"] == "Excellent"
    assert body["grade"] == "A+"
    assert body["issues"] == []
    assert body["details"]["growth_score"] == 67


def test_crop_health_defaults(client):
    response = client.post("/crop-health", json={})
    assert response.status_code == 200
    assert response.json()["issues"] == []


def test_crop_health_reports_issues(client):
    response = client.post(
        "/crop-health",
        json={"nutrients": {"nitrogen": 0.5, "phosphorus": 0.8, "potassium": 1.6, "ph": 7.0}},
    )
    issue = response.json()["issues"][0]
    assert issue["type"] == "nutrient"
    assert issue["severity"] == "critical"


def test_crop_health_invalid_body(client):
    response = client.post("/crop-health", json={"nutrients": {"nitrogen": "lots"}})
    assert response.status_code == 422


def test_weather(client):
    response = client.get("/weather", params={"city": "Delhi"})
    assert response.status_code == 200
    assert response.json()["city"] == "Delhi"


def test_weather_upstream_failure(client, monkeypatch):
    failing = FakeWeatherRepository(cities={}, fail_location=True)
    monkeypatch.setattr(api, "service", make_service(failing))

    assert client.get("/weather").status_code == 502


def test_weather_not_configured(client, monkeypatch):
    monkeypatch.setattr(api, "service", make_service())

    assert client.get("/weather").status_code == 503
    assert client.get("/dashboard").status_code == 503


def test_dashboard(client):
    response = client.get("/dashboard", params={"rainfall": 45})
    assert response.status_code == 200
    assert response.json()["location"] == "Delhi, IN"


def test_scenarios(client):
    rows = client.get("/scenarios").json()["scenarios"]

    assert [row["scenario"] for row in rows] == list(TEST_SCENARIOS)
    assert rows[1]["health_percent"] == 92


@pytest.mark.parametrize(
    "body",
    [
        '{"nutrients": {"nitrogen": 1e309, "phosphorus": 0.8, "potassium": 1.6, "ph": 7.0}}',
        '{"nutrients": {"nitrogen": 2.8, "phosphorus": 0.8, "potassium": 1.6, "ph": NaN}}',
        '{"weather": {"temperature": -Infinity, "humidity": 65}}',
        '{"crop": {"height": NaN}}',
    ],
)
def test_crop_health_rejects_non_finite_numbers(client, body):
    response = client.post(
        "/crop-health", content=body, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422


def test_dashboard_rejects_non_finite_rainfall(client):
    assert client.get("/dashboard", params={"rainfall": "nan"}).status_code == 422


class SlowWeatherRepository(FakeWeatherRepository):
    """Fake provider whose location lookups block like a slow upstream."""

    def __init__(self, delay: float):
        super().__init__()
        self.delay = delay

    def get_weather_by_location(self, location):
        time.sleep(self.delay)
        return super().get_weather_by_location(location)


def test_weather_lookups_run_concurrently(monkeypatch):
    """Blocking weather calls must not serialize requests on the event loop."""
    monkeypatch.setattr(api, "service", make_service(SlowWeatherRepository(0.5)))

    async def fetch_together():
        transport = httpx.ASGITransport(app=api.app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            return await asyncio.gather(
                client.get("/weather"), client.get("/weather"), client.get("/health")
            )

    start = time.perf_counter()
    responses = asyncio.run(fetch_together())
    elapsed = time.perf_counter() - start

    assert [r.status_code for r in responses] == [200, 200, 200]
    assert elapsed < 0.9
