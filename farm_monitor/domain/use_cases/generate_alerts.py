"""Use case for generating dashboard alerts."""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional
from ..entities.alert import Alert
from ..entities.crop_health_result import CropHealthResult
from ..entities.current_weather import CurrentWeather
from ..entities.health_issue import Severity
from ..entities.insight import InsightCategory
from .generate_insights import (
    CRITICAL_HEALTH,
    FROST_TEMPERATURE,
    HEAT_TEMPERATURE,
    HUMID_THRESHOLD,
    STRONG_WIND_SPEED,
    health_out_of_ten,
)

logger = logging.getLogger(__name__)


def count_by_priority(alerts: Iterable[Alert]) -> Dict[str, int]:
    """Count alerts per priority, including priorities with no alerts."""
    counts = {severity.value: 0 for severity in Severity}
    for alert in alerts:
        counts[alert.priority.value] += 1
    return counts


class GenerateAlertsUseCase:
    """Use case to raise alerts from weather and crop health."""

    def _weather_alerts(self, weather: CurrentWeather, now: datetime) -> List[Alert]:
        alerts = []

        if weather.temperature > HEAT_TEMPERATURE:
            alerts.append(
                Alert(
                    id="temp-high",
                    title="High Temperature Alert",
                    description=(
                        f"Temperature in {weather.city} is {round(weather.temperature)}°C. "
                        "Crops may experience heat stress."
                    ),
                    category=InsightCategory.WEATHER,
                    priority=Severity.HIGH,
                    timestamp=now,
                )
            )

        if weather.temperature < FROST_TEMPERATURE:
            alerts.append(
                Alert(
                    id="temp-low",
                    title="Frost Risk Alert",
                    description=(
                        f"Temperature in {weather.city} is {round(weather.temperature)}°C. "
                        "Frost risk detected!"
                    ),
                    category=InsightCategory.WEATHER,
                    priority=Severity.CRITICAL,
                    timestamp=now,
                )
            )

        if weather.humidity > HUMID_THRESHOLD:
            alerts.append(
                Alert(
                    id="humidity-high",
                    title="High Humidity Alert",
                    description=f"Humidity is {weather.humidity:g}%. Monitor for fungal diseases.",
                    category=InsightCategory.WEATHER,
                    priority=Severity.MEDIUM,
                    timestamp=now,
                )
            )

        if weather.wind_speed > STRONG_WIND_SPEED:
            alerts.append(
                Alert(
                    id="wind-high",
                    title="Strong Wind Warning",
                    description=(
                        f"Wind speed is {weather.wind_speed:g} m/s. "
                        "Secure equipment and monitor crops."
                    ),
                    category=InsightCategory.WEATHER,
                    priority=Severity.MEDIUM,
                    timestamp=now,
                )
            )

        return alerts

    def _health_alerts(self, health: CropHealthResult, now: datetime) -> List[Alert]:
        alerts = []

        score = health_out_of_ten(health)
        if score < CRITICAL_HEALTH:
            alerts.append(
                Alert(
                    id="health-critical",
                    title="Critical Crop Health",
                    description=(
                        f"Crop health is {score:.1f}/10. Immediate intervention required!"
                    ),
                    category=InsightCategory.CROP,
                    priority=Severity.CRITICAL,
                    timestamp=now,
                )
            )

        if health.growth_rate < 0:
            alerts.append(
                Alert(
                    id="growth-negative",
                    title="Negative Growth Rate",
                    description=(
                        f"Growth rate is {health.growth_rate:.1f}%. Crops are under stress."
                    ),
                    category=InsightCategory.CROP,
                    priority=Severity.HIGH,
                    timestamp=now,
                )
            )

        for index, issue in enumerate(health.critical_issues):
            alerts.append(
                Alert(
                    id=f"issue-critical-{index}",
                    title=f"Critical: {issue.description}",
                    description="Immediate action required for this critical issue.",
                    category=InsightCategory.CROP,
                    priority=Severity.CRITICAL,
                    timestamp=now,
                )
            )

        return alerts

    def execute(
        self,
        weather: Optional[CurrentWeather],
        health: Optional[CropHealthResult],
        now: Optional[datetime] = None,
    ) -> List[Alert]:
        """
        Execute alert generation.

        Args:
            weather: Current weather, or None if unavailable
            health: Crop health result, or None if unavailable
            now: Timestamp for raised alerts (default: current time)

        Returns:
            Alerts sorted by priority, then newest first
        """
        now = now or datetime.now()

        alerts = []
        if weather is not None:
            alerts.extend(self._weather_alerts(weather, now))
        if health is not None:
            alerts.extend(self._health_alerts(health, now))

        alerts.sort(key=lambda alert: (alert.priority.rank, alert.timestamp), reverse=True)
        logger.info(f"Raised {len(alerts)} alerts: {count_by_priority(alerts)}")
        return alerts
