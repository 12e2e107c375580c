"""Use case for generating actionable dashboard insights."""

import logging
from typing import List, Optional
from ..entities.crop_health_result import CropHealthResult
from ..entities.current_weather import CurrentWeather
from ..entities.health_issue import Severity
from ..entities.insight import Insight, InsightCategory

logger = logging.getLogger(__name__)

# Weather thresholds
HEAT_TEMPERATURE = 35.0
FROST_TEMPERATURE = 5.0
HUMID_THRESHOLD = 80.0
STRONG_WIND_SPEED = 15.0

# Health thresholds on a 0-10 scale
CRITICAL_HEALTH = 5.0
ATTENTION_HEALTH = 7.0
EXCELLENT_HEALTH = 8.5
EXCELLENT_GROWTH_RATE = 15.0


def health_out_of_ten(health: CropHealthResult) -> float:
    """Overall health expressed on the dashboard's 0-10 scale."""
    return health.overall_health * 10


class GenerateInsightsUseCase:
    """Use case to turn weather and crop health into prioritized insights."""

    def __init__(self, max_insights: int = 6):
        """
        Initialize use case.

        Args:
            max_insights: Maximum number of insights returned (default: 6)
        """
        self.max_insights = max_insights

    def _weather_insights(self, weather: CurrentWeather) -> List[Insight]:
        insights = []

        if weather.is_raining:
            insights.append(
                Insight(
                    title="Rainfall Alert",
                    description=(
                        f"It is currently raining in {weather.city}. "
                        "Consider turning off irrigation systems."
                    ),
                    priority=Severity.HIGH,
                    category=InsightCategory.WEATHER,
                )
            )

        if weather.temperature > HEAT_TEMPERATURE:
            insights.append(
                Insight(
                    title="High Temperature Warning",
                    description=(
                        f"Temperature is {round(weather.temperature)}°C. "
                        "Ensure adequate irrigation and provide shade."
                    ),
                    priority=Severity.HIGH,
                    category=InsightCategory.WEATHER,
                )
            )

        if weather.temperature < FROST_TEMPERATURE:
            insights.append(
                Insight(
                    title="Frost Risk Alert",
                    description=(
                        f"Temperature is {round(weather.temperature)}°C. "
                        "Protect crops with covers immediately."
                    ),
                    priority=Severity.CRITICAL,
                    category=InsightCategory.WEATHER,
                )
            )

        if weather.humidity > HUMID_THRESHOLD:
            insights.append(
                Insight(
                    title="High Humidity Alert",
                    description=(
                        f"Humidity is {weather.humidity:g}%. Monitor crops for fungal diseases."
                    ),
                    priority=Severity.MEDIUM,
                    category=InsightCategory.WEATHER,
                )
            )

        if weather.wind_speed > STRONG_WIND_SPEED:
            insights.append(
                Insight(
                    title="Strong Wind Warning",
                    description=(
                        f"Wind speed is {weather.wind_speed:g} m/s. "
                        "Secure equipment and monitor for damage."
                    ),
                    priority=Severity.MEDIUM,
                    category=InsightCategory.WEATHER,
                )
            )

        return insights

    def _health_insights(self, health: CropHealthResult) -> List[Insight]:
        insights = []

        first_recommendation = (
            health.recommendations[0]
            if health.recommendations
            else "Check crop health immediately."
        )
        for issue in health.critical_issues:
            insights.append(
                Insight(
                    title=f"Critical: {issue.description}",
                    description=f"Immediate action required. {first_recommendation}",
                    priority=Severity.CRITICAL,
                    category=InsightCategory.CROP,
                )
            )

        for issue in health.issues:
            if issue.severity != Severity.HIGH:
                continue
            insights.append(
                Insight(
                    title=f"High Priority: {issue.description}",
                    description="Address this issue soon to prevent further damage.",
                    priority=Severity.HIGH,
                    category=InsightCategory.CROP,
                )
            )

        score = health_out_of_ten(health)
        if score < CRITICAL_HEALTH:
            insights.append(
                Insight(
                    title="Crop Health Critical",
                    description=f"Overall health is {score:.1f}/10. Immediate intervention needed.",
                    priority=Severity.CRITICAL,
                    category=InsightCategory.CROP,
                )
            )
        elif score < ATTENTION_HEALTH:
            insights.append(
                Insight(
                    title="Crop Health Needs Attention",
                    description=(
                        f"Overall health is {score:.1f}/10. "
                        "Consider implementing recommendations."
                    ),
                    priority=Severity.HIGH,
                    category=InsightCategory.CROP,
                )
            )
        elif score >= EXCELLENT_HEALTH:
            insights.append(
                Insight(
                    title="Excellent Crop Health",
                    description=f"Crops are performing well with {score:.1f}/10 health score.",
                    priority=Severity.LOW,
                    category=InsightCategory.CROP,
                )
            )

        if health.growth_rate < 0:
            insights.append(
                Insight(
                    title="Negative Growth Rate",
                    description=(
                        f"Growth rate is {health.growth_rate:.1f}%. Crops may be under stress."
                    ),
                    priority=Severity.HIGH,
                    category=InsightCategory.CROP,
                )
            )
        elif health.growth_rate > EXCELLENT_GROWTH_RATE:
            insights.append(
                Insight(
                    title="Excellent Growth Rate",
                    description=f"Growth rate is {health.growth_rate:.1f}%. Crops are thriving!",
                    priority=Severity.LOW,
                    category=InsightCategory.CROP,
                )
            )

        return insights

    def execute(
        self,
        weather: Optional[CurrentWeather],
        health: Optional[CropHealthResult],
    ) -> List[Insight]:
        """
        Execute insight generation.

        Args:
            weather: Current weather, or None if unavailable
            health: Crop health result, or None if unavailable

        Returns:
            Insights sorted by priority (most urgent first), capped at max_insights
        """
        insights = []
        if weather is not None:
            insights.extend(self._weather_insights(weather))
        if health is not None:
            insights.extend(self._health_insights(health))

        insights.sort(key=lambda insight: insight.priority.rank, reverse=True)
        if len(insights) > self.max_insights:
            logger.info(f"Trimming {len(insights)} insights to {self.max_insights}")
        return insights[: self.max_insights]
