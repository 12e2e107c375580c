"""Main service orchestrating weather collection and crop health assessment."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import pandas as pd

from ...domain.entities.crop_health_result import CropHealthResult
from ...domain.entities.crop_metrics import CropMetrics
from ...domain.entities.current_weather import CurrentWeather
from ...domain.entities.health_issue import Severity
from ...domain.entities.location import Location
from ...domain.entities.nutrient_reading import NutrientReading
from ...domain.entities.range_table import RangeTable, WHEAT_RANGE_TABLE
from ...domain.entities.weather_reading import WeatherReading
from ...domain.repositories.weather_repository import WeatherRepository

# Use cases
from ...domain.use_cases.calculate_crop_health import CalculateCropHealthUseCase
from ...domain.use_cases.collect_weather_data import CollectWeatherDataUseCase
from ...domain.use_cases.generate_alerts import GenerateAlertsUseCase, count_by_priority
from ...domain.use_cases.generate_insights import GenerateInsightsUseCase

logger = logging.getLogger(__name__)


class FarmMonitorService:
    """Orchestrates weather collection, crop health scoring, insights and alerts."""

    def __init__(
        self,
        weather_repo: Optional[WeatherRepository],
        fallback_location: Dict[str, Any],
        fallback_city: str,
        default_nutrients: Dict[str, float],
        default_weather: Dict[str, float],
        default_crop: Optional[Dict[str, float]] = None,
        scenarios: Optional[Dict[str, Dict[str, Dict[str, float]]]] = None,
        range_table: RangeTable = WHEAT_RANGE_TABLE,
        max_insights: int = 6,
    ):
        self.weather_repo = weather_repo

        # Convert definitions to domain entities
        self.fallback_location = Location(**fallback_location)
        self.default_nutrients = NutrientReading.from_dict(default_nutrients)
        self.default_weather = WeatherReading.from_dict(default_weather)
        self.default_crop = CropMetrics.from_dict(default_crop or {})
        self.scenarios = scenarios or {}
        self.range_table = range_table

        # Use cases
        self.collect_weather_uc: Optional[CollectWeatherDataUseCase] = None
        if weather_repo is not None:
            self.collect_weather_uc = CollectWeatherDataUseCase(
                weather_repo, self.fallback_location, fallback_city
            )
        self.crop_health_uc = CalculateCropHealthUseCase(range_table)
        self.insights_uc = GenerateInsightsUseCase(max_insights=max_insights)
        self.alerts_uc = GenerateAlertsUseCase()

    def assess(
        self,
        nutrients: Optional[NutrientReading] = None,
        weather: Optional[WeatherReading] = None,
        crop: Optional[CropMetrics] = None,
    ) -> CropHealthResult:
        """Score crop health, substituting configured defaults for missing inputs."""
        return self.crop_health_uc.execute(
            nutrients or self.default_nutrients,
            weather or self.default_weather,
            crop or self.default_crop,
        )

    def current_weather(
        self, city: Optional[str] = None, location: Optional[Location] = None
    ) -> CurrentWeather:
        """Current weather for a city, a location, or the fallback location."""
        if self.collect_weather_uc is None:
            raise RuntimeError("Weather repository not configured. Set OPENWEATHER_API_KEY.")
        if city:
            return self.collect_weather_uc.by_city(city)
        return self.collect_weather_uc.current(location)

    def dashboard(
        self,
        city: Optional[str] = None,
        location: Optional[Location] = None,
        nutrients: Optional[NutrientReading] = None,
        crop: Optional[CropMetrics] = None,
        rainfall: float = 0.0,
    ) -> Dict[str, Any]:
        """
        Build a full dashboard snapshot.

        Args:
            city: City to fetch weather for (takes precedence over location)
            location: Coordinates to fetch weather for
            nutrients: Soil reading (default: configured reading)
            crop: Crop metrics (default: configured metrics)
            rainfall: Monthly rainfall in mm; current conditions do not carry it

        Returns:
            Dictionary with weather, crop health, insights and alerts
        """
        logger.info("=== Building dashboard snapshot ===")

        weather = self.current_weather(city=city, location=location)
        health = self.assess(nutrients, weather.to_weather_reading(rainfall), crop)
        insights = self.insights_uc.execute(weather, health)
        alerts = self.alerts_uc.execute(weather, health)

        logger.info(
            f"Dashboard for {weather.location.display_name}: health {health.health_percent}%, "
            f"{len(insights)} insights, {len(alerts)} alerts"
        )
        return {
            "location": weather.location.display_name,
            "weather": weather.to_dict(),
            "crop_health": health.to_dict(),
            "health_percent": health.health_percent,
            "status": health.status.value,
            "grade": health.grade,
            "insights": [insight.to_dict() for insight in insights],
            "alerts": [alert.to_dict() for alert in alerts],
            "alert_counts": count_by_priority(alerts),
        }

    def scenario_report(
        self, scenarios: Optional[Dict[str, Dict[str, Dict[str, float]]]] = None
    ) -> pd.DataFrame:
        """
        Score each named scenario and tabulate the results.

        Args:
            scenarios: Mapping of scenario name to 'nutrients', 'weather' and
                optional 'crop' dictionaries (default: configured scenarios)

        Returns:
            DataFrame with one row per scenario
        """
        scenarios = scenarios if scenarios is not None else self.scenarios
        if not scenarios:
            logger.warning("No scenarios to score")
            return pd.DataFrame()
        logger.info(f"Scoring {len(scenarios)} scenarios")

        rows: List[Dict[str, Any]] = []
        for name, scenario in scenarios.items():
            crop = scenario.get("crop")
            health = self.assess(
                NutrientReading.from_dict(scenario["nutrients"]),
                WeatherReading.from_dict(scenario["weather"]),
                CropMetrics.from_dict(crop) if crop is not None else None,
            )
            severities = [issue.severity for issue in health.issues]
            rows.append(
                {
                    "scenario": name,
                    "health_percent": health.health_percent,
                    "growth_rate": round(health.growth_rate, 2),
                    "status": health.status.value,
                    "grade": health.grade,
                    "n_issues": len(health.issues),
                    "n_critical": severities.count(Severity.CRITICAL),
                    "n_recommendations": len(health.recommendations),
                    **health.details.to_dict(),
                }
            )

        return pd.DataFrame(rows).set_index("scenario")

    def export_report(self, df: pd.DataFrame, path: Union[str, Path]) -> Path:
        """Save a report as Excel (.xlsx) or CSV (any other suffix)."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if path.suffix == ".xlsx":
            df.to_excel(path, engine="openpyxl")
        else:
            df.to_csv(path)

        logger.info(f"Report saved to {path}")
        return path
