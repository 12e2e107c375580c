"""CLI interface for the farm monitor."""

import argparse
import logging
import math
import sys
from ...domain.entities.crop_metrics import CropMetrics
from ...domain.entities.crop_health_result import CropHealthResult
from ...domain.entities.nutrient_reading import NutrientReading
from ...domain.entities.weather_reading import WeatherReading
from ...domain.repositories.weather_repository import WeatherServiceError
from ..container import build_service

from config.settings import (
    DEFAULT_CROP,
    DEFAULT_NUTRIENTS,
    DEFAULT_WEATHER,
    EXPORT_DIR,
    LOG_FORMAT,
    LOG_LEVEL,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def finite_float(value: str) -> float:
    """argparse type for readings; inf and nan are rejected."""
    number = float(value)
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"must be a finite number, got {value}")
    return number


def print_health(health: CropHealthResult) -> None:
    print("\n" + "=" * 50)
    print(" CROP HEALTH ")
    print("=" * 50)
    print(f" Health:      {health.health_percent}% ({health.status.value}, {health.grade})")
    print(f" Growth rate: {health.growth_rate:+.1f}%")
    details = health.details
    print(
        f" Nutrients {details.nutrient_score}% | Growth {details.growth_score}% | "
        f"Environment {details.environmental_score}% | Disease {details.disease_score}%"
    )
    print("-" * 50)

    if health.issues:
        print("Issues:")
        for issue in health.issues:
            print(f"  • {issue} ({issue.type.value}, impact {issue.impact})")
    else:
        print("No issues detected.")

    if health.recommendations:
        print("\nRecommendations:")
        for rec in health.recommendations:
            print(f"  • {rec}")

    print("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Farm Monitor - weather and crop health")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === assess: Score crop health from readings ===
    assess_parser = subparsers.add_parser("assess", help="Score crop health from field readings")
    for name, value in DEFAULT_NUTRIENTS.items():
        assess_parser.add_argument(
            f"--{name.replace('_', '-')}", type=finite_float, default=value, help=f"default: {value}"
        )
    for name, value in DEFAULT_WEATHER.items():
        assess_parser.add_argument(
            f"--{name.replace('_', '-')}", type=finite_float, default=value, help=f"default: {value}"
        )
    for name, value in DEFAULT_CROP.items():
        assess_parser.add_argument(
            f"--{name.replace('_', '-')}", type=finite_float, default=value, help=f"default: {value}"
        )

    # === weather: Current conditions ===
    weather_parser = subparsers.add_parser("weather", help="Show current weather")
    weather_parser.add_argument("--city", type=str, default=None, help="e.g. 'Delhi'")

    # === dashboard: Weather + health + insights + alerts ===
    dashboard_parser = subparsers.add_parser(
        "dashboard", help="Fetch weather, score crop health and list insights and alerts"
    )
    dashboard_parser.add_argument("--city", type=str, default=None, help="e.g. 'Delhi'")
    dashboard_parser.add_argument(
        "--rainfall", type=finite_float, default=0.0, help="Monthly rainfall in mm"
    )

    # === scenarios: Formula report over the built-in scenarios ===
    scenarios_parser = subparsers.add_parser(
        "scenarios", help="Score the built-in test scenarios"
    )
    scenarios_parser.add_argument(
        "--export",
        type=str,
        default=None,
        help=f"Save report to .csv or .xlsx (e.g. {EXPORT_DIR / 'scenarios.csv'})",
    )

    args = parser.parse_args()

    try:
        service = build_service()
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        sys.exit(1)

    # === Command: assess ===
    if args.command == "assess":
        nutrients = NutrientReading.from_dict({k: getattr(args, k) for k in DEFAULT_NUTRIENTS})
        weather = WeatherReading.from_dict({k: getattr(args, k) for k in DEFAULT_WEATHER})
        crop = CropMetrics.from_dict({k: getattr(args, k) for k in DEFAULT_CROP})
        print_health(service.assess(nutrients, weather, crop))

    # === Command: weather ===
    elif args.command == "weather":
        try:
            weather = service.current_weather(city=args.city)
        except (WeatherServiceError, RuntimeError) as e:
            logger.error(f"Weather lookup failed: {e}")
            sys.exit(1)

        print("\n" + "=" * 50)
        print(f" WEATHER: {weather.location.display_name} ")
        print("=" * 50)
        print(f" Temperature: {weather.temperature:g}°C")
        print(f" Humidity:    {weather.humidity:g}%")
        print(f" Wind:        {weather.wind_speed:g} m/s")
        if weather.description:
            print(f" Conditions:  {weather.description}")
        print("=" * 50)

    # === Command: dashboard ===
    elif args.command == "dashboard":
        try:
            snapshot = service.dashboard(city=args.city, rainfall=args.rainfall)
        except Exception as e:
            logger.error(f"Dashboard failed: {e}", exc_info=True)
            sys.exit(1)

        print("\n" + "=" * 50)
        print(f" FARM DASHBOARD: {snapshot['location']} ")
        print("=" * 50)
        print(f" Health: {snapshot['health_percent']}% ({snapshot['status']}, {snapshot['grade']})")
        counts = snapshot["alert_counts"]
        print(f" Alerts: {counts['critical']} critical, {counts['high']} high")
        print("-" * 50)
        if snapshot["insights"]:
            print("Insights:")
            for insight in snapshot["insights"]:
                print(f"  [{insight['priority']}] {insight['title']}")
                print(f"      {insight['description']}")
        else:
            print("All good! No immediate actions required.")
        print("=" * 50)

    # === Command: scenarios ===
    elif args.command == "scenarios":
        df = service.scenario_report()
        print(df.to_string())
        if args.export:
            try:
                path = service.export_report(df, args.export)
            except Exception as e:
                logger.error(f"Export failed: {e}", exc_info=True)
                sys.exit(1)
            print(f"\nReport saved to: {path}")


if __name__ == "__main__":
    main()
