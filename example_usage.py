"""Example usage of the farm monitor."""

import logging
from farm_monitor.domain.entities.nutrient_reading import NutrientReading
from farm_monitor.domain.entities.weather_reading import WeatherReading
from farm_monitor.presentation.container import build_service
from config.settings import EXPORT_DIR

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = build_service()

    # Example 1: Score a field reading
    print("=" * 60)
    print("Example 1: Scoring crop health")
    print("=" * 60)
    result = service.assess(
        NutrientReading(nitrogen=1.8, phosphorus=0.5, potassium=1.2, ph=6.2),
        WeatherReading(temperature=32.0, humidity=82.0, rainfall=40.0, wind_speed=6.0),
    )

    print(f"\nHealth: {result.health_percent}% ({result.status.value}, {result.grade})")
    print(f"Growth rate: {result.growth_rate:+.1f}%")
    for issue in result.issues:
        print(f"  {issue}")
    for rec in result.recommendations:
        print(f"  -> {rec}")

    # Example 2: Compare the built-in scenarios
    print("\n" + "=" * 60)
    print("Example 2: Scenario report")
    print("=" * 60)
    df = service.scenario_report()
    print(df[["health_percent", "status", "grade", "n_issues"]].to_string())
    path = service.export_report(df, EXPORT_DIR / "scenarios.csv")
    print(f"\nSaved to {path}")

    # Example 3: Live dashboard (needs OPENWEATHER_API_KEY)
    print("\n" + "=" * 60)
    print("Example 3: Dashboard")
    print("=" * 60)
    try:
        snapshot = service.dashboard(city="Delhi", rainfall=45.0)

        print(f"\nLocation: {snapshot['location']}")
        print(f"Health: {snapshot['health_percent']}% ({snapshot['status']})")
        for insight in snapshot["insights"]:
            print(f"  [{insight['priority']}] {insight['title']}")
    except Exception as e:
        logger.error(f"Dashboard failed: {e}", exc_info=True)


if __name__ == "__main__":
    main()
