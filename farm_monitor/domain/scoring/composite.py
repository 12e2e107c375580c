"""Composite sub-scores built from individual efficiencies."""

from typing import Iterable

from ..entities.crop_metrics import CropMetrics
from ..entities.health_issue import HealthIssue
from ..entities.nutrient_reading import NutrientReading
from ..entities.quantity import Quantity
from ..entities.range_table import RangeTable, WHEAT_RANGE_TABLE
from ..entities.weather_reading import WeatherReading
from .efficiency import efficiency, wind_efficiency

# Total weighted impact that drives the disease score to zero
DISEASE_IMPACT_SCALE = 50.0
DISEASE_SCORE_FLOOR = 0.1


def _mean(values) -> float:
    values = list(values)
    return sum(values) / len(values)


def nutrient_score(
    nutrients: NutrientReading, table: RangeTable = WHEAT_RANGE_TABLE
) -> float:
    """Mean efficiency of nitrogen, phosphorus, potassium and pH."""
    return _mean(
        [
            efficiency(nutrients.nitrogen, table[Quantity.NITROGEN]),
            efficiency(nutrients.phosphorus, table[Quantity.PHOSPHORUS]),
            efficiency(nutrients.potassium, table[Quantity.POTASSIUM]),
            efficiency(nutrients.ph, table[Quantity.PH]),
        ]
    )


def growth_score(crop: CropMetrics, table: RangeTable = WHEAT_RANGE_TABLE) -> float:
    """Mean efficiency of height, leaf area index and antioxidant score."""
    return _mean(
        [
            efficiency(crop.height, table[Quantity.HEIGHT]),
            efficiency(crop.leaf_area_index, table[Quantity.LEAF_AREA_INDEX]),
            efficiency(crop.antioxidant_score, table[Quantity.ANTIOXIDANT_SCORE]),
        ]
    )


def environmental_score(
    weather: WeatherReading, table: RangeTable = WHEAT_RANGE_TABLE
) -> float:
    """Mean efficiency of temperature, humidity and rainfall plus the wind term."""
    return _mean(
        [
            efficiency(weather.temperature, table[Quantity.TEMPERATURE]),
            efficiency(weather.humidity, table[Quantity.HUMIDITY]),
            efficiency(weather.rainfall, table[Quantity.RAINFALL]),
            wind_efficiency(weather.wind_speed),
        ]
    )


def disease_score(issues: Iterable[HealthIssue]) -> float:
    """Score derived from severity-weighted issue impact, floored at 0.1."""
    total_impact = sum(issue.weighted_impact for issue in issues)
    return max(DISEASE_SCORE_FLOOR, 1.0 - total_impact / DISEASE_IMPACT_SCALE)
