"""Use case for calculating crop health."""

import logging
from typing import Optional
from ..entities.crop_health_result import CropHealthResult, HealthDetails
from ..entities.crop_metrics import CropMetrics
from ..entities.nutrient_reading import NutrientReading
from ..entities.range_table import RangeTable, WHEAT_RANGE_TABLE
from ..entities.weather_reading import WeatherReading
from ..scoring.composite import disease_score, environmental_score, growth_score, nutrient_score
from ..scoring.efficiency import clamp, round_half_up
from ..scoring.issues import generate_issues, generate_recommendations

logger = logging.getLogger(__name__)

# Weights of the sub-scores in overall health
SCORE_WEIGHTS = {
    "nutrient": 0.35,
    "growth": 0.25,
    "environmental": 0.25,
    "disease": 0.15,
}

# Overall health at which growth rate is zero
BASELINE_HEALTH = 0.85
GROWTH_RATE_GAIN = 50.0
GROWTH_RATE_LIMIT = 25.0


def _percent(score: float) -> int:
    return round_half_up(score * 100)


def calculate_crop_health(
    nutrients: NutrientReading,
    weather: WeatherReading,
    crop: Optional[CropMetrics] = None,
    table: RangeTable = WHEAT_RANGE_TABLE,
) -> CropHealthResult:
    """
    Score crop health from nutrient, weather and crop inputs.

    Args:
        nutrients: Soil nutrient reading
        weather: Weather reading
        crop: Crop metrics (defaults used when None)
        table: Optimal ranges to judge against

    Returns:
        CropHealthResult with overall health, growth rate, issues,
        recommendations and rounded sub-scores
    """
    crop = crop or CropMetrics()

    nutrient = nutrient_score(nutrients, table)
    growth = growth_score(crop, table)
    environmental = environmental_score(weather, table)

    issues = generate_issues(nutrients, weather, crop, table)
    disease = disease_score(issues)

    overall_health = clamp(
        nutrient * SCORE_WEIGHTS["nutrient"]
        + growth * SCORE_WEIGHTS["growth"]
        + environmental * SCORE_WEIGHTS["environmental"]
        + disease * SCORE_WEIGHTS["disease"],
        0.0,
        1.0,
    )
    growth_rate = clamp(
        (overall_health - BASELINE_HEALTH) * GROWTH_RATE_GAIN,
        -GROWTH_RATE_LIMIT,
        GROWTH_RATE_LIMIT,
    )

    return CropHealthResult(
        overall_health=overall_health,
        growth_rate=growth_rate,
        issues=tuple(issues),
        recommendations=tuple(generate_recommendations(issues, nutrients, weather, table)),
        details=HealthDetails(
            nutrient_score=_percent(nutrient),
            growth_score=_percent(growth),
            environmental_score=_percent(environmental),
            disease_score=_percent(disease),
        ),
    )


class CalculateCropHealthUseCase:
    """Use case to score crop health against a crop's range table."""

    def __init__(self, range_table: RangeTable = WHEAT_RANGE_TABLE):
        """
        Initialize use case.

        Args:
            range_table: Optimal ranges for the monitored crop (default: wheat)
        """
        self.range_table = range_table

    def execute(
        self,
        nutrients: NutrientReading,
        weather: WeatherReading,
        crop: Optional[CropMetrics] = None,
    ) -> CropHealthResult:
        """
        Execute the use case.

        Args:
            nutrients: Soil nutrient reading
            weather: Weather reading
            crop: Crop metrics (defaults used when None)

        Returns:
            CropHealthResult entity
        """
        result = calculate_crop_health(nutrients, weather, crop, self.range_table)
        logger.debug(
            f"Crop health for {self.range_table.crop}: {result.health_percent}% "
            f"(growth {result.growth_rate:+.1f}%, {len(result.issues)} issues)"
        )
        return result
