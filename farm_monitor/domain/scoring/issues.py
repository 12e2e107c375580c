"""Detection of health issues and the matching recommendations."""

from typing import Iterable, List, Optional

from ..entities.crop_metrics import CropMetrics
from ..entities.health_issue import HealthIssue, IssueType, Severity
from ..entities.nutrient_reading import NutrientReading
from ..entities.quantity import Quantity
from ..entities.range_table import RangeTable, WHEAT_RANGE_TABLE
from ..entities.weather_reading import WeatherReading
from .efficiency import clamp, round_half_up

# Absolute thresholds beyond which an issue becomes critical (or high for humidity)
CRITICAL_PH_LOW = 5.5
CRITICAL_PH_HIGH = 8.5
CRITICAL_TEMPERATURE = 35.0
SEVERE_HUMIDITY = 90.0

RECOMMENDATIONS = {
    "nitrogen_low": "Apply nitrogen fertilizer (urea or ammonium sulfate)",
    "nitrogen_high": "Reduce nitrogen application and monitor for disease",
    "phosphorus_low": "Apply phosphorus fertilizer (DAP or triple superphosphate)",
    "potassium_low": "Apply potassium fertilizer (muriate of potash)",
    "ph_low": "Apply lime to increase soil pH",
    "ph_high": "Apply sulfur or organic matter to reduce pH",
    "temperature_high": "Increase irrigation frequency during heat stress",
    "humidity_high": "Monitor for fungal diseases and apply preventive fungicides",
    "critical": "Address critical issues immediately to prevent yield loss",
}


def _impact(deviation: float, factor: float, ceiling: int) -> int:
    return int(clamp(round_half_up(deviation * factor), 1, ceiling))


def generate_issues(
    nutrients: NutrientReading,
    weather: WeatherReading,
    crop: Optional[CropMetrics] = None,
    table: RangeTable = WHEAT_RANGE_TABLE,
) -> List[HealthIssue]:
    """
    Detect deviations from optimal conditions.

    Rules are evaluated independently in source-field order (nitrogen,
    phosphorus, potassium, pH, temperature, humidity), so several issues may
    be reported for one call. Crop metrics do not currently trigger issues.

    Args:
        nutrients: Soil nutrient reading
        weather: Weather reading
        crop: Crop metrics, if measured
        table: Optimal ranges to judge against

    Returns:
        List of HealthIssue entities in emission order
    """
    issues = []

    nitrogen = table[Quantity.NITROGEN]
    if nutrients.nitrogen < nitrogen.minimum:
        issues.append(
            HealthIssue(
                type=IssueType.NUTRIENT,
                severity=(
                    Severity.CRITICAL
                    if nutrients.nitrogen < nitrogen.minimum * 0.7
                    else Severity.HIGH
                ),
                description="Nitrogen deficiency detected - yellowing leaves expected",
                impact=_impact(nitrogen.minimum - nutrients.nitrogen, 3, 10),
            )
        )
    elif nutrients.nitrogen > nitrogen.maximum:
        issues.append(
            HealthIssue(
                type=IssueType.NUTRIENT,
                severity=(
                    Severity.CRITICAL
                    if nutrients.nitrogen > nitrogen.maximum * 1.5
                    else Severity.MEDIUM
                ),
                description="Excess nitrogen - increased disease susceptibility",
                impact=_impact(nutrients.nitrogen - nitrogen.maximum, 2, 10),
            )
        )

    phosphorus = table[Quantity.PHOSPHORUS]
    if nutrients.phosphorus < phosphorus.minimum:
        issues.append(
            HealthIssue(
                type=IssueType.NUTRIENT,
                severity=(
                    Severity.CRITICAL
                    if nutrients.phosphorus < phosphorus.minimum * 0.6
                    else Severity.HIGH
                ),
                description="Phosphorus deficiency - poor root development",
                impact=_impact(phosphorus.minimum - nutrients.phosphorus, 8, 10),
            )
        )

    potassium = table[Quantity.POTASSIUM]
    if nutrients.potassium < potassium.minimum:
        issues.append(
            HealthIssue(
                type=IssueType.NUTRIENT,
                severity=(
                    Severity.CRITICAL
                    if nutrients.potassium < potassium.minimum * 0.5
                    else Severity.MEDIUM
                ),
                description="Potassium deficiency - reduced disease resistance",
                impact=_impact(potassium.minimum - nutrients.potassium, 5, 10),
            )
        )
    elif nutrients.potassium > potassium.maximum:
        # Severity does not scale with the excess, unlike nitrogen
        issues.append(
            HealthIssue(
                type=IssueType.NUTRIENT,
                severity=Severity.LOW,
                description="Excess potassium - may inhibit calcium uptake",
                impact=_impact(nutrients.potassium - potassium.maximum, 2, 5),
            )
        )

    ph = table[Quantity.PH]
    if not ph.contains(nutrients.ph):
        issues.append(
            HealthIssue(
                type=IssueType.ENVIRONMENTAL,
                severity=(
                    Severity.CRITICAL
                    if nutrients.ph < CRITICAL_PH_LOW or nutrients.ph > CRITICAL_PH_HIGH
                    else Severity.MEDIUM
                ),
                description=(
                    f"Soil pH {nutrients.ph:.1f} is outside optimal range "
                    f"({ph.minimum:g}-{ph.maximum:g})"
                ),
                impact=_impact(abs(nutrients.ph - ph.optimal), 2, 8),
            )
        )

    temperature = table[Quantity.TEMPERATURE]
    if weather.temperature > temperature.maximum:
        issues.append(
            HealthIssue(
                type=IssueType.ENVIRONMENTAL,
                severity=(
                    Severity.CRITICAL
                    if weather.temperature > CRITICAL_TEMPERATURE
                    else Severity.HIGH
                ),
                description="High temperature stress - may reduce grain filling",
                impact=_impact(weather.temperature - temperature.maximum, 0.8, 10),
            )
        )

    humidity = table[Quantity.HUMIDITY]
    if weather.humidity > humidity.maximum:
        issues.append(
            HealthIssue(
                type=IssueType.DISEASE,
                severity=(
                    Severity.HIGH if weather.humidity > SEVERE_HUMIDITY else Severity.MEDIUM
                ),
                description="High humidity increases fungal disease risk",
                impact=_impact(weather.humidity - humidity.maximum, 0.2, 6),
            )
        )

    return issues


def generate_recommendations(
    issues: Iterable[HealthIssue],
    nutrients: NutrientReading,
    weather: WeatherReading,
    table: RangeTable = WHEAT_RANGE_TABLE,
) -> List[str]:
    """
    Recommendation strings for the conditions behind the issues.

    Emitted in source-field order; the critical-issue reminder comes last
    whenever at least one issue is critical.
    """
    recommendations = []

    nitrogen = table[Quantity.NITROGEN]
    if nutrients.nitrogen < nitrogen.minimum:
        recommendations.append(RECOMMENDATIONS["nitrogen_low"])
    elif nutrients.nitrogen > nitrogen.maximum:
        recommendations.append(RECOMMENDATIONS["nitrogen_high"])

    if nutrients.phosphorus < table[Quantity.PHOSPHORUS].minimum:
        recommendations.append(RECOMMENDATIONS["phosphorus_low"])

    if nutrients.potassium < table[Quantity.POTASSIUM].minimum:
        recommendations.append(RECOMMENDATIONS["potassium_low"])

    ph = table[Quantity.PH]
    if nutrients.ph < ph.minimum:
        recommendations.append(RECOMMENDATIONS["ph_low"])
    elif nutrients.ph > ph.maximum:
        recommendations.append(RECOMMENDATIONS["ph_high"])

    if weather.temperature > table[Quantity.TEMPERATURE].maximum:
        recommendations.append(RECOMMENDATIONS["temperature_high"])

    if weather.humidity > table[Quantity.HUMIDITY].maximum:
        recommendations.append(RECOMMENDATIONS["humidity_high"])

    if any(issue.severity == Severity.CRITICAL for issue in issues):
        recommendations.append(RECOMMENDATIONS["critical"])

    return recommendations
