"""Domain entities."""

from .quantity import Quantity
from .optimal_range import OptimalRange
from .range_table import RangeTable, WHEAT_RANGE_TABLE
from .nutrient_reading import NutrientReading
from .weather_reading import WeatherReading
from .crop_metrics import CropMetrics
from .health_issue import HealthIssue, IssueType, Severity
from .health_status import HealthStatus, health_grade
from .crop_health_result import CropHealthResult, HealthDetails
from .location import Location
from .current_weather import CurrentWeather
from .insight import Insight, InsightCategory
from .alert import Alert

__all__ = [
    "Quantity",
    "OptimalRange",
    "RangeTable",
    "WHEAT_RANGE_TABLE",
    "NutrientReading",
    "WeatherReading",
    "CropMetrics",
    "HealthIssue",
    "IssueType",
    "Severity",
    "HealthStatus",
    "health_grade",
    "CropHealthResult",
    "HealthDetails",
    "Location",
    "CurrentWeather",
    "Insight",
    "InsightCategory",
    "Alert",
]
