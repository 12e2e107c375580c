"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Report export directory
EXPORT_DIR = Path(os.getenv("FARM_MONITOR_EXPORT_DIR", BASE_DIR / "data" / "exports"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# OpenWeatherMap settings
OPENWEATHER_SETTINGS = {
    "api_key": os.getenv("OPENWEATHER_API_KEY", ""),
    "base_url": os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org"),
    "timeout": float(os.getenv("OPENWEATHER_TIMEOUT", "10")),
}

# Used when no location is given or a lookup fails (Delhi, India)
FALLBACK_LOCATION = {
    "latitude": 28.6139,
    "longitude": 77.2090,
    "city": "Delhi",
    "country": "IN",
}
FALLBACK_CITY = os.getenv("FARM_MONITOR_FALLBACK_CITY", "Delhi")

# Default field readings shown on the dashboard
DEFAULT_NUTRIENTS = {
    "nitrogen": 2.2,  # Slightly below optimal
    "phosphorus": 0.6,  # Slightly below optimal
    "potassium": 2.0,  # Above optimal
    "ph": 6.8,  # Near optimal
}

DEFAULT_WEATHER = {
    "temperature": 26.0,
    "humidity": 70.0,
    "rainfall": 45.0,
    "wind_speed": 3.5,
}

DEFAULT_CROP = {
    "height": 80.0,  # Below optimal
    "leaf_area_index": 3.2,  # Below optimal
    "antioxidant_score": 85.0,
}

OPTIMAL_WEATHER = {
    "temperature": 22.0,
    "humidity": 65.0,
    "rainfall": 50.0,
    "wind_speed": 5.0,
}

STRESS_WEATHER = {
    "temperature": 35.0,  # Heat stress
    "humidity": 95.0,  # Disease risk
    "rainfall": 150.0,  # Too much rain
    "wind_speed": 20.0,  # High wind
}

# Named scenarios for the formula report
TEST_SCENARIOS = {
    "default": {"nutrients": DEFAULT_NUTRIENTS, "weather": DEFAULT_WEATHER},
    "optimal": {
        "nutrients": {"nitrogen": 2.8, "phosphorus": 0.8, "potassium": 1.6, "ph": 7.0},
        "weather": OPTIMAL_WEATHER,
    },
    "deficient": {
        "nutrients": {"nitrogen": 1.5, "phosphorus": 0.2, "potassium": 0.8, "ph": 5.5},
        "weather": DEFAULT_WEATHER,
    },
    "excess": {
        "nutrients": {"nitrogen": 4.5, "phosphorus": 1.5, "potassium": 3.0, "ph": 8.5},
        "weather": DEFAULT_WEATHER,
    },
    "high_potassium": {
        "nutrients": {"nitrogen": 2.2, "phosphorus": 0.6, "potassium": 7.0, "ph": 6.8},
        "weather": DEFAULT_WEATHER,
    },
    "high_nitrogen": {
        "nutrients": {"nitrogen": 5.0, "phosphorus": 0.8, "potassium": 1.6, "ph": 7.0},
        "weather": DEFAULT_WEATHER,
    },
    "high_phosphorus": {
        "nutrients": {"nitrogen": 2.8, "phosphorus": 2.0, "potassium": 1.6, "ph": 7.0},
        "weather": DEFAULT_WEATHER,
    },
    "weather_stress": {"nutrients": DEFAULT_NUTRIENTS, "weather": STRESS_WEATHER},
}

# Insight settings
INSIGHT_SETTINGS = {
    "max_insights": 6,
}

# API settings
API_SETTINGS = {
    "title": "Farm Monitor API",
    "description": "Weather collection and crop health scoring for farm dashboards",
    "version": "1.0.0",
}
