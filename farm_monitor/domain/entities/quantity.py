"""Measured quantity enumeration."""

from enum import Enum


class Quantity(str, Enum):
    """Quantities that have an agronomic optimal range."""

    NITROGEN = "nitrogen"
    PHOSPHORUS = "phosphorus"
    POTASSIUM = "potassium"
    PH = "ph"
    HEIGHT = "height"
    LEAF_AREA_INDEX = "leaf_area_index"
    ANTIOXIDANT_SCORE = "antioxidant_score"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    RAINFALL = "rainfall"
