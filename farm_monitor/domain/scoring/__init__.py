"""Crop health scoring functions."""

from .efficiency import clamp, efficiency, round_half_up, wind_efficiency
from .composite import disease_score, environmental_score, growth_score, nutrient_score
from .issues import RECOMMENDATIONS, generate_issues, generate_recommendations

__all__ = [
    "clamp",
    "efficiency",
    "round_half_up",
    "wind_efficiency",
    "disease_score",
    "environmental_score",
    "growth_score",
    "nutrient_score",
    "RECOMMENDATIONS",
    "generate_issues",
    "generate_recommendations",
]
