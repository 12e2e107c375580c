"""Efficiency scoring of single measurements against their optimal range."""

import math

from ..entities.optimal_range import OptimalRange

# Efficiency reached at the edges of each segment
DEFICIENT_CEILING = 0.3
PLATEAU_FLOOR = 0.8
TOXIC_FLOOR = 0.1

# Wind speed (m/s) up to which there is no penalty
CALM_WIND_SPEED = 5.0
WIND_FLOOR = 0.2


def clamp(value: float, low: float, high: float) -> float:
    """Bound value to [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def efficiency(value: float, optimal_range: OptimalRange) -> float:
    """
    Normalized fitness of a measurement relative to its optimal range.

    Four segments:
        - deficient (below minimum): linear ramp from 0 to 0.3
        - building up (minimum to optimal): linear ramp from 0.3 to 1.0
        - plateau (optimal to maximum): gentle decay from 1.0 to 0.8
        - toxic (above maximum): decay from 0.8, floored at 0.1

    Args:
        value: Raw measurement; clamped to [0, 2 * maximum] before scoring
        optimal_range: Range the measurement is judged against

    Returns:
        Efficiency in [0, 1]
    """
    minimum, optimal, maximum = (
        optimal_range.minimum,
        optimal_range.optimal,
        optimal_range.maximum,
    )
    value = clamp(value, 0.0, maximum * 2)

    if value < minimum:
        return value / minimum * DEFICIENT_CEILING

    if value <= optimal:
        if optimal == minimum:
            return 1.0
        return DEFICIENT_CEILING + (value - minimum) / (optimal - minimum) * 0.7

    if value <= maximum:
        # optimal < value <= maximum, so maximum > optimal here
        return 1.0 - (value - optimal) / (maximum - optimal) * 0.2

    excess_ratio = (value - maximum) / maximum
    return max(TOXIC_FLOOR, PLATEAU_FLOOR - excess_ratio * 0.7)


def wind_efficiency(wind_speed: float) -> float:
    """Linear penalty for wind above calm conditions, floored at 0.2."""
    if wind_speed <= CALM_WIND_SPEED:
        return 1.0
    return max(WIND_FLOOR, 1.0 - (wind_speed - CALM_WIND_SPEED) / 15)
