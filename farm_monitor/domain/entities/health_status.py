"""Health status classification."""

from enum import Enum


def _normalize_percent(percent: float) -> float:
    return max(0.0, min(100.0, percent))


class HealthStatus(str, Enum):
    """Qualitative band for an overall health percentage."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    CRITICAL = "Critical"

    @classmethod
    def from_percent(cls, percent: float) -> "HealthStatus":
        """Classify a 0-100 health percentage (values outside are clamped)."""
        percent = _normalize_percent(percent)
        if percent >= 85:
            return cls.EXCELLENT
        if percent >= 70:
            return cls.GOOD
        if percent >= 50:
            return cls.FAIR
        if percent >= 30:
            return cls.POOR
        return cls.CRITICAL


# Lower bound (inclusive) for each letter grade, best first
GRADE_THRESHOLDS = (
    (90, "A+"),
    (85, "A"),
    (80, "A-"),
    (75, "B+"),
    (70, "B"),
    (65, "B-"),
    (60, "C+"),
    (55, "C"),
    (50, "C-"),
    (40, "D"),
)


def health_grade(percent: float) -> str:
    """Letter grade for a 0-100 health percentage."""
    percent = _normalize_percent(percent)
    for threshold, grade in GRADE_THRESHOLDS:
        if percent >= threshold:
            return grade
    return "F"
