"""Tests for issue detection and recommendations."""

import pytest
from farm_monitor.domain.entities.crop_metrics import CropMetrics
from farm_monitor.domain.entities.health_issue import IssueType, Severity
from farm_monitor.domain.entities.nutrient_reading import NutrientReading
from farm_monitor.domain.entities.weather_reading import WeatherReading
from farm_monitor.domain.scoring.issues import (
    RECOMMENDATIONS,
    generate_issues,
    generate_recommendations,
)

GOOD_NUTRIENTS = NutrientReading(2.8, 0.8, 1.6, 7.0)
GOOD_WEATHER = WeatherReading(26.0, 70.0, 45.0, 3.5)


def issues_for(nutrients=GOOD_NUTRIENTS, weather=GOOD_WEATHER):
    return generate_issues(nutrients, weather)


def only_issue(nutrients=GOOD_NUTRIENTS, weather=GOOD_WEATHER):
    issues = issues_for(nutrients, weather)
    assert len(issues) == 1
    return issues[0]


@pytest.mark.parametrize(
    "nitrogen,severity,impact",
    [
        (1.5, Severity.HIGH, 2),
        (1.0, Severity.CRITICAL, 3),
        (4.5, Severity.MEDIUM, 1),
        (5.0, Severity.MEDIUM, 2),
        (6.5, Severity.CRITICAL, 5),
        (20.0, Severity.CRITICAL, 10),
    ],
)
def test_nitrogen_rules(nitrogen, severity, impact):
    issue = only_issue(NutrientReading(nitrogen, 0.8, 1.6, 7.0))
    assert issue.type == IssueType.NUTRIENT
    assert issue.severity == severity
    assert issue.impact == impact


@pytest.mark.parametrize(
    "phosphorus,severity,impact",
    [(0.2, Severity.HIGH, 1), (0.1, Severity.CRITICAL, 2), (0.0, Severity.CRITICAL, 2)],
)
def test_phosphorus_deficiency(phosphorus, severity, impact):
    issue = only_issue(NutrientReading(2.8, phosphorus, 1.6, 7.0))
    assert issue.severity == severity
    assert issue.impact == impact
    assert issue.description == "Phosphorus deficiency - poor root development"


def test_phosphorus_excess_is_not_reported():
    assert issues_for(NutrientReading(2.8, 2.0, 1.6, 7.0)) == []


@pytest.mark.parametrize(
    "potassium,severity,impact",
    [(0.8, Severity.MEDIUM, 1), (0.4, Severity.CRITICAL, 3), (0.0, Severity.CRITICAL, 5)],
)
def test_potassium_deficiency(potassium, severity, impact):
    issue = only_issue(NutrientReading(2.8, 0.8, potassium, 7.0))
    assert issue.severity == severity
    assert issue.impact == impact


@pytest.mark.parametrize("potassium,impact", [(3.0, 1), (4.0, 3), (7.0, 5), (50.0, 5)])
def test_potassium_excess_is_always_low(potassium, impact):
    # Unlike nitrogen, the excess severity never escalates
    issue = only_issue(NutrientReading(2.8, 0.8, potassium, 7.0))
    assert issue.severity == Severity.LOW
    assert issue.impact == impact


@pytest.mark.parametrize(
    "ph,severity,impact",
    [
        (5.75, Severity.MEDIUM, 3),  # 2.5 rounds up
        (5.5, Severity.MEDIUM, 3),
        (5.0, Severity.CRITICAL, 4),
        (8.5, Severity.MEDIUM, 3),
        (9.0, Severity.CRITICAL, 4),
        (0.0, Severity.CRITICAL, 8),
    ],
)
def test_ph_rules(ph, severity, impact):
    issue = only_issue(NutrientReading(2.8, 0.8, 1.6, ph))
    assert issue.type == IssueType.ENVIRONMENTAL
    assert issue.severity == severity
    assert issue.impact == impact


def test_ph_description():
    issue = only_issue(NutrientReading(2.8, 0.8, 1.6, 5.5))
    assert issue.description == "Soil pH 5.5 is outside optimal range (6-8)"


def test_ph_bounds_are_inclusive():
    assert issues_for(NutrientReading(2.8, 0.8, 1.6, 6.0)) == []
    assert issues_for(NutrientReading(2.8, 0.8, 1.6, 8.0)) == []


@pytest.mark.parametrize(
    "temperature,severity,impact",
    [(31.0, Severity.HIGH, 1), (35.0, Severity.HIGH, 4), (40.0, Severity.CRITICAL, 8)],
)
def test_temperature_rule(temperature, severity, impact):
    issue = only_issue(weather=WeatherReading(temperature, 70.0, 45.0, 3.5))
    assert issue.type == IssueType.ENVIRONMENTAL
    assert issue.severity == severity
    assert issue.impact == impact


def test_cold_weather_raises_no_issue():
    assert issues_for(weather=WeatherReading(-5.0, 70.0, 45.0, 3.5)) == []


@pytest.mark.parametrize(
    "humidity,severity,impact",
    [(85.0, Severity.MEDIUM, 1), (95.0, Severity.HIGH, 3), (100.0, Severity.HIGH, 4)],
)
def test_humidity_rule(humidity, severity, impact):
    issue = only_issue(weather=WeatherReading(26.0, humidity, 45.0, 3.5))
    assert issue.type == IssueType.DISEASE
    assert issue.severity == severity
    assert issue.impact == impact


def test_issue_order_follows_source_fields():
    nutrients = NutrientReading(1.5, 0.2, 0.8, 5.5)
    weather = WeatherReading(38.0, 95.0, 150.0, 20.0)
    issues = generate_issues(nutrients, weather, CropMetrics())

    assert [issue.description.split()[0] for issue in issues] == [
        "Nitrogen",
        "Phosphorus",
        "Potassium",
        "Soil",
        "High",
        "High",
    ]
    assert issues[-2].type == IssueType.ENVIRONMENTAL
    assert issues[-1].type == IssueType.DISEASE


def test_crop_metrics_do_not_raise_issues():
    stunted = CropMetrics(height=10.0, leaf_area_index=0.5, antioxidant_score=5.0)
    assert generate_issues(GOOD_NUTRIENTS, GOOD_WEATHER, stunted) == []


def test_recommendations_for_deficient_soil():
    nutrients = NutrientReading(1.5, 0.2, 0.8, 5.5)
    issues = generate_issues(nutrients, GOOD_WEATHER)
    recommendations = generate_recommendations(issues, nutrients, GOOD_WEATHER)

    assert recommendations == [
        RECOMMENDATIONS["nitrogen_low"],
        RECOMMENDATIONS["phosphorus_low"],
        RECOMMENDATIONS["potassium_low"],
        RECOMMENDATIONS["ph_low"],
    ]


def test_recommendations_for_excess_and_stress():
    nutrients = NutrientReading(4.5, 1.5, 3.0, 8.5)
    weather = WeatherReading(35.0, 95.0, 150.0, 20.0)
    issues = generate_issues(nutrients, weather)
    recommendations = generate_recommendations(issues, nutrients, weather)

    assert recommendations == [
        RECOMMENDATIONS["nitrogen_high"],
        RECOMMENDATIONS["ph_high"],
        RECOMMENDATIONS["temperature_high"],
        RECOMMENDATIONS["humidity_high"],
    ]


def test_critical_recommendation_is_last():
    nutrients = NutrientReading(0.5, 0.8, 1.6, 7.0)
    issues = generate_issues(nutrients, GOOD_WEATHER)
    recommendations = generate_recommendations(issues, nutrients, GOOD_WEATHER)

    assert issues[0].severity == Severity.CRITICAL
    assert recommendations == [RECOMMENDATIONS["nitrogen_low"], RECOMMENDATIONS["critical"]]


def test_no_recommendations_without_issues():
    assert generate_recommendations([], GOOD_NUTRIENTS, GOOD_WEATHER) == []
