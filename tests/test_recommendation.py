"""
Tests for the irrigation advisor.
"""

import pytest
from dataclasses import replace

from src.vineyard_etc.algorithms import IrrigationAdvisor
from src.vineyard_etc.models import GrowthStage, IrrigationMethod, SoilType, Confidence


@pytest.fixture
def advisor():
    return IrrigationAdvisor()


class TestThresholds:
    """Stage-dependent irrigation thresholds."""

    @pytest.mark.parametrize("need, stage, expected", [
        (2.5, GrowthStage.BUDBREAK, True),
        (1.8, GrowthStage.BUDBREAK, False),
        (2.0, GrowthStage.HARVEST, False),
        (1.8, GrowthStage.FLOWERING, True),
        (1.8, GrowthStage.FRUIT_SET, True),
        (1.5, GrowthStage.FRUIT_SET, False),
        (2.5, GrowthStage.VERAISON, False),
        (3.5, GrowthStage.VERAISON, True),
        (8.0, GrowthStage.DORMANT, False),
    ])
    def test_should_irrigate(self, advisor, hot_day, need, stage, expected):
        recommendation = advisor.recommend(
            need, stage, IrrigationMethod.DRIP, SoilType.LOAMY, hot_day
        )
        assert recommendation.should_irrigate is expected

    def test_no_irrigation_defaults(self, advisor, hot_day):
        recommendation = advisor.recommend(
            1.0, GrowthStage.HARVEST, IrrigationMethod.SURFACE, SoilType.CLAY, hot_day
        )
        assert recommendation.duration == 0.0
        assert recommendation.frequency == "as needed"
        assert recommendation.notes == []

    def test_stage_notes(self, advisor, hot_day):
        veraison = advisor.recommend(
            5.0, GrowthStage.VERAISON, IrrigationMethod.DRIP, SoilType.LOAMY, hot_day
        )
        assert veraison.notes == [
            "Veraison stage - controlled water stress improves fruit quality"
        ]


class TestMethodAndSoil:
    """Duration and frequency per irrigation system and soil."""

    @pytest.mark.parametrize("method, need, duration, frequency", [
        (IrrigationMethod.DRIP, 5.0, 2.5, "daily"),
        (IrrigationMethod.DRIP, 3.0, 1.5, "every 2 days"),
        (IrrigationMethod.SPRINKLER, 3.0, 2.1, "every 2-3 days"),
        (IrrigationMethod.SURFACE, 3.0, 3.6, "weekly"),
    ])
    def test_methods(self, advisor, hot_day, method, need, duration, frequency):
        recommendation = advisor.recommend(
            need, GrowthStage.BUDBREAK, method, SoilType.LOAMY, hot_day
        )
        assert recommendation.duration == pytest.approx(duration)
        assert recommendation.frequency == frequency

    def test_sandy_soil(self, advisor, hot_day):
        recommendation = advisor.recommend(
            5.0, GrowthStage.BUDBREAK, IrrigationMethod.DRIP, SoilType.SANDY, hot_day
        )
        assert recommendation.duration == pytest.approx(3.0)
        assert recommendation.frequency == "more frequent, shorter durations"
        assert "Sandy soil - increase frequency, reduce duration" in recommendation.notes

    def test_clay_soil(self, advisor, hot_day):
        recommendation = advisor.recommend(
            5.0, GrowthStage.BUDBREAK, IrrigationMethod.DRIP, SoilType.CLAY, hot_day
        )
        assert recommendation.duration == pytest.approx(2.0)
        assert recommendation.frequency == "less frequent, longer durations"
        assert "Clay soil - longer intervals, deeper watering" in recommendation.notes

    def test_duration_rounded(self, advisor, hot_day):
        recommendation = advisor.recommend(
            3.333, GrowthStage.BUDBREAK, IrrigationMethod.SPRINKLER, SoilType.LOAMY, hot_day
        )
        assert recommendation.duration == 2.33


class TestWeatherNotes:
    """Weather advisories and the rainfall override."""

    def test_high_humidity_and_wind(self, advisor, hot_day):
        weather = replace(hot_day, humidity=85.0, wind_speed=6.0)
        recommendation = advisor.recommend(
            5.0, GrowthStage.BUDBREAK, IrrigationMethod.DRIP, SoilType.LOAMY, weather
        )
        assert recommendation.notes == [
            "High humidity - monitor for disease risk",
            "Windy conditions - may increase water loss",
        ]

    def test_thresholds_are_exclusive(self, advisor, hot_day):
        weather = replace(hot_day, humidity=80.0, wind_speed=5.0, rainfall=10.0)
        recommendation = advisor.recommend(
            5.0, GrowthStage.BUDBREAK, IrrigationMethod.DRIP, SoilType.LOAMY, weather
        )
        assert recommendation.should_irrigate
        assert recommendation.notes == []

    def test_rain_override_keeps_duration(self, advisor, hot_day):
        weather = replace(hot_day, rainfall=15.0)
        recommendation = advisor.recommend(
            5.0, GrowthStage.BUDBREAK, IrrigationMethod.DRIP, SoilType.LOAMY, weather
        )
        assert not recommendation.should_irrigate
        assert recommendation.duration == 2.5
        assert recommendation.notes[-1] == "Recent rainfall - irrigation not needed"


class TestConfidence:
    """Input completeness scoring."""

    def test_full_inputs(self, hot_day, vineyard):
        assert IrrigationAdvisor.confidence_score(hot_day, vineyard) == 7
        assert IrrigationAdvisor.confidence(hot_day, vineyard) == Confidence.HIGH

    def test_medium(self, hot_day, vineyard):
        weather = replace(hot_day, solar_radiation=None, sunshine_hours=9.0)
        location = replace(vineyard, elevation=0.0)
        assert IrrigationAdvisor.confidence_score(weather, location) == 4
        assert IrrigationAdvisor.confidence(weather, location) == Confidence.MEDIUM

    def test_low(self, hot_day, vineyard):
        weather = replace(hot_day, solar_radiation=None, sunshine_hours=9.0, humidity=0.0)
        location = replace(vineyard, latitude=0.0, elevation=0.0)
        assert IrrigationAdvisor.confidence(weather, location) == Confidence.LOW
