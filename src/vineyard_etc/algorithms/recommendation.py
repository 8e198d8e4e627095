"""
Irrigation recommendation and confidence heuristics.

Turns a daily irrigation need into advice for a vineyard block, taking the
growth stage, irrigation system, soil and the day's weather into account.
"""

import logging
from typing import List, Optional

from ..core import constants
from ..models import (
    GrowthStage,
    IrrigationMethod,
    SoilType,
    Confidence,
    IrrigationRecommendation,
    WeatherObservation,
    Location,
)


# Hours of run time per mm of need, and schedule text, per irrigation system
_METHOD_DURATION_FACTORS = {
    IrrigationMethod.DRIP: 0.5,
    IrrigationMethod.SPRINKLER: 0.7,
    IrrigationMethod.SURFACE: 1.2,
}

_SOIL_DURATION_FACTORS = {
    SoilType.SANDY: 1.2,
    SoilType.LOAMY: 1.0,
    SoilType.CLAY: 0.8,
}


class IrrigationAdvisor:
    """Builds irrigation recommendations and rates input confidence."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize advisor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def recommend(
        self,
        irrigation_need: float,
        growth_stage: GrowthStage,
        irrigation_method: IrrigationMethod,
        soil_type: SoilType,
        weather: WeatherObservation
    ) -> IrrigationRecommendation:
        """
        Generate an irrigation recommendation.

        Stage thresholds replace the default one; heavy rainfall overrides
        every other rule.

        Args:
            irrigation_need: Net irrigation need (mm/day)
            growth_stage: Current growth stage
            irrigation_method: Irrigation system
            soil_type: Soil texture class
            weather: Weather observation of the day

        Returns:
            IrrigationRecommendation with duration rounded to 2 decimals
        """
        notes: List[str] = []
        should_irrigate = irrigation_need > constants.DEFAULT_IRRIGATION_THRESHOLD
        duration = 0.0
        frequency = "as needed"

        if growth_stage in (GrowthStage.FLOWERING, GrowthStage.FRUIT_SET):
            should_irrigate = irrigation_need > constants.CRITICAL_STAGE_THRESHOLD
            notes.append("Critical growth stage - maintain consistent moisture")

        if growth_stage == GrowthStage.VERAISON:
            should_irrigate = irrigation_need > constants.VERAISON_THRESHOLD
            notes.append("Veraison stage - controlled water stress improves fruit quality")

        if growth_stage == GrowthStage.DORMANT:
            should_irrigate = False
            notes.append("Dormant season - irrigation not recommended")

        if should_irrigate:
            duration = irrigation_need * _METHOD_DURATION_FACTORS[irrigation_method]
            frequency = self._method_frequency(irrigation_method, irrigation_need)

            duration *= _SOIL_DURATION_FACTORS[soil_type]
            if soil_type == SoilType.SANDY:
                frequency = "more frequent, shorter durations"
                notes.append("Sandy soil - increase frequency, reduce duration")
            elif soil_type == SoilType.CLAY:
                frequency = "less frequent, longer durations"
                notes.append("Clay soil - longer intervals, deeper watering")

        if weather.humidity > constants.HIGH_HUMIDITY_THRESHOLD:
            notes.append("High humidity - monitor for disease risk")

        if weather.wind_speed > constants.HIGH_WIND_THRESHOLD:
            notes.append("Windy conditions - may increase water loss")

        if (weather.rainfall or 0) > constants.HEAVY_RAINFALL_THRESHOLD:
            should_irrigate = False
            notes.append("Recent rainfall - irrigation not needed")

        self.logger.debug(
            f"Recommendation: irrigate={should_irrigate}, need={irrigation_need:.2f} mm/day, "
            f"duration={duration:.2f}h, frequency={frequency}"
        )

        return IrrigationRecommendation(
            should_irrigate=should_irrigate,
            duration=round(duration, 2),
            frequency=frequency,
            notes=notes
        )

    @staticmethod
    def _method_frequency(method: IrrigationMethod, irrigation_need: float) -> str:
        if method == IrrigationMethod.DRIP:
            return "daily" if irrigation_need > constants.DRIP_DAILY_THRESHOLD else "every 2 days"
        if method == IrrigationMethod.SPRINKLER:
            return "every 2-3 days"
        return "weekly"

    @staticmethod
    def confidence_score(weather: WeatherObservation, location: Location) -> int:
        """
        Score how completely the inputs were filled in.

        This rewards supplied, non-zero fields; it says nothing about sensor
        precision.
        """
        score = 0
        if weather.solar_radiation is not None:
            score += 2
        if weather.rainfall is not None:
            score += 1
        if weather.humidity > 0:
            score += 1
        if weather.wind_speed >= 0:
            score += 1
        if location.elevation > 0:
            score += 1
        if abs(location.latitude) > 0:
            score += 1
        return score

    @classmethod
    def confidence(cls, weather: WeatherObservation, location: Location) -> Confidence:
        """Map the completeness score to high (>=6), medium (>=4) or low."""
        score = cls.confidence_score(weather, location)
        if score >= 6:
            return Confidence.HIGH
        if score >= 4:
            return Confidence.MEDIUM
        return Confidence.LOW
