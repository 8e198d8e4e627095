"""
ETc calculator facade for vineyard irrigation planning.

This module provides the public interface of the engine: reference
evapotranspiration, crop coefficients, crop evapotranspiration with an
irrigation recommendation, growth stage lookup and a seasonal water budget.
Every operation is a pure function of its inputs.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..core import constants
from ..core.date_utils import DateUtils, DateLike
from ..core.exceptions import ValidationError
from ..models import (
    WeatherObservation,
    Location,
    GrowthStage,
    CropCoefficient,
    CalculationRequest,
    CalculationResult,
    SeasonalRequirement,
    EToComponents,
)
from ..processing import InputValidator
from .penman_monteith import PenmanMonteithCalculator
from .solar import SolarRadiationEstimator
from .recommendation import IrrigationAdvisor
from . import crop


class ETcCalculator:
    """
    High-level calculator for grapevine crop evapotranspiration.

    This class acts as a facade over validation, the Penman-Monteith engine,
    the Kc table and the irrigation advisor.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        timezone: str = "UTC"
    ):
        """
        Initialize ETc calculator.

        Args:
            logger: Logger instance
            timezone: Farm timezone, used when a current date is not given
        """
        self.logger = logger or logging.getLogger(__name__)
        self.timezone = timezone
        self.validator = InputValidator(self.logger)
        self.solar_estimator = SolarRadiationEstimator(logger=self.logger)
        self.advisor = IrrigationAdvisor(self.logger)
        self.date_utils = DateUtils(self.logger)

    def calculate_eto(self, weather: WeatherObservation, location: Location) -> float:
        """
        Calculate reference evapotranspiration (FAO-56 Penman-Monteith).

        Args:
            weather: Daily weather observation
            location: Site location

        Returns:
            ETo in mm/day (>= 0)

        Raises:
            ValidationError: If any input is out of range or missing
        """
        return self.calculate_eto_components(weather, location).eto

    def calculate_eto_components(
        self,
        weather: WeatherObservation,
        location: Location
    ) -> EToComponents:
        """
        Validate inputs and calculate ETo with all intermediate values.

        Raises:
            ValidationError: If any input is out of range or missing
        """
        try:
            self.validator.validate(weather, location)
        except ValidationError as e:
            self.logger.error(f"Invalid ETo input for {weather.date}: {e}")
            raise

        components = PenmanMonteithCalculator.calculate_with_components(
            weather, location, self.solar_estimator
        )

        self.logger.debug(
            f"ETo components - es={components.es:.3f} kPa, ea={components.ea:.3f} kPa, "
            f"Δ={components.delta:.4f}, γ={components.gamma:.4f}, Ra={components.ra:.2f}, "
            f"Rs={components.rs:.2f} ({components.solar_source}), Rso={components.rso:.2f}, "
            f"Rn={components.rn:.2f} MJ/m²/day"
        )
        if components.eto_raw < 0:
            self.logger.warning(
                f"Negative ETo ({components.eto_raw:.2f} mm/day) floored to 0 for {weather.date}"
            )

        return components

    @staticmethod
    def get_crop_coefficient(stage: Union[GrowthStage, str]) -> CropCoefficient:
        """
        Look up the grape crop coefficient for a growth stage.

        Args:
            stage: Growth stage (enum member or its value)

        Returns:
            CropCoefficient with kc and description
        """
        return crop.get_crop_coefficient(stage)

    def calculate_etc(self, request: Union[CalculationRequest, Mapping[str, Any]]) -> CalculationResult:
        """
        Calculate crop evapotranspiration and the irrigation recommendation.

        Args:
            request: CalculationRequest, or a mapping in the input contract format

        Returns:
            CalculationResult

        Raises:
            ValidationError: If any input is out of range or missing
        """
        if not isinstance(request, CalculationRequest):
            request = CalculationRequest.from_dict(request)

        weather = request.weather
        location = request.location

        self.logger.info(
            f"ETc calculation parameters - "
            f"Date: {weather.date.isoformat()}, "
            f"T_max: {weather.temperature_max:.2f}°C, "
            f"T_min: {weather.temperature_min:.2f}°C, "
            f"RH: {weather.humidity:.1f}%, "
            f"Wind: {weather.wind_speed:.2f} m/s, "
            f"Rain: {weather.rainfall if weather.rainfall is not None else 'n/a'} mm, "
            f"Lat: {location.latitude:.4f}°, "
            f"Alt: {location.elevation:.1f}m, "
            f"Stage: {request.growth_stage.value}, "
            f"Method: {request.irrigation_method.value}, "
            f"Soil: {request.soil_type.value}"
        )

        eto = self.calculate_eto(weather, location)
        kc = self.get_crop_coefficient(request.growth_stage).kc
        etc = eto * kc

        effective_rainfall = (weather.rainfall or 0) * constants.EFFECTIVE_RAINFALL_FACTOR
        irrigation_need = max(0.0, etc - effective_rainfall)

        recommendation = self.advisor.recommend(
            irrigation_need,
            request.growth_stage,
            request.irrigation_method,
            request.soil_type,
            weather
        )
        confidence = self.advisor.confidence(weather, location)

        self.logger.info(
            f"Calculated ETo={eto:.2f} mm/day, Kc={kc:.2f}, ETc={etc:.2f} mm/day, "
            f"need={irrigation_need:.2f} mm/day, irrigate={recommendation.should_irrigate}, "
            f"confidence={confidence.value}"
        )

        return CalculationResult(
            date=weather.date,
            eto=eto,
            kc=kc,
            etc=etc,
            irrigation_need=irrigation_need,
            irrigation_recommendation=recommendation,
            growth_stage=request.growth_stage,
            confidence=confidence
        )

    def determine_growth_stage(
        self,
        planting_date: Optional[DateLike],
        current_date: Optional[DateLike] = None
    ) -> GrowthStage:
        """
        Determine the growth stage from the calendar month.

        The planting date is accepted for interface compatibility but does not
        affect the result.

        Args:
            planting_date: Vine planting date (unused)
            current_date: Date to classify (defaults to today in the farm timezone)

        Returns:
            GrowthStage for the month of current_date
        """
        if current_date is None:
            current_date = self.date_utils.today(self.timezone)

        try:
            return crop.growth_stage_for_date(current_date)
        except ValueError as e:
            raise ValidationError(str(e), field="current_date", value=current_date)

    def calculate_seasonal_requirements(
        self,
        planting_date: Optional[DateLike],
        location: Optional[Location] = None,
        average_weather: Optional[Mapping[str, Any]] = None
    ) -> List[SeasonalRequirement]:
        """
        Rough seasonal water budget per growth stage.

        Uses a fixed 4 mm/day ETo for every stage; planting date, location and
        average weather do not change the result.

        Returns:
            Seven SeasonalRequirement entries in stage order
        """
        requirements = crop.seasonal_requirements()
        self.logger.debug(
            f"Seasonal requirement total: {sum(r.total_etc for r in requirements):.1f} mm"
        )
        return requirements
