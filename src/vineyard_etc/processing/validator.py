"""
Input validation module.

Checks weather observations and locations against the physical ranges the
Penman-Monteith chain accepts. Each failed constraint maps to its own
exception class.
"""

import logging
from typing import List, Optional, Tuple, Type

from ..core import constants
from ..core.exceptions import (
    ValidationError,
    TemperatureRangeError,
    TemperatureOrderError,
    HumidityRangeError,
    WindSpeedRangeError,
    RainfallRangeError,
    MissingRainfallError,
    SolarRadiationRangeError,
    MissingSolarDataError,
    LatitudeRangeError,
    ElevationRangeError,
)
from ..models import WeatherObservation, Location


def _out_of_range(value: float, bounds: Tuple[float, float]) -> bool:
    # NaN fails the comparison and is reported as out of range
    low, high = bounds
    return not (low <= value <= high)


class InputValidator:
    """Validate calculation inputs."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize input validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate(self, weather: WeatherObservation, location: Location) -> None:
        """
        Validate weather and location, raising on the first failure.

        Raises:
            ValidationError: A named subclass identifying the failed constraint
        """
        errors = self.find_errors(weather, location)
        if len(errors) > 1:
            self.logger.debug(f"Additional validation errors: {[str(e) for e in errors[1:]]}")
        if errors:
            raise errors[0]

    def check(self, weather: WeatherObservation, location: Location) -> Tuple[bool, List[str]]:
        """
        Validate without raising.

        Returns:
            Tuple of (is_valid, list_of_error_messages)
        """
        errors = self.find_errors(weather, location)
        return len(errors) == 0, [str(e) for e in errors]

    def find_errors(
        self,
        weather: WeatherObservation,
        location: Location
    ) -> List[ValidationError]:
        """Collect every validation failure, weather checks first."""
        return self.weather_errors(weather) + self.location_errors(location)

    def weather_errors(self, weather: WeatherObservation) -> List[ValidationError]:
        errors: List[ValidationError] = []

        temps_valid = True
        for name, value in (
            ("temperature_max", weather.temperature_max),
            ("temperature_min", weather.temperature_min),
        ):
            if _out_of_range(value, constants.TEMPERATURE_RANGE):
                temps_valid = False
                errors.append(self._range_error(
                    TemperatureRangeError, name, value, constants.TEMPERATURE_RANGE, "°C"
                ))

        if temps_valid and weather.temperature_max < weather.temperature_min:
            errors.append(TemperatureOrderError(
                f"temperature_max ({weather.temperature_max}°C) cannot be less than "
                f"temperature_min ({weather.temperature_min}°C)",
                field="temperature_max",
                value=weather.temperature_max
            ))

        if _out_of_range(weather.humidity, constants.HUMIDITY_RANGE):
            errors.append(self._range_error(
                HumidityRangeError, "humidity", weather.humidity, constants.HUMIDITY_RANGE, "%"
            ))

        if _out_of_range(weather.wind_speed, constants.WIND_SPEED_RANGE):
            errors.append(self._range_error(
                WindSpeedRangeError, "wind_speed", weather.wind_speed,
                constants.WIND_SPEED_RANGE, "m/s"
            ))

        if weather.rainfall is None:
            errors.append(MissingRainfallError("Rainfall is required (mm/day)", field="rainfall"))
        elif _out_of_range(weather.rainfall, constants.RAINFALL_RANGE):
            errors.append(self._range_error(
                RainfallRangeError, "rainfall", weather.rainfall,
                constants.RAINFALL_RANGE, "mm/day"
            ))

        if not weather.has_solar_data:
            errors.append(MissingSolarDataError(
                "Solar radiation data is required: provide solar radiation (MJ/m²/day), "
                "solar radiation in lux, or sunshine hours",
                field="solar_radiation"
            ))
        else:
            for name, value, bounds, unit in (
                ("solar_radiation", weather.solar_radiation,
                 constants.SOLAR_RADIATION_RANGE, "MJ/m²/day"),
                ("solar_radiation_lux", weather.solar_radiation_lux,
                 constants.SOLAR_LUX_RANGE, "lux"),
                ("sunshine_hours", weather.sunshine_hours,
                 constants.SUNSHINE_HOURS_RANGE, "hours"),
            ):
                if value is not None and _out_of_range(value, bounds):
                    errors.append(self._range_error(
                        SolarRadiationRangeError, name, value, bounds, unit
                    ))

        return errors

    def location_errors(self, location: Location) -> List[ValidationError]:
        errors: List[ValidationError] = []

        if _out_of_range(location.latitude, constants.LATITUDE_RANGE):
            errors.append(self._range_error(
                LatitudeRangeError, "latitude", location.latitude,
                constants.LATITUDE_RANGE, "degrees"
            ))

        if _out_of_range(location.elevation, constants.ELEVATION_RANGE):
            errors.append(self._range_error(
                ElevationRangeError, "elevation", location.elevation,
                constants.ELEVATION_RANGE, "m"
            ))

        return errors

    @staticmethod
    def _range_error(
        error_cls: Type[ValidationError],
        name: str,
        value: float,
        bounds: Tuple[float, float],
        unit: str
    ) -> ValidationError:
        low, high = bounds
        return error_cls(
            f"Invalid {name}: {value} (must be {low:g}-{high:g} {unit})",
            field=name,
            value=value
        )
