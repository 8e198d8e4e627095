"""
Tests for input validation.
"""

import math
import pytest
from dataclasses import replace

from src.vineyard_etc.processing import InputValidator
from src.vineyard_etc.core.exceptions import (
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


@pytest.fixture
def validator():
    return InputValidator()


class TestWeatherValidation:
    """Test cases for weather checks."""

    def test_valid_input(self, validator, hot_day, vineyard):
        validator.validate(hot_day, vineyard)
        assert validator.check(hot_day, vineyard) == (True, [])

    @pytest.mark.parametrize("changes, error_cls", [
        ({"temperature_max": 61.0}, TemperatureRangeError),
        ({"temperature_min": -61.0}, TemperatureRangeError),
        ({"temperature_max": 10.0, "temperature_min": 20.0}, TemperatureOrderError),
        ({"humidity": 101.0}, HumidityRangeError),
        ({"humidity": -1.0}, HumidityRangeError),
        ({"wind_speed": -0.1}, WindSpeedRangeError),
        ({"wind_speed": 51.0}, WindSpeedRangeError),
        ({"rainfall": -1.0}, RainfallRangeError),
        ({"rainfall": None}, MissingRainfallError),
        ({"solar_radiation": 46.0}, SolarRadiationRangeError),
        ({"solar_radiation": None}, MissingSolarDataError),
        ({"solar_radiation": None, "solar_radiation_lux": -5.0}, SolarRadiationRangeError),
        ({"solar_radiation": None, "sunshine_hours": 17.0}, SolarRadiationRangeError),
    ])
    def test_named_errors(self, validator, hot_day, vineyard, changes, error_cls):
        with pytest.raises(error_cls):
            validator.validate(replace(hot_day, **changes), vineyard)

    def test_errors_are_value_errors(self, validator, hot_day, vineyard):
        with pytest.raises(ValueError):
            validator.validate(replace(hot_day, humidity=150.0), vineyard)

    def test_nan_rejected(self, validator, hot_day, vineyard):
        with pytest.raises(HumidityRangeError):
            validator.validate(replace(hot_day, humidity=math.nan), vineyard)

    def test_zero_boundaries_accepted(self, validator, hot_day, vineyard):
        weather = replace(hot_day, humidity=0.0, wind_speed=0.0, rainfall=0.0)
        validator.validate(weather, vineyard)

    def test_equal_temperatures_accepted(self, validator, hot_day, vineyard):
        validator.validate(replace(hot_day, temperature_max=20.0, temperature_min=20.0), vineyard)

    def test_order_not_checked_when_out_of_range(self, validator, hot_day, vineyard):
        weather = replace(hot_day, temperature_max=-70.0, temperature_min=20.0)
        errors = validator.find_errors(weather, vineyard)
        assert [type(e) for e in errors] == [TemperatureRangeError]

    def test_error_message_and_field(self, validator, hot_day, vineyard):
        with pytest.raises(WindSpeedRangeError) as exc_info:
            validator.validate(replace(hot_day, wind_speed=60.0), vineyard)
        assert exc_info.value.field == "wind_speed"
        assert exc_info.value.value == 60.0
        assert "wind_speed" in str(exc_info.value)
        assert "0-50 m/s" in str(exc_info.value)

    def test_first_error_raised(self, validator, hot_day, vineyard):
        weather = replace(hot_day, humidity=120.0, wind_speed=-1.0)
        with pytest.raises(HumidityRangeError):
            validator.validate(weather, vineyard)

    def test_check_collects_all_errors(self, validator, hot_day, vineyard):
        weather = replace(hot_day, humidity=120.0, rainfall=None, solar_radiation=None)
        is_valid, errors = validator.check(weather, replace(vineyard, latitude=95.0))
        assert not is_valid
        assert len(errors) == 4


class TestLocationValidation:
    """Test cases for location checks."""

    def test_latitude_out_of_range(self, validator, hot_day, vineyard):
        with pytest.raises(LatitudeRangeError):
            validator.validate(hot_day, replace(vineyard, latitude=-91.0))

    def test_elevation_out_of_range(self, validator, hot_day, vineyard):
        with pytest.raises(ElevationRangeError):
            validator.validate(hot_day, replace(vineyard, elevation=9500.0))

    def test_poles_accepted(self, validator, hot_day, vineyard):
        validator.validate(hot_day, replace(vineyard, latitude=90.0))
        validator.validate(hot_day, replace(vineyard, latitude=-90.0))

    def test_weather_errors_reported_first(self, validator, hot_day, vineyard):
        errors = validator.find_errors(
            replace(hot_day, humidity=120.0), replace(vineyard, elevation=-600.0)
        )
        assert isinstance(errors[0], HumidityRangeError)
        assert isinstance(errors[1], ElevationRangeError)
        assert all(isinstance(e, ValidationError) for e in errors)
