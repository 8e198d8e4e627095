"""
Exception hierarchy for the vineyard ETc engine.

Every input constraint has its own exception class so callers can tell exactly
which check failed. All of them derive from ValidationError, which is also a
ValueError.
"""

from typing import Any, Optional


class ETcError(Exception):
    """Base exception for the package."""


class ValidationError(ETcError, ValueError):
    """Input failed validation."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class TemperatureRangeError(ValidationError):
    """Temperature outside the accepted range."""


class TemperatureOrderError(ValidationError):
    """Maximum temperature is below the minimum temperature."""


class HumidityRangeError(ValidationError):
    """Relative humidity outside 0-100 %."""


class WindSpeedRangeError(ValidationError):
    """Wind speed outside the accepted range."""


class RainfallRangeError(ValidationError):
    """Rainfall outside the accepted range."""


class MissingRainfallError(ValidationError):
    """Rainfall was not supplied."""


class SolarRadiationRangeError(ValidationError):
    """A solar proxy (MJ, lux or sunshine hours) is out of range."""


class MissingSolarDataError(ValidationError):
    """None of the solar proxies was supplied."""


class LatitudeRangeError(ValidationError):
    """Latitude outside -90..90 degrees."""


class ElevationRangeError(ValidationError):
    """Elevation outside the accepted range."""


class WeatherServiceError(ETcError):
    """Weather provider request failed or returned unusable data."""
