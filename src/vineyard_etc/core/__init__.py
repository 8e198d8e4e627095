"""
Core utilities for the vineyard ETc system.

Provides configuration management, logging, errors and date handling.
"""

from .config import Config
from .logger import setup_logger, set_log_level, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import (
    ETcError,
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
    WeatherServiceError,
)

__all__ = [
    "Config",
    "setup_logger",
    "set_log_level",
    "LoggerContext",
    "constants",
    "DateUtils",
    "ETcError",
    "ValidationError",
    "TemperatureRangeError",
    "TemperatureOrderError",
    "HumidityRangeError",
    "WindSpeedRangeError",
    "RainfallRangeError",
    "MissingRainfallError",
    "SolarRadiationRangeError",
    "MissingSolarDataError",
    "LatitudeRangeError",
    "ElevationRangeError",
    "WeatherServiceError",
]
