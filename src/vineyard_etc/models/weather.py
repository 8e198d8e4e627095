"""
Weather and location data models.

Contains the input records of an evapotranspiration calculation.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Dict, Any, Mapping

from ..core.date_utils import DateUtils
from ..core.exceptions import ValidationError


# Accepted input keys -> attribute name. camelCase keys are the farm
# management input contract; snake_case keys are accepted as-is.
_WEATHER_KEYS = {
    "date": "date",
    "temperatureMax": "temperature_max",
    "temperatureMin": "temperature_min",
    "humidity": "humidity",
    "windSpeed": "wind_speed",
    "rainfall": "rainfall",
    "solarRadiation": "solar_radiation",
    "solarRadiationLux": "solar_radiation_lux",
    "sunshineHours": "sunshine_hours",
}

_REQUIRED_WEATHER_FIELDS = ("date", "temperature_max", "temperature_min", "humidity", "wind_speed")


def _optional_float(value: Any, field: str) -> Optional[float]:
    """Convert a raw numeric input (number or numeric string) to float."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be numeric, got {value!r}", field=field, value=value)


@dataclass(frozen=True)
class WeatherObservation:
    """One day of weather for one location."""

    date: date
    temperature_max: float  # °C
    temperature_min: float  # °C
    humidity: float  # Mean relative humidity (%)
    wind_speed: float  # m/s at 2m height
    rainfall: Optional[float]  # mm/day (required, validated)
    solar_radiation: Optional[float] = None  # MJ m⁻² day⁻¹
    solar_radiation_lux: Optional[float] = None  # lux
    sunshine_hours: Optional[float] = None  # hours

    @property
    def day_of_year(self) -> int:
        return DateUtils.day_of_year(self.date)

    @property
    def has_solar_data(self) -> bool:
        """True if any of the solar proxies is present."""
        return any(
            v is not None
            for v in (self.solar_radiation, self.solar_radiation_lux, self.sunshine_hours)
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WeatherObservation":
        """
        Build an observation from a camelCase or snake_case mapping.

        Numeric strings are accepted; empty strings count as missing.

        Raises:
            ValidationError: If a required field is missing or not numeric
        """
        values: Dict[str, Any] = {}
        for key, raw in data.items():
            attr = _WEATHER_KEYS.get(key, key)
            if attr in _WEATHER_KEYS.values():
                values[attr] = raw

        missing = [f for f in _REQUIRED_WEATHER_FIELDS if values.get(f) in (None, "")]
        if missing:
            raise ValidationError(
                f"Missing required weather fields: {', '.join(missing)}",
                field=missing[0]
            )

        try:
            day = DateUtils.parse_date(values["date"])
        except ValueError as e:
            raise ValidationError(str(e), field="date", value=values["date"])

        numeric = {
            attr: _optional_float(values.get(attr), attr)
            for attr in _WEATHER_KEYS.values()
            if attr != "date"
        }
        return cls(date=day, **numeric)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "temperatureMax": self.temperature_max,
            "temperatureMin": self.temperature_min,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "rainfall": self.rainfall,
            "solarRadiation": self.solar_radiation,
            "solarRadiationLux": self.solar_radiation_lux,
            "sunshineHours": self.sunshine_hours,
        }


@dataclass(frozen=True)
class Location:
    """Geographic location of a vineyard block."""

    latitude: float  # degrees
    longitude: float  # degrees
    elevation: float  # meters above sea level

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Location":
        """
        Build a location from a mapping with latitude/longitude/elevation.

        Elevation defaults to 0 when absent.
        """
        missing = [k for k in ("latitude", "longitude") if data.get(k) in (None, "")]
        if missing:
            raise ValidationError(
                f"Missing required location fields: {', '.join(missing)}",
                field=missing[0]
            )
        latitude = _optional_float(data["latitude"], "latitude")
        longitude = _optional_float(data["longitude"], "longitude")
        elevation = _optional_float(data.get("elevation"), "elevation")
        return cls(
            latitude=latitude,
            longitude=longitude,
            elevation=elevation if elevation is not None else 0.0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "elevation": self.elevation,
        }
