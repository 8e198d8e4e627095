"""
Calculation request and result models.

Contains DTOs for the ETc calculation input and output.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, List, Dict, Any, Mapping

from ..core.exceptions import ValidationError
from .crop import GrowthStage
from .weather import WeatherObservation, Location


class IrrigationMethod(str, Enum):
    DRIP = "drip"
    SPRINKLER = "sprinkler"
    SURFACE = "surface"


class SoilType(str, Enum):
    SANDY = "sandy"
    LOAMY = "loamy"
    CLAY = "clay"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _parse_enum(enum_cls, value: Any, field_name: str):
    """Coerce a raw value to an enum member, raising ValidationError on failure."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"Invalid {field_name}: {value!r} (expected one of {allowed})",
            field=field_name,
            value=value
        )


@dataclass(frozen=True)
class CalculationRequest:
    """Everything the engine needs for one calculation."""

    weather: WeatherObservation
    growth_stage: GrowthStage
    location: Location
    irrigation_method: IrrigationMethod
    soil_type: SoilType
    farm_id: Optional[int] = None
    planting_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CalculationRequest":
        """
        Build a request from the farm management input contract.

        Expected keys: weatherData, growthStage, location, irrigationMethod,
        soilType, and optionally farmId and plantingDate. snake_case
        equivalents are accepted too.
        """
        weather = data.get("weatherData", data.get("weather"))
        location = data.get("location")
        if weather is None:
            raise ValidationError("Missing weatherData", field="weatherData")
        if location is None:
            raise ValidationError("Missing location", field="location")

        return cls(
            weather=WeatherObservation.from_dict(weather),
            growth_stage=_parse_enum(
                GrowthStage, data.get("growthStage", data.get("growth_stage")), "growth_stage"
            ),
            location=Location.from_dict(location),
            irrigation_method=_parse_enum(
                IrrigationMethod,
                data.get("irrigationMethod", data.get("irrigation_method")),
                "irrigation_method"
            ),
            soil_type=_parse_enum(SoilType, data.get("soilType", data.get("soil_type")), "soil_type"),
            farm_id=data.get("farmId", data.get("farm_id")),
            planting_date=data.get("plantingDate", data.get("planting_date")),
        )


@dataclass(frozen=True)
class IrrigationRecommendation:
    """Advice derived from the irrigation need."""

    should_irrigate: bool
    duration: float  # hours, rounded to 2 decimals
    frequency: str
    notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shouldIrrigate": self.should_irrigate,
            "duration": self.duration,
            "frequency": self.frequency,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class CalculationResult:
    """Result of an ETc calculation."""

    date: date
    eto: float  # mm/day
    kc: float
    etc: float  # mm/day
    irrigation_need: float  # mm/day
    irrigation_recommendation: IrrigationRecommendation
    growth_stage: GrowthStage
    confidence: Confidence

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "eto": self.eto,
            "kc": self.kc,
            "etc": self.etc,
            "irrigationNeed": self.irrigation_need,
            "irrigationRecommendation": self.irrigation_recommendation.to_dict(),
            "growthStage": self.growth_stage.value,
            "confidence": self.confidence.value,
        }


@dataclass(frozen=True)
class EToComponents:
    """Container for Penman-Monteith intermediate values."""

    # Final result
    eto: float  # mm/day, floored at 0
    eto_raw: float  # mm/day before flooring

    # Vapor pressure parameters
    tmean: float  # °C
    es_tmax: float  # kPa
    es_tmin: float  # kPa
    es: float  # Mean saturation vapor pressure (kPa)
    ea: float  # Actual vapor pressure (kPa)
    vpd: float  # Vapor pressure deficit (kPa)

    # Psychrometric parameters
    delta: float  # Slope of vapor pressure curve (kPa/°C)
    pressure: float  # Atmospheric pressure (kPa)
    gamma: float  # Psychrometric constant (kPa/°C)

    # Radiation parameters
    day_number: int
    ra: float  # Extraterrestrial radiation (MJ m⁻² day⁻¹)
    daylight_hours: float  # N
    rs: float  # Solar radiation (MJ m⁻² day⁻¹)
    rso: float  # Clear sky solar radiation (MJ m⁻² day⁻¹)
    rns: float  # Net shortwave radiation (MJ m⁻² day⁻¹)
    rnl: float  # Net longwave radiation (MJ m⁻² day⁻¹)
    rn: float  # Net radiation (MJ m⁻² day⁻¹)
    solar_source: str  # measured, lux, sunshine or hargreaves
