"""
Data models for the vineyard ETc system.

Contains DTOs for weather, location, crop stages, calculation results and
weather provider comparisons.
"""

from .weather import WeatherObservation, Location
from .crop import GrowthStage, CropCoefficient, SeasonalRequirement
from .calculation import (
    IrrigationMethod,
    SoilType,
    Confidence,
    CalculationRequest,
    IrrigationRecommendation,
    CalculationResult,
    EToComponents,
)
from .comparison import ProviderDay, EToDifference, EToAnalysis

__all__ = [
    "WeatherObservation",
    "Location",
    "GrowthStage",
    "CropCoefficient",
    "SeasonalRequirement",
    "IrrigationMethod",
    "SoilType",
    "Confidence",
    "CalculationRequest",
    "IrrigationRecommendation",
    "CalculationResult",
    "EToComponents",
    "ProviderDay",
    "EToDifference",
    "EToAnalysis",
]
