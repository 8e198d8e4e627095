"""
Weather provider data models.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from .weather import WeatherObservation


@dataclass(frozen=True)
class ProviderDay:
    """One day of provider weather, converted for the ETc engine."""

    observation: WeatherObservation
    provider_eto: Optional[float]  # FAO-56 ETo reported by the provider (mm/day)
    elevation: Optional[float] = None  # Model grid elevation (m)
    timezone: Optional[str] = None


@dataclass(frozen=True)
class EToDifference:
    """Difference between our ETo and a provider's ETo."""

    difference: float  # mm/day, rounded to 2 decimals
    percentage_error: float  # %, rounded to 1 decimal
    is_accurate: bool


@dataclass(frozen=True)
class EToAnalysis:
    """Comparison report of our ETo against a provider's."""

    our_eto: float
    provider_eto: float
    difference: float
    percentage_error: float
    is_accurate: bool
    recommendation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ourETo": self.our_eto,
            "providerETo": self.provider_eto,
            "difference": self.difference,
            "percentageError": self.percentage_error,
            "isAccurate": self.is_accurate,
            "recommendation": self.recommendation,
        }
