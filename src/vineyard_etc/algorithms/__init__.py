"""
Calculation algorithms for vineyard evapotranspiration.

Provides the Penman-Monteith engine, solar radiation estimation, the grape
crop coefficient table and the irrigation advisor.
"""

from .penman_monteith import PenmanMonteithCalculator
from .solar import SolarRadiationEstimator
from .recommendation import IrrigationAdvisor
from .crop import GRAPE_KC_VALUES, STAGE_DURATIONS
from .calculator import ETcCalculator

__all__ = [
    "PenmanMonteithCalculator",
    "SolarRadiationEstimator",
    "IrrigationAdvisor",
    "GRAPE_KC_VALUES",
    "STAGE_DURATIONS",
    "ETcCalculator",
]
