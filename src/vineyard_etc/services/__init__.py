"""
Services for weather retrieval and ETo cross-checking.
"""

from .weather_service import WeatherService
from .eto_comparison import compare_eto, analyze_eto

__all__ = [
    "WeatherService",
    "compare_eto",
    "analyze_eto",
]
