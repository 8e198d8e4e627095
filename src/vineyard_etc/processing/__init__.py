"""
Input processing for the vineyard ETc system.

Provides validation of weather observations and locations.
"""

from .validator import InputValidator

__all__ = [
    "InputValidator",
]
