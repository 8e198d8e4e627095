"""
Vineyard ETc Estimation System

This package estimates grapevine crop evapotranspiration with the FAO-56
Penman-Monteith method and turns it into irrigation recommendations.
"""

__version__ = "0.1.0"
__description__ = "Vineyard crop evapotranspiration and irrigation recommendations"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "VineyardETcApp":
        from .main import VineyardETcApp
        return VineyardETcApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "VineyardETcApp",
]
