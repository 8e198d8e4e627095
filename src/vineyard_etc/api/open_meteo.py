"""
Open-Meteo forecast operations.

Fetches daily agricultural weather variables, including the provider's own
FAO-56 reference evapotranspiration.
"""

import logging
from datetime import date
from typing import Dict, Any, Optional


DAILY_VARIABLES = [
    "temperature_2m_max",
    "temperature_2m_min",
    "relative_humidity_2m_mean",
    "wind_speed_10m_max",
    "precipitation_sum",
    "shortwave_radiation_sum",
    "sunshine_duration",
    "et0_fao_evapotranspiration",
]


class OpenMeteoAPI:
    """Open-Meteo forecast API operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_daily_forecast(
        self,
        latitude: float,
        longitude: float,
        start_date: date,
        end_date: Optional[date] = None,
        **kwargs: Any
    ) -> Dict[str, Any]:
        """
        Get daily weather for a date range.

        Args:
            latitude: Latitude (degrees)
            longitude: Longitude (degrees)
            start_date: First day (inclusive)
            end_date: Last day (inclusive), defaults to start_date
            **kwargs: Additional query parameters

        Returns:
            Raw response with "daily", "daily_units", "elevation" and "timezone"
        """
        end_date = end_date or start_date
        self.logger.info(
            f"Fetching Open-Meteo daily weather for ({latitude:.4f}, {longitude:.4f}) "
            f"from {start_date.isoformat()} to {end_date.isoformat()}"
        )

        params: Dict[str, Any] = {
            "latitude": latitude,
            "longitude": longitude,
            "daily": ",".join(DAILY_VARIABLES),
            "wind_speed_unit": "ms",
            "timezone": "auto",
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
        }
        params.update(kwargs)

        result = self.get("/forecast", params=params)
        if not isinstance(result, dict):
            return {}
        return result
