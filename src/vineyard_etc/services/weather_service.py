"""
Weather service for provider forecast data.

Fetches daily weather from Open-Meteo and converts each day into the units
the ETc engine expects.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import requests  # type: ignore

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.exceptions import WeatherServiceError
from ..models import WeatherObservation, Location, ProviderDay

if TYPE_CHECKING:
    from ..api import OpenMeteoClient


class WeatherService:
    """Daily weather from the Open-Meteo forecast API."""

    def __init__(
        self,
        api_client: "OpenMeteoClient",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize weather service.

        Args:
            api_client: Open-Meteo API client
            logger: Logger instance
        """
        self.api_client = api_client
        self.logger = logger or logging.getLogger(__name__)

    def get_daily_weather(
        self,
        location: Location,
        start_date: date,
        end_date: date
    ) -> List[ProviderDay]:
        """
        Get converted daily weather for a date range.

        Days with missing temperature, humidity or wind are skipped.

        Args:
            location: Farm location
            start_date: First day (inclusive)
            end_date: Last day (inclusive)

        Returns:
            List of ProviderDay, one per usable day

        Raises:
            WeatherServiceError: If the request fails or the response has no daily data
        """
        if end_date < start_date:
            raise WeatherServiceError(
                f"End date {end_date.isoformat()} is before start date {start_date.isoformat()}"
            )

        try:
            response = self.api_client.get_daily_forecast(
                location.latitude, location.longitude, start_date, end_date
            )
        except requests.exceptions.RequestException as e:
            raise WeatherServiceError(f"Weather request failed: {e}") from e

        daily = response.get("daily")
        if not daily or not daily.get("time"):
            raise WeatherServiceError(
                f"No daily weather returned for {start_date.isoformat()} to {end_date.isoformat()}"
            )

        units = response.get("daily_units") or {}
        elevation = response.get("elevation")
        timezone = response.get("timezone")

        days: List[ProviderDay] = []
        for i, day_str in enumerate(daily["time"]):
            observation = self._convert_day(daily, units, i, day_str)
            if observation is None:
                continue
            days.append(ProviderDay(
                observation=observation,
                provider_eto=self._value(daily, "et0_fao_evapotranspiration", i),
                elevation=elevation,
                timezone=timezone
            ))

        returned = {d.observation.date for d in days}
        missing = [d for d in DateUtils.date_range(start_date, end_date) if d not in returned]
        if missing:
            self.logger.warning(
                f"Open-Meteo returned no usable weather for: "
                f"{', '.join(d.isoformat() for d in missing)}"
            )

        self.logger.info(f"Retrieved {len(days)} of {len(daily['time'])} days from Open-Meteo")
        return days

    def get_weather_for_date(self, location: Location, target_date: date) -> ProviderDay:
        """
        Get converted weather for a single day.

        Raises:
            WeatherServiceError: If the day is not available
        """
        for day in self.get_daily_weather(location, target_date, target_date):
            if day.observation.date == target_date:
                return day
        raise WeatherServiceError(f"No usable weather for {target_date.isoformat()}")

    def _convert_day(
        self,
        daily: Dict[str, List[Any]],
        units: Dict[str, str],
        i: int,
        day_str: str
    ) -> Optional[WeatherObservation]:
        t_max = self._value(daily, "temperature_2m_max", i)
        t_min = self._value(daily, "temperature_2m_min", i)
        humidity = self._value(daily, "relative_humidity_2m_mean", i)
        wind_10m = self._value(daily, "wind_speed_10m_max", i)

        if None in (t_max, t_min, humidity, wind_10m):
            self.logger.warning(f"Incomplete weather for {day_str}, skipping")
            return None

        radiation = self._value(daily, "shortwave_radiation_sum", i)
        if radiation is not None and "Wh" in units.get("shortwave_radiation_sum", ""):
            radiation *= constants.WH_TO_MJ

        # Sunshine duration is passed on only when radiation is missing
        sunshine_hours = None
        if radiation is None:
            sunshine_seconds = self._value(daily, "sunshine_duration", i)
            if sunshine_seconds is not None:
                sunshine_hours = sunshine_seconds / 3600.0
            low, high = constants.SUNSHINE_HOURS_RANGE
            if sunshine_hours is not None and not (low <= sunshine_hours <= high):
                self.logger.warning(
                    f"No radiation and {sunshine_hours:.1f} h of sunshine for {day_str} "
                    f"(accepted {low:g}-{high:g} h), skipping"
                )
                return None

        precipitation = self._value(daily, "precipitation_sum", i)

        return WeatherObservation(
            date=DateUtils.parse_date(day_str),
            temperature_max=t_max,
            temperature_min=t_min,
            humidity=humidity,
            wind_speed=wind_10m * constants.WIND_HEIGHT_ADJUSTMENT,
            rainfall=precipitation if precipitation is not None else 0.0,
            solar_radiation=radiation,
            sunshine_hours=sunshine_hours
        )

    @staticmethod
    def _value(daily: Dict[str, List[Any]], key: str, i: int) -> Optional[float]:
        values = daily.get(key) or []
        if i >= len(values) or values[i] is None:
            return None
        return float(values[i])
