"""
Solar radiation module.

Provides FAO-56 solar geometry and the estimation of incoming solar radiation
(Rs) from whichever proxy a weather observation carries.
"""

import logging
import math
from typing import Optional, Tuple

from ..core import constants
from ..models import WeatherObservation


# Rs source labels, in order of preference
SOURCE_MEASURED = "measured"
SOURCE_LUX = "lux"
SOURCE_SUNSHINE = "sunshine"
SOURCE_HARGREAVES = "hargreaves"


class SolarRadiationEstimator:

    def __init__(
        self,
        a: float = constants.ANGSTROM_A,
        b: float = constants.ANGSTROM_B,
        krs: float = constants.HARGREAVES_KRS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize estimator.

        Args:
            a: Ångström-Prescott coefficient a (default 0.25)
            b: Ångström-Prescott coefficient b (default 0.50)
            krs: Hargreaves adjustment coefficient (default 0.16, interior)
            logger: Logger instance
        """
        self.a = a
        self.b = b
        self.krs = krs
        self.logger = logger or logging.getLogger(__name__)

    # =========================================================================
    # Solar geometry
    # =========================================================================

    @staticmethod
    def solar_declination(day_number: int) -> float:
        """
        Calculate solar declination for a given day of the year (FAO-56 eq. 24).

        Args:
            day_number: Julian day of the year (1-365/366)

        Returns:
            Solar declination (radians)
        """
        return constants.SOLAR_DECLINATION_AMPLITUDE * math.sin(
            (2 * math.pi / constants.DAYS_PER_YEAR) * day_number
            - constants.SOLAR_DECLINATION_PHASE
        )

    @staticmethod
    def inverse_relative_distance(day_number: int) -> float:
        """Inverse relative Earth-Sun distance dr (FAO-56 eq. 23)."""
        return 1 + constants.EARTH_ORBIT_ECCENTRICITY * math.cos(
            2 * math.pi * day_number / constants.DAYS_PER_YEAR
        )

    @staticmethod
    def sunset_hour_angle(latitude: float, day_number: int) -> float:
        """
        Sunset hour angle ωs (FAO-56 eq. 25).

        The arccos argument is clamped to [-1, 1] so polar day and polar
        night give π and 0 instead of a domain error.
        """
        phi = math.radians(latitude)
        decl = SolarRadiationEstimator.solar_declination(day_number)
        x = -math.tan(phi) * math.tan(decl)
        return math.acos(max(-1.0, min(1.0, x)))

    @staticmethod
    def extraterrestrial_radiation(latitude: float, day_number: int) -> Tuple[float, float]:
        """
        Calculate extraterrestrial radiation and daylight hours.

        Args:
            latitude: Latitude (degrees)
            day_number: Julian day of the year (1-365/366)

        Returns:
            Tuple of (Ra, N):
                - Ra: Extraterrestrial radiation (MJ m⁻² day⁻¹)
                - N: Maximum daylight hours (hours)
        """
        phi = math.radians(latitude)
        decl = SolarRadiationEstimator.solar_declination(day_number)
        dr = SolarRadiationEstimator.inverse_relative_distance(day_number)
        omega_s = SolarRadiationEstimator.sunset_hour_angle(latitude, day_number)

        ra = (24 * 60 / math.pi) * constants.SOLAR_CONSTANT * dr * (
            omega_s * math.sin(phi) * math.sin(decl) +
            math.cos(phi) * math.cos(decl) * math.sin(omega_s)
        )
        # Rounding noise near the poles can leave a tiny negative value
        ra = max(0.0, ra)

        n_max = (24 / math.pi) * omega_s

        return ra, n_max

    @staticmethod
    def clear_sky_radiation(ra: float, elevation: float) -> float:
        """Clear-sky solar radiation Rso (FAO-56 eq. 37)."""
        return (constants.CLEAR_SKY_COEF + constants.ALTITUDE_FACTOR * elevation) * ra

    # =========================================================================
    # Rs estimation
    # =========================================================================

    @staticmethod
    def from_lux(lux: float) -> float:
        """
        Convert a daily mean illuminance to solar radiation.

        Empirical linear scale: lux × 0.0079 gives W/m², × 0.0864 gives
        MJ m⁻² day⁻¹. An approximation for sunlight, not a physical derivation.

        Args:
            lux: Mean illuminance (lux)

        Returns:
            Solar radiation (MJ m⁻² day⁻¹)
        """
        return lux * constants.LUX_TO_WM2 * constants.WM2_TO_MJ_DAY

    def from_sunshine_hours(self, sunshine_hours: float, ra: float, n_max: float) -> float:
        """
        Solar radiation from sunshine duration (Ångström-Prescott, FAO-56 eq. 35).

        Rs = (a + b * n/N) * Ra, with n/N capped at 1.

        Args:
            sunshine_hours: Actual sunshine hours (n)
            ra: Extraterrestrial radiation (MJ m⁻² day⁻¹)
            n_max: Maximum daylight hours (N)

        Returns:
            Solar radiation (MJ m⁻² day⁻¹)
        """
        ratio = min(sunshine_hours / n_max, 1.0) if n_max > 0 else 0.0
        return (self.a + self.b * ratio) * ra

    def from_temperature_range(self, t_max: float, t_min: float, ra: float) -> float:
        """
        Solar radiation from the daily temperature range (Hargreaves, FAO-56 eq. 50).

        Rs = kRs * sqrt(Tmax - Tmin) * Ra
        """
        temp_diff = max(0.0, t_max - t_min)
        return self.krs * math.sqrt(temp_diff) * ra

    def estimate(
        self,
        weather: WeatherObservation,
        ra: float,
        n_max: float
    ) -> Tuple[float, str]:
        """
        Estimate Rs using the best available proxy.

        Tries, in order of preference:
        1. Measured solar radiation (MJ m⁻² day⁻¹)
        2. Illuminance in lux
        3. Sunshine hours (Ångström-Prescott)
        4. Fallback: temperature range (Hargreaves)

        Returns:
            Tuple of (Rs, source label)
        """
        if weather.solar_radiation is not None:
            return weather.solar_radiation, SOURCE_MEASURED

        if weather.solar_radiation_lux is not None:
            rs = self.from_lux(weather.solar_radiation_lux)
            self.logger.debug(f"Rs from {weather.solar_radiation_lux:.0f} lux: {rs:.2f} MJ/m²/day")
            return rs, SOURCE_LUX

        if weather.sunshine_hours is not None:
            rs = self.from_sunshine_hours(weather.sunshine_hours, ra, n_max)
            self.logger.debug(
                f"Rs from sunshine: n={weather.sunshine_hours:.2f}h, N={n_max:.2f}h, "
                f"Rs={rs:.2f} MJ/m²/day"
            )
            return rs, SOURCE_SUNSHINE

        rs = self.from_temperature_range(weather.temperature_max, weather.temperature_min, ra)
        self.logger.warning(
            f"No solar data available, estimating Rs from temperature range: {rs:.2f} MJ/m²/day"
        )
        return rs, SOURCE_HARGREAVES
