"""
FAO-56 Penman-Monteith reference evapotranspiration module.

Implements the daily-step reference evapotranspiration (ETo) for a hypothetical
grass surface from one day of weather observations.

The calculation chain is:
- Vapor pressure: saturation (es) and actual (ea) vapor pressure
- Psychrometrics: slope of the vapor pressure curve (Δ) and γ from elevation
- Radiation: Ra from solar geometry, Rs from the best available proxy, Rso,
  then net shortwave and net longwave radiation
- Combination equation with soil heat flux G = 0

Humidity: the input carries a single daily mean relative humidity, so ea
weights e°(Tmax) and e°(Tmin) by the same value instead of using RHmin with
e°(Tmax) and RHmax with e°(Tmin).

Reference:
    Allen, R.G., Pereira, L.S., Raes, D., Smith, M. (1998). Crop
    evapotranspiration. FAO Irrigation and Drainage Paper 56, Rome.
"""

import math
from typing import Optional, Tuple

from ..core import constants
from ..models import WeatherObservation, Location, EToComponents
from .solar import SolarRadiationEstimator


class PenmanMonteithCalculator:
    """
    Calculator for reference evapotranspiration using FAO-56 Penman-Monteith.

    All methods are stateless; input validation is the caller's job.
    """

    @staticmethod
    def calculate_eto(
        weather: WeatherObservation,
        location: Location,
        solar_estimator: Optional[SolarRadiationEstimator] = None
    ) -> float:
        """
        Calculate daily reference evapotranspiration.

        Args:
            weather: Daily weather observation
            location: Site location (latitude and elevation are used)
            solar_estimator: Estimator for Rs (default Ångström/Hargreaves coefficients)

        Returns:
            Reference evapotranspiration (mm/day), never negative
        """
        components = PenmanMonteithCalculator.calculate_with_components(
            weather, location, solar_estimator
        )
        return components.eto

    @staticmethod
    def calculate_with_components(
        weather: WeatherObservation,
        location: Location,
        solar_estimator: Optional[SolarRadiationEstimator] = None
    ) -> EToComponents:
        """
        Calculate ETo with detailed intermediate components.

        Args:
            Same as calculate_eto()

        Returns:
            EToComponents object containing all intermediate values
        """
        estimator = solar_estimator or SolarRadiationEstimator()
        t_max = weather.temperature_max
        t_min = weather.temperature_min
        u2 = weather.wind_speed

        # SECTION 1: Vapor Pressure
        es_tmax, es_tmin, es, ea, vpd = PenmanMonteithCalculator._calculate_vapor_pressures(
            t_max, t_min, weather.humidity
        )

        # SECTION 2: Psychrometric Parameters
        tmean = (t_max + t_min) / 2
        delta = PenmanMonteithCalculator._calculate_slope_vapor_pressure_curve(tmean)
        pressure = PenmanMonteithCalculator._calculate_atmospheric_pressure(location.elevation)
        gamma = PenmanMonteithCalculator._calculate_psychrometric_constant(pressure)

        # SECTION 3: Solar Radiation
        day_number = weather.day_of_year
        ra, n_max = estimator.extraterrestrial_radiation(location.latitude, day_number)
        rs, source = estimator.estimate(weather, ra, n_max)
        rso = estimator.clear_sky_radiation(ra, location.elevation)

        # SECTION 4: Net Radiation
        rns, rnl, rn = PenmanMonteithCalculator._calculate_net_radiation(
            rs, rso, t_max, t_min, ea
        )

        # SECTION 5: Combination Equation
        eto_raw = PenmanMonteithCalculator._penman_monteith(
            delta, rn, gamma, tmean, u2, vpd
        )

        return EToComponents(
            eto=max(0.0, eto_raw),
            eto_raw=eto_raw,
            tmean=tmean,
            es_tmax=es_tmax,
            es_tmin=es_tmin,
            es=es,
            ea=ea,
            vpd=vpd,
            delta=delta,
            pressure=pressure,
            gamma=gamma,
            day_number=day_number,
            ra=ra,
            daylight_hours=n_max,
            rs=rs,
            rso=rso,
            rns=rns,
            rnl=rnl,
            rn=rn,
            solar_source=source
        )

    # =========================================================================
    # SECTION 1: Vapor Pressure Calculations
    # =========================================================================

    @staticmethod
    def _calculate_saturation_vapor_pressure(temperature: float) -> float:
        """
        Calculate saturation vapor pressure at a given temperature (FAO-56 eq. 11).

        Args:
            temperature: Temperature (°C)

        Returns:
            Saturation vapor pressure (kPa)
        """
        return constants.TETENS_A * math.exp(
            (constants.TETENS_B * temperature) / (temperature + constants.TETENS_C)
        )

    @staticmethod
    def _calculate_vapor_pressures(
        t_max: float,
        t_min: float,
        humidity: float
    ) -> Tuple[float, float, float, float, float]:
        """
        Calculate all vapor pressure parameters.

        Args:
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            humidity: Mean relative humidity (%)

        Returns:
            Tuple of (es_tmax, es_tmin, es, ea, vpd) in kPa
        """
        es_tmax = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(t_max)
        es_tmin = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(t_min)

        es = (es_tmax + es_tmin) / 2

        # Same mean humidity applied at both temperature extremes
        ea = (es_tmax * humidity / 100 + es_tmin * humidity / 100) / 2

        vpd = es - ea

        return es_tmax, es_tmin, es, ea, vpd

    # =========================================================================
    # SECTION 2: Psychrometric Parameters
    # =========================================================================

    @staticmethod
    def _calculate_slope_vapor_pressure_curve(t_mean: float) -> float:
        """
        Calculate the slope of saturation vapor pressure curve (FAO-56 eq. 13).

        Args:
            t_mean: Mean temperature (°C)

        Returns:
            Slope of vapor pressure curve (kPa/°C)
        """
        es_tmean = PenmanMonteithCalculator._calculate_saturation_vapor_pressure(t_mean)
        return (constants.SLOPE_COEF * es_tmean) / ((t_mean + constants.TETENS_C) ** 2)

    @staticmethod
    def _calculate_atmospheric_pressure(elevation: float) -> float:
        """
        Atmospheric pressure from elevation (FAO-56 eq. 7).

        Args:
            elevation: Elevation above sea level (m)

        Returns:
            Atmospheric pressure (kPa)
        """
        return constants.SEA_LEVEL_PRESSURE * (
            (constants.STANDARD_TEMPERATURE - constants.LAPSE_RATE * elevation)
            / constants.STANDARD_TEMPERATURE
        ) ** constants.PRESSURE_EXPONENT

    @staticmethod
    def _calculate_psychrometric_constant(pressure: float) -> float:
        """
        Calculate psychrometric constant (FAO-56 eq. 8).

        Args:
            pressure: Atmospheric pressure (kPa)

        Returns:
            Psychrometric constant (kPa/°C)
        """
        return constants.PSYCHROMETRIC_COEF * pressure

    # =========================================================================
    # SECTION 4: Net Radiation
    # =========================================================================

    @staticmethod
    def _calculate_net_radiation(
        rs: float,
        rso: float,
        t_max: float,
        t_min: float,
        ea: float,
        albedo: float = constants.REFERENCE_ALBEDO
    ) -> Tuple[float, float, float]:
        """
        Calculate net radiation components.

        Args:
            rs: Solar radiation (MJ m⁻² day⁻¹)
            rso: Clear sky solar radiation (MJ m⁻² day⁻¹)
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            ea: Actual vapor pressure (kPa)
            albedo: Surface albedo (0.23 for the reference grass)

        Returns:
            Tuple of (Rns, Rnl, Rn) in MJ m⁻² day⁻¹
        """
        rns = (1 - albedo) * rs

        # Relative shortwave radiation, limited to 1.0
        rs_rso = min(rs / rso, 1.0) if rso > 0 else 0.0

        tmax_k4 = (t_max + constants.KELVIN_OFFSET) ** 4
        tmin_k4 = (t_min + constants.KELVIN_OFFSET) ** 4

        rnl = (
            constants.STEFAN_BOLTZMANN * (tmax_k4 + tmin_k4) / 2 *
            (constants.NLW_CONST_1 - constants.NLW_CONST_2 * math.sqrt(ea)) *
            (constants.NLW_CONST_3 * rs_rso - constants.NLW_CONST_4)
        )

        rn = rns - rnl

        return rns, rnl, rn

    # =========================================================================
    # SECTION 5: Combination Equation
    # =========================================================================

    @staticmethod
    def _penman_monteith(
        delta: float,
        rn: float,
        gamma: float,
        tmean: float,
        u2: float,
        vpd: float,
        soil_heat_flux: float = 0.0
    ) -> float:
        """
        FAO-56 Penman-Monteith equation (eq. 6), unfloored.

        Args:
            delta: Slope of vapor pressure curve (kPa/°C)
            rn: Net radiation (MJ m⁻² day⁻¹)
            gamma: Psychrometric constant (kPa/°C)
            tmean: Mean temperature (°C)
            u2: Wind speed at 2m (m/s)
            vpd: Vapor pressure deficit (kPa)
            soil_heat_flux: G, zero for daily steps

        Returns:
            ETo (mm/day), possibly negative
        """
        numerator = (
            constants.PM_RADIATION_FACTOR * delta * (rn - soil_heat_flux) +
            gamma * (constants.PM_AERODYNAMIC_NUMERATOR / (tmean + 273)) * u2 * vpd
        )
        denominator = delta + gamma * (1 + constants.PM_WIND_COEF * u2)
        return numerator / denominator
