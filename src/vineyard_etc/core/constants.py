"""
Application-wide constants for vineyard evapotranspiration estimation.

This module defines the physical constants of the FAO-56 Penman-Monteith chain,
the input validation ranges and the irrigation heuristics parameters.
"""

# Physical Constants
SOLAR_CONSTANT = 0.0820  # MJ m⁻² min⁻¹
STEFAN_BOLTZMANN = 4.903e-9  # MJ K⁻⁴ m⁻² day⁻¹
KELVIN_OFFSET = 273.16

# Vapor Pressure Constants (Tetens formula)
TETENS_A = 0.6108  # kPa
TETENS_B = 17.27
TETENS_C = 237.3  # °C
SLOPE_COEF = 4098

# Atmospheric Pressure (FAO-56 eq. 7)
SEA_LEVEL_PRESSURE = 101.3  # kPa
LAPSE_RATE = 0.0065  # K/m
STANDARD_TEMPERATURE = 293.0  # K
PRESSURE_EXPONENT = 5.26

# Psychrometric Constant Coefficient
PSYCHROMETRIC_COEF = 0.665e-3  # kPa/°C

# Reference grass albedo
REFERENCE_ALBEDO = 0.23

# Radiation Constants (Ångström-Prescott)
ANGSTROM_A = 0.25
ANGSTROM_B = 0.5
CLEAR_SKY_COEF = 0.75
ALTITUDE_FACTOR = 2e-5

# Hargreaves radiation coefficient (interior locations)
HARGREAVES_KRS = 0.16

# Lux to radiation (empirical linear scale for sunlight)
LUX_TO_WM2 = 0.0079  # W/m² per lux
WM2_TO_MJ_DAY = 0.0864  # W/m² averaged over 24h -> MJ m⁻² day⁻¹
WH_TO_MJ = 0.0036  # Wh/m² -> MJ/m²

# Net Longwave Radiation Constants
NLW_CONST_1 = 0.34
NLW_CONST_2 = 0.14
NLW_CONST_3 = 1.35
NLW_CONST_4 = 0.35

# Solar Geometry Constants
EARTH_ORBIT_ECCENTRICITY = 0.033
SOLAR_DECLINATION_AMPLITUDE = 0.409
SOLAR_DECLINATION_PHASE = 1.39  # radians
DAYS_PER_YEAR = 365

# Penman-Monteith reference crop constants (daily time step)
PM_RADIATION_FACTOR = 0.408
PM_AERODYNAMIC_NUMERATOR = 900
PM_WIND_COEF = 0.34

# Wind Adjustment (10m to 2m height, FAO-56 eq. 47)
WIND_HEIGHT_ADJUSTMENT = 0.748

# Input validation ranges (inclusive)
TEMPERATURE_RANGE = (-60.0, 60.0)  # °C
HUMIDITY_RANGE = (0.0, 100.0)  # %
WIND_SPEED_RANGE = (0.0, 50.0)  # m/s
RAINFALL_RANGE = (0.0, 500.0)  # mm/day
SOLAR_RADIATION_RANGE = (0.0, 45.0)  # MJ m⁻² day⁻¹
SOLAR_LUX_RANGE = (0.0, 150000.0)  # lux
SUNSHINE_HOURS_RANGE = (0.0, 16.0)  # hours
LATITUDE_RANGE = (-90.0, 90.0)  # degrees
ELEVATION_RANGE = (-500.0, 9000.0)  # meters

# Rainfall
EFFECTIVE_RAINFALL_FACTOR = 0.8
HEAVY_RAINFALL_THRESHOLD = 10.0  # mm/day

# Irrigation thresholds (mm/day of irrigation need)
DEFAULT_IRRIGATION_THRESHOLD = 2.0
CRITICAL_STAGE_THRESHOLD = 1.5
VERAISON_THRESHOLD = 3.0
DRIP_DAILY_THRESHOLD = 4.0

# Weather advisories
HIGH_HUMIDITY_THRESHOLD = 80.0  # %
HIGH_WIND_THRESHOLD = 5.0  # m/s

# Seasonal planning
SEASONAL_AVERAGE_ETO = 4.0  # mm/day placeholder

# ETo agreement tolerance against a weather provider
ETO_ACCURACY_TOLERANCE_PCT = 5.0
