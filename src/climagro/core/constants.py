"""
Application-wide constants for climate anomaly detection.

This module defines default thresholds, parameter codes and service defaults
used throughout the application.
"""

# NASA POWER parameter codes consumed by the alert engine
TEMPERATURE_PARAMETER = "T2M"
PRECIPITATION_PARAMETER = "PRECTOTCORR"

# Alert thresholds
EXTREME_HEAT_C = 35.0  # °C
EXTREME_COLD_C = 5.0  # °C
FROST_RISK_C = 2.0  # °C
HEAVY_RAIN_MM = 50.0  # mm/day
DROUGHT_MIN_DAYS = 30  # consecutive dry days
DRY_DAY_MM = 1.0  # mm/day, below this a day counts as dry

# Number of flagged dates shown per alert
MAX_DISPLAY_DATES = 5

# Date formats
DATE_KEY_FORMAT = "%Y%m%d"  # NASA POWER response keys
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
ISO_DATE_FORMAT = "%Y-%m-%d"

# NASA POWER marks missing observations with this value
POWER_FILL_VALUE = -999.0

# NASA POWER API defaults
DEFAULT_POWER_URL = "https://power.larc.nasa.gov/api"
DEFAULT_POWER_COMMUNITY = "RE"
DEFAULT_POWER_USER = "climagro"
DEFAULT_START_DATE = "2020-01-01"
# Days between today and the most recent date NASA POWER has published
DEFAULT_DATA_LAG_DAYS = 4

# Geocoding (OpenStreetMap Nominatim)
DEFAULT_GEOCODING_URL = "https://nominatim.openstreetmap.org"
DEFAULT_USER_AGENT = "NASA Climate Data App"

# Parameter catalog: code -> (display name, unit)
PARAMETERS = {
    "T2M": ("Temperature at 2 m", "°C"),
    "T2M_MAX": ("Maximum temperature at 2 m", "°C"),
    "T2M_MIN": ("Minimum temperature at 2 m", "°C"),
    "RH2M": ("Relative humidity at 2 m", "%"),
    "PRECTOTCORR": ("Precipitation", "mm/day"),
    "PS": ("Surface pressure", "kPa"),
    "WS10M": ("Wind speed at 10 m", "m/s"),
    "ALLSKY_SFC_SW_DWN": ("Solar radiation", "kWh/m²/day"),
}

DEFAULT_PARAMETERS = [TEMPERATURE_PARAMETER, PRECIPITATION_PARAMETER]
