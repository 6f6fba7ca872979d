"""Open-Meteo archive API constants.

API docs: https://open-meteo.com/en/docs/historical-weather-api
"""

OPEN_METEO_HISTORICAL = "https://archive-api.open-meteo.com/v1/archive"

# Daily variables we request from the archive API
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
]

# Let the provider pick the timezone from the coordinates
TIMEZONE = "auto"
