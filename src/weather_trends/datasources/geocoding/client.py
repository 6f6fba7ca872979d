"""Open-Meteo geocoding API constants.

API docs: https://open-meteo.com/en/docs/geocoding-api
"""

GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"

# Candidates requested per search; the best one is picked by population
MAX_CANDIDATES = 5
LANGUAGE = "en"
