"""OpenWeatherMap data source.

Fetches current conditions and the 3-hourly forecast for a city name.
Requires an API key (``OPENWEATHER_API_KEY``).

Public API:
  - current: fetch_current_conditions
  - forecast: fetch_forecast
  - client: API URL, MissingApiKeyError, payload helpers
"""

from weather_lookup.datasources.openweather.client import (
    OPENWEATHER_API,
    MissingApiKeyError,
    unwrap_payload,
)
from weather_lookup.datasources.openweather.current import fetch_current_conditions
from weather_lookup.datasources.openweather.forecast import fetch_forecast

__all__ = [
    "OPENWEATHER_API",
    "MissingApiKeyError",
    "fetch_current_conditions",
    "fetch_forecast",
    "unwrap_payload",
]
