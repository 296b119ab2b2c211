"""5 day / 3 hour forecast from the OpenWeatherMap ``forecast`` endpoint."""

from __future__ import annotations

from typing import Any

from weather_lookup.config import get_settings
from weather_lookup.datasources.openweather.client import (
    FORECAST_PATH,
    build_params,
    build_url,
    unwrap_payload,
)
from weather_lookup.services.http import session


def fetch_forecast(
    city: str,
    *,
    api_key: str | None = None,
    base_url: str | None = None,
) -> dict[str, Any]:
    """
    Fetch the 3-hourly forecast for a city.

    Args:
        city: Free-text city name.
        api_key: OpenWeatherMap key (default: from settings).
        base_url: API base URL (default: from settings).

    Returns:
        Raw API response dict with a ``list`` of forecast entries
        (``dt``, ``main.temp_max``, ``main.temp_min``, ...).
    """
    settings = get_settings()
    resp = session.get(
        build_url(base_url or settings.openweather_base_url, FORECAST_PATH),
        params=build_params(city, api_key or settings.openweather_api_key),
    )
    resp.raise_for_status()
    result: dict[str, Any] = unwrap_payload(resp.json())
    return result
