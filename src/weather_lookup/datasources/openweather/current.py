"""Current conditions from the OpenWeatherMap ``weather`` endpoint."""

from __future__ import annotations

from typing import Any

from weather_lookup.config import get_settings
from weather_lookup.datasources.openweather.client import (
    CURRENT_PATH,
    build_params,
    build_url,
    unwrap_payload,
)
from weather_lookup.services.http import session


def fetch_current_conditions(
    city: str,
    *,
    api_key: str | None = None,
    base_url: str | None = None,
) -> dict[str, Any]:
    """
    Fetch current weather conditions for a city.

    Args:
        city: Free-text city name (e.g. ``"London"`` or ``"London,GB"``).
        api_key: OpenWeatherMap key (default: from settings).
        base_url: API base URL (default: from settings).

    Returns:
        Raw API response dict (``name``, ``sys``, ``main``, ``wind``,
        ``weather``, ``dt``, ...). Temperatures are in Kelvin.
    """
    settings = get_settings()
    resp = session.get(
        build_url(base_url or settings.openweather_base_url, CURRENT_PATH),
        params=build_params(city, api_key or settings.openweather_api_key),
    )
    resp.raise_for_status()
    result: dict[str, Any] = unwrap_payload(resp.json())
    return result
