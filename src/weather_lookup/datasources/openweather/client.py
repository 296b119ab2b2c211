"""OpenWeatherMap API client constants and shared helpers.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
"""

from __future__ import annotations

from typing import Any

OPENWEATHER_API = "https://api.openweathermap.org/data/2.5"

CURRENT_PATH = "weather"
FORECAST_PATH = "forecast"


class MissingApiKeyError(ValueError):
    """Raised when a request is attempted without an OpenWeatherMap API key."""


def build_url(base_url: str | None, path: str) -> str:
    """Join the API base URL and an endpoint path."""
    return f"{(base_url or OPENWEATHER_API).rstrip('/')}/{path}"


def build_params(city: str, api_key: str) -> dict[str, str]:
    """
    Query parameters for a city lookup.

    No ``units`` parameter is sent, so temperatures come back in Kelvin.
    """
    if not api_key:
        msg = "OpenWeatherMap API key is not configured (set OPENWEATHER_API_KEY)"
        raise MissingApiKeyError(msg)
    return {"q": city, "appid": api_key}


def unwrap_payload(data: Any) -> Any:
    """Return the provider payload, unwrapping a ``{"record": {...}}`` bin envelope."""
    if isinstance(data, dict) and isinstance(data.get("record"), dict):
        return data["record"]
    return data
