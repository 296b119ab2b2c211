"""Current-conditions derivations and timestamp formatting.

Pure functions over raw OpenWeatherMap payloads. Missing or malformed
fields never raise; each accessor falls back to a fixed default.
"""

from __future__ import annotations

import math
from datetime import datetime, tzinfo
from typing import Any

from weather_lookup.schemas import NO_DATA, CurrentConditions

KELVIN_OFFSET = 273.15


def kelvin_to_celsius(kelvin: float) -> int:
    """Convert Kelvin to whole degrees Celsius, rounding halves up."""
    return math.floor(kelvin - KELVIN_OFFSET + 0.5)


def as_number(value: Any) -> float | None:
    """
    Return ``value`` if it is a finite real number (bools excluded), else None.

    Integers too large for a float count as not numeric.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    try:
        finite = math.isfinite(value)
    except OverflowError:
        return None
    return value if finite else None


def as_mapping(value: Any) -> dict[str, Any]:
    """Return ``value`` if it is a dict, else an empty dict."""
    return value if isinstance(value, dict) else {}


def description_of(payload: dict[str, Any]) -> str:
    """First ``weather[].description`` of a payload, or ``"No data"``."""
    weather = payload.get("weather")
    if isinstance(weather, list) and weather:
        text = as_mapping(weather[0]).get("description")
        if isinstance(text, str) and text:
            return text
    return NO_DATA


def to_datetime(ts: Any, tz: tzinfo | None = None) -> datetime | None:
    """Unix seconds -> aware/local datetime, or None for a falsy or invalid value."""
    seconds = as_number(ts)
    if not seconds:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=tz)
    except (OverflowError, OSError, ValueError):
        return None


def format_timestamp(ts: Any, tz: tzinfo | None = None) -> str:
    """Locale date-time string for unix seconds; ``""`` for None, 0 or invalid input."""
    dt = to_datetime(ts, tz)
    return dt.strftime("%c") if dt else ""


def format_date(ts: Any, tz: tzinfo | None = None) -> str:
    """Locale date string for unix seconds; ``""`` for None, 0 or invalid input."""
    dt = to_datetime(ts, tz)
    return dt.strftime("%x") if dt else ""


def current_temperature(weather_data: dict[str, Any] | None) -> int | None:
    """
    Current temperature in Celsius from a current-conditions payload.

    Returns None (not 0) when ``main`` or ``main.temp`` is absent or not
    numeric, e.g. ``{"main": {"temp": 288.15}}`` -> 15, ``{"main": {}}`` -> None.
    """
    main = as_mapping(as_mapping(weather_data).get("main"))
    temp = as_number(main.get("temp"))
    if temp is None:
        return None
    return kelvin_to_celsius(temp)


def summarize_current(
    weather_data: dict[str, Any] | None,
    tz: tzinfo | None = None,
) -> CurrentConditions:
    """Build the current-conditions display record, defaulting every missing field."""
    data = as_mapping(weather_data)
    main = as_mapping(data.get("main"))
    name = data.get("name")
    country = as_mapping(data.get("sys")).get("country")

    return CurrentConditions(
        city=name if isinstance(name, str) else "",
        country=country if isinstance(country, str) else "",
        temperature=current_temperature(data),
        description=description_of(data),
        humidity=as_number(main.get("humidity")) or 0,
        wind_speed=as_number(as_mapping(data.get("wind")).get("speed")) or 0,
        last_updated=format_timestamp(data.get("dt"), tz),
    )
