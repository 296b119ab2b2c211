"""Reduce a 3-hourly forecast payload into hourly and daily display records.

Both reducers take the raw OpenWeatherMap ``forecast`` response (a dict with
a ``list`` of entries) and share the same per-entry field rules:

  - temperatures: Kelvin -> rounded Celsius, 0 when missing
  - description: ``weather[0].description``, ``"No data"`` when missing
  - humidity / wind speed: provider value, 0 when missing

The daily reducer keeps the first entry seen for each calendar date and
does not average the remaining steps of that day.
"""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Any

from weather_lookup.analysis.conditions import (
    as_mapping,
    as_number,
    description_of,
    format_date,
    format_timestamp,
    kelvin_to_celsius,
    to_datetime,
)
from weather_lookup.schemas import DailyForecastRecord, HourlyForecastRecord

MAX_FORECAST_DAYS = 5


def forecast_entries(forecast: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Entries of a forecast response; non-dict entries become empty dicts."""
    entries = as_mapping(forecast).get("list")
    if not isinstance(entries, list):
        return []
    return [as_mapping(entry) for entry in entries]


def _celsius(value: Any) -> int:
    kelvin = as_number(value)
    return kelvin_to_celsius(kelvin) if kelvin is not None else 0


def _entry_fields(entry: dict[str, Any]) -> dict[str, Any]:
    """Field values shared by hourly and daily records."""
    main = as_mapping(entry.get("main"))
    return {
        "temp_max": _celsius(main.get("temp_max")),
        "temp_min": _celsius(main.get("temp_min")),
        "description": description_of(entry),
        "humidity": as_number(main.get("humidity")) or 0,
        "wind_speed": as_number(as_mapping(entry.get("wind")).get("speed")) or 0,
    }


def hourly_forecast(
    forecast: dict[str, Any] | None,
    tz: tzinfo | None = None,
) -> list[HourlyForecastRecord]:
    """
    One display record per forecast entry, in input order.

    Args:
        forecast: Raw forecast response, or None.
        tz: Display timezone (default: runtime local time).

    Returns:
        List of records; empty if the response or its ``list`` is missing.
    """
    records: list[HourlyForecastRecord] = []
    for entry in forecast_entries(forecast):
        formatted = format_timestamp(entry.get("dt"), tz)
        records.append(
            HourlyForecastRecord(time=formatted, last_updated=formatted, **_entry_fields(entry))
        )
    return records


def daily_forecast(
    forecast: dict[str, Any] | None,
    tz: tzinfo | None = None,
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DailyForecastRecord]:
    """
    At most ``max_days`` per-day records, first-seen-wins per calendar date.

    Dates are taken from ``dt`` in the display timezone. Entries without a
    timestamp share a single undated slot (``date == ""``).

    Args:
        forecast: Raw forecast response, or None.
        tz: Display timezone (default: runtime local time).
        max_days: Maximum number of distinct days to return.

    Returns:
        List of records ordered by first occurrence in the input.
    """
    seen: set[date | None] = set()
    records: list[DailyForecastRecord] = []
    for entry in forecast_entries(forecast):
        if len(records) >= max_days:
            break
        dt = to_datetime(entry.get("dt"), tz)
        key = dt.date() if dt else None
        if key in seen:
            continue
        seen.add(key)
        records.append(
            DailyForecastRecord(date=format_date(entry.get("dt"), tz), **_entry_fields(entry))
        )
    return records
