"""Weather widget renderers.

Current-conditions card, hourly and daily forecast tables, and the full
page with the search bar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_lookup.renderers import render_template

if TYPE_CHECKING:
    from weather_lookup.schemas import (
        CurrentConditions,
        DailyForecastRecord,
        HourlyForecastRecord,
    )
    from weather_lookup.view import WeatherView

APP_TITLE = "WEATHER APP"


def _temperature_label(celsius: int | None) -> str:
    return "--" if celsius is None else f"{celsius}°C"


def build_current_html(conditions: CurrentConditions | None) -> str:
    """Current-conditions card, or the loading placeholder before any data."""
    if conditions is None:
        return render_template("loading.html.j2")

    location = ", ".join(part for part in (conditions.city, conditions.country) if part)
    return render_template(
        "current.html.j2",
        location=location or "Unknown location",
        temperature=_temperature_label(conditions.temperature),
        description=conditions.description,
        humidity=conditions.humidity,
        wind_speed=conditions.wind_speed,
        last_updated=conditions.last_updated,
    )


def build_hourly_html(records: list[HourlyForecastRecord]) -> str:
    """Hourly forecast table; empty string when there are no records."""
    if not records:
        return ""
    return render_template("hourly.html.j2", records=records)


def build_daily_html(records: list[DailyForecastRecord]) -> str:
    """Daily forecast table; empty string when there are no records."""
    if not records:
        return ""
    return render_template("daily.html.j2", records=records)


def build_page_html(view: WeatherView, error: str | None = None) -> str:
    """Full widget page for the current view state."""
    return render_template(
        "page.html.j2",
        title=APP_TITLE,
        city=view.city,
        error=error,
        current=build_current_html(view.conditions),
        hourly=build_hourly_html(view.hourly_forecast),
        daily=build_daily_html(view.daily_forecast),
    )
