"""
View state for the weather widget.

``WeatherView`` holds what the page displays: the search input, the raw
current-conditions payload, and the two reduced forecast lists. A search
fetches both payloads and replaces the state; there is no retry, no
cancellation, and the last completed fetch wins.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Any

from weather_lookup.analysis.conditions import current_temperature, summarize_current
from weather_lookup.analysis.forecast import daily_forecast, hourly_forecast
from weather_lookup.datasources import openweather
from weather_lookup.schemas import CurrentConditions, DailyForecastRecord, HourlyForecastRecord

Fetcher = Callable[[str], dict[str, Any]]


def sanitize_city(city: str | None) -> str:
    """Trim a free-text city and collapse inner whitespace."""
    return " ".join((city or "").split())


@dataclass
class WeatherView:
    """Search input plus the data rendered for it."""

    city: str = ""
    weather_data: dict[str, Any] | None = None
    hourly_forecast: list[HourlyForecastRecord] = field(default_factory=list)
    daily_forecast: list[DailyForecastRecord] = field(default_factory=list)
    timezone: tzinfo | None = None
    fetch_current: Fetcher = openweather.fetch_current_conditions
    fetch_forecast: Fetcher = openweather.fetch_forecast

    @property
    def temperature(self) -> int | None:
        """Current temperature in Celsius, or None before data arrives."""
        return current_temperature(self.weather_data)

    @property
    def conditions(self) -> CurrentConditions | None:
        if self.weather_data is None:
            return None
        return summarize_current(self.weather_data, self.timezone)

    @property
    def has_data(self) -> bool:
        return self.weather_data is not None

    def hour_forecast(self, forecast: dict[str, Any] | None) -> None:
        """Replace the hourly list from a raw forecast payload."""
        self.hourly_forecast = hourly_forecast(forecast, self.timezone)

    def day_forecast(self, forecast: dict[str, Any] | None) -> None:
        """Replace the daily list from a raw forecast payload."""
        self.daily_forecast = daily_forecast(forecast, self.timezone)

    def search(self, city: str | None = None) -> bool:
        """
        Fetch current conditions and forecast for ``city`` (default: ``self.city``).

        A blank city is ignored. Fetch errors propagate unchanged.

        Returns:
            True if a lookup was made.
        """
        query = sanitize_city(self.city if city is None else city)
        self.city = query
        if not query:
            return False

        self.weather_data = self.fetch_current(query)
        forecast = self.fetch_forecast(query)
        self.hour_forecast(forecast)
        self.day_forecast(forecast)
        return True
