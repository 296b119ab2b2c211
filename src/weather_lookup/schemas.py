"""
Display records for the weather widget.

Pydantic models produced by ``analysis/`` from raw OpenWeatherMap payloads.
Every field has a concrete value: missing provider fields are replaced by
defaults before a record is built, so renderers never deal with ``None``
except for the current temperature.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

#: Description used when a payload carries no ``weather[0].description``.
NO_DATA = "No data"


class CurrentConditions(BaseModel):
    """Current weather summary for the searched city."""

    city: str = ""
    country: str = ""
    temperature: int | None = Field(default=None, description="Degrees Celsius")
    description: str = NO_DATA
    humidity: int | float = 0
    wind_speed: int | float = 0
    last_updated: str = ""


class HourlyForecastRecord(BaseModel):
    """One 3-hour forecast step."""

    time: str = ""
    temp_max: int = 0
    temp_min: int = 0
    description: str = NO_DATA
    humidity: int | float = 0
    wind_speed: int | float = 0
    last_updated: str = ""


class DailyForecastRecord(BaseModel):
    """First forecast step seen for a calendar day."""

    date: str = ""
    temp_max: int = 0
    temp_min: int = 0
    description: str = NO_DATA
    humidity: int | float = 0
    wind_speed: int | float = 0
