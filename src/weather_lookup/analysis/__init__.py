"""Pure transformations from provider payloads to display records.

Dependency rule: analysis/ imports ``schemas`` only. It never fetches data
or produces HTML, and every function tolerates ``None`` or partially
populated payloads.

Modules:
  - conditions: current temperature, current-conditions summary, timestamps
  - forecast: hourly and daily forecast reducers
"""

from weather_lookup.analysis.conditions import (
    current_temperature,
    format_date,
    format_timestamp,
    kelvin_to_celsius,
    summarize_current,
)
from weather_lookup.analysis.forecast import daily_forecast, hourly_forecast

__all__ = [
    "current_temperature",
    "daily_forecast",
    "format_date",
    "format_timestamp",
    "hourly_forecast",
    "kelvin_to_celsius",
    "summarize_current",
]
