"""
Prefect flow for a one-shot weather lookup.

Fetches current conditions and the 3-hourly forecast for a city, reduces
them into display records, and writes the rendered widget page to the
site directory.

Run locally:
    python -m weather_lookup.flows.lookup London
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_lookup.config import get_settings
from weather_lookup.datasources import openweather
from weather_lookup.renderers.weather import build_page_html
from weather_lookup.view import WeatherView


@task(name="fetch-current")
def fetch_current(city: str) -> dict[str, Any]:
    """Fetch current conditions from OpenWeatherMap."""
    return openweather.fetch_current_conditions(city)


@task(name="fetch-forecast")
def fetch_forecast(city: str) -> dict[str, Any]:
    """Fetch the 3-hourly forecast from OpenWeatherMap."""
    return openweather.fetch_forecast(city)


@task(name="write-site")
def write_site(html: str, site_dir: Path | None = None) -> Path:
    """Write HTML to the site directory."""
    site_dir = site_dir or get_settings().site_dir
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="lookup-weather", log_prints=True)
def lookup_weather(city: str, site_dir: Path | None = None) -> dict[str, Any]:
    """
    Look up weather for a city and build the static widget page.

    Returns:
        Summary with the city, current temperature, record counts and output path.
    """
    view = WeatherView(
        city=city,
        timezone=get_settings().display_tz,
        fetch_current=fetch_current,
        fetch_forecast=fetch_forecast,
    )

    print(f"Fetching weather for {city!r}...")
    if not view.search():
        print("No city given, nothing to fetch.")
        return {"error": "no city"}

    print(
        f"Got {len(view.hourly_forecast)} forecast steps "
        f"across {len(view.daily_forecast)} days for {view.city}"
    )

    html = build_page_html(view)
    output_path = write_site(html, site_dir)
    print(f"Site built: {output_path}")

    return {
        "city": view.city,
        "temperature": view.temperature,
        "hourly": len(view.hourly_forecast),
        "daily": len(view.daily_forecast),
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = lookup_weather(" ".join(sys.argv[1:]))
    print(f"Flow complete: {result}")
