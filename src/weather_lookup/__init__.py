"""Weather Lookup - current conditions plus hourly and daily forecasts for a city.

Architecture::

    datasources/   External APIs (OpenWeatherMap current weather + 3-hourly forecast)
    analysis/      Pure payload -> display record reducers (temperature, hourly, daily)
    view.py        Widget state: search input, raw conditions, reduced forecasts
    renderers/     Pure records -> HTML (current card, forecast tables, page)
    flows/         Prefect orchestration (lookup fetches, renders, writes site/)
    server.py      Local interactive widget (GET /?city=...)
    services/      Shared utilities (HTTP client)

Data flow: datasources -> analysis -> view -> renderers -> browser or site/
"""

__version__ = "0.1.0"

from weather_lookup.config import Settings

__all__ = ["Settings", "__version__"]
