"""
Prefect flows.

Flows:
- lookup: fetch current conditions + forecast for a city and write site/index.html

Usage (local):
    python -m weather_lookup.flows.lookup London

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    weather-lookup build London
"""
