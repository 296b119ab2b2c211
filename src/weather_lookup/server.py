"""
Local HTTP server for the weather widget.

``GET /`` renders the empty widget; ``GET /?city=London`` performs a lookup
and renders the results. Every request gets a fresh ``WeatherView``.
"""

from __future__ import annotations

import http.server
from http import HTTPStatus
from urllib.parse import parse_qs, urlsplit

import requests

from weather_lookup.config import get_settings
from weather_lookup.datasources.openweather import MissingApiKeyError
from weather_lookup.renderers.weather import build_page_html
from weather_lookup.view import WeatherView


def render_lookup(city: str) -> tuple[HTTPStatus, str]:
    """Run a lookup for ``city`` and return the status and page HTML."""
    view = WeatherView(timezone=get_settings().display_tz)
    try:
        view.search(city)
    except MissingApiKeyError as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, build_page_html(view, error=str(exc))
    except requests.RequestException as exc:
        error = f"Could not fetch weather for {view.city}: {exc}"
        return HTTPStatus.BAD_GATEWAY, build_page_html(view, error=error)
    return HTTPStatus.OK, build_page_html(view)


class WeatherRequestHandler(http.server.BaseHTTPRequestHandler):
    """Serves the widget page at ``/``."""

    server_version = "weather-lookup/0.1"

    def do_GET(self) -> None:  # noqa: N802
        url = urlsplit(self.path)
        if url.path not in ("/", "/index.html"):
            self.send_error(HTTPStatus.NOT_FOUND)
            return

        city = parse_qs(url.query).get("city", [""])[0]
        status, html = render_lookup(city)
        body = html.encode("utf-8")

        self.send_response(status)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def create_server(port: int, host: str = "") -> http.server.HTTPServer:
    """Build the widget server bound to ``host:port``."""
    return http.server.HTTPServer((host, port), WeatherRequestHandler)
