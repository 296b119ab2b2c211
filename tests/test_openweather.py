"""Tests for the OpenWeatherMap datasource."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from weather_lookup.config import Settings
from weather_lookup.datasources.openweather import (
    OPENWEATHER_API,
    MissingApiKeyError,
    fetch_current_conditions,
    fetch_forecast,
    unwrap_payload,
)
from weather_lookup.datasources.openweather.client import build_params, build_url


def mock_response(payload: object) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


class TestClientHelpers:
    """URL, params and payload helpers."""

    def test_build_url_default(self) -> None:
        assert build_url(None, "weather") == f"{OPENWEATHER_API}/weather"

    def test_build_url_strips_slash(self) -> None:
        assert build_url("http://localhost:9000/", "forecast") == "http://localhost:9000/forecast"

    def test_build_params(self) -> None:
        assert build_params("London", "k3y") == {"q": "London", "appid": "k3y"}

    def test_build_params_requires_key(self) -> None:
        with pytest.raises(MissingApiKeyError):
            build_params("London", "")

    def test_missing_key_is_value_error(self) -> None:
        assert issubclass(MissingApiKeyError, ValueError)

    def test_unwrap_record_envelope(self) -> None:
        assert unwrap_payload({"record": {"name": "London"}}) == {"name": "London"}

    @pytest.mark.parametrize(
        "payload", [{"name": "London"}, {"record": "not-a-dict"}, None, [1, 2]]
    )
    def test_unwrap_passthrough(self, payload: object) -> None:
        assert unwrap_payload(payload) == payload


class TestFetchCurrentConditions:
    """Current conditions endpoint."""

    @patch("weather_lookup.datasources.openweather.current.session.get")
    def test_fetch(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({"name": "London", "main": {"temp": 288.15}})

        result = fetch_current_conditions("London", api_key="k3y")

        assert result["name"] == "London"
        mock_get.assert_called_once()
        assert mock_get.call_args.args[0].endswith("/weather")
        params = mock_get.call_args.kwargs["params"]
        assert params == {"q": "London", "appid": "k3y"}
        assert "units" not in params

    @patch("weather_lookup.datasources.openweather.current.session.get")
    def test_unwraps_envelope(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({"record": {"name": "London"}})
        assert fetch_current_conditions("London", api_key="k3y") == {"name": "London"}

    @patch("weather_lookup.datasources.openweather.current.session.get")
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        resp = mock_response({})
        resp.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        mock_get.return_value = resp
        with pytest.raises(requests.HTTPError):
            fetch_current_conditions("Atlantis", api_key="k3y")

    @patch("weather_lookup.datasources.openweather.current.session.get")
    def test_settings_defaults(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({})
        settings = Settings(
            openweather_api_key="from-env",
            openweather_base_url="http://mirror.local/data",
            _env_file=None,  # type: ignore[call-arg]
        )
        with patch(
            "weather_lookup.datasources.openweather.current.get_settings",
            return_value=settings,
        ):
            fetch_current_conditions("London")

        assert mock_get.call_args.args[0] == "http://mirror.local/data/weather"
        assert mock_get.call_args.kwargs["params"]["appid"] == "from-env"

    @patch("weather_lookup.datasources.openweather.current.session.get")
    def test_missing_key_no_request(self, mock_get: Mock) -> None:
        settings = Settings(openweather_api_key="", _env_file=None)  # type: ignore[call-arg]
        with (
            patch(
                "weather_lookup.datasources.openweather.current.get_settings",
                return_value=settings,
            ),
            pytest.raises(MissingApiKeyError),
        ):
            fetch_current_conditions("London")
        mock_get.assert_not_called()


class TestFetchForecast:
    """3-hourly forecast endpoint."""

    @patch("weather_lookup.datasources.openweather.forecast.session.get")
    def test_fetch(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({"list": [{"dt": 1735689600}]})

        result = fetch_forecast("London", api_key="k3y", base_url="http://mirror.local")

        assert len(result["list"]) == 1
        assert mock_get.call_args.args[0] == "http://mirror.local/forecast"
        assert mock_get.call_args.kwargs["params"]["q"] == "London"

    @patch("weather_lookup.datasources.openweather.forecast.session.get")
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        resp = mock_response({})
        resp.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
        mock_get.return_value = resp
        with pytest.raises(requests.HTTPError):
            fetch_forecast("London", api_key="bad")
