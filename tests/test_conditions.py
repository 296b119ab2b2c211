"""Tests for current-conditions derivations and timestamp formatting."""

from __future__ import annotations

import json
from datetime import UTC
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from weather_lookup.analysis.conditions import (
    as_number,
    current_temperature,
    format_date,
    format_timestamp,
    kelvin_to_celsius,
    summarize_current,
)
from weather_lookup.schemas import CurrentConditions

# parses to an exact int that has no float representation
HUGE_INT = json.loads("1" + "0" * 400)

MOCK_WEATHER: dict[str, Any] = {
    "name": "London",
    "dt": 1735689600,
    "sys": {"country": "GB"},
    "main": {"temp": 288.15, "humidity": 65},
    "wind": {"speed": 5.2},
    "weather": [{"description": "Partly cloudy"}],
}


class TestKelvinToCelsius:
    """Kelvin -> whole Celsius degrees."""

    @pytest.mark.parametrize(
        ("kelvin", "celsius"),
        [(288.15, 15), (290, 17), (280, 7), (273.15, 0), (0, -273), (274.15, 1)],
    )
    def test_conversion(self, kelvin: float, celsius: int) -> None:
        assert kelvin_to_celsius(kelvin) == celsius

    def test_returns_int(self) -> None:
        assert isinstance(kelvin_to_celsius(288.15), int)


class TestAsNumber:
    """Numeric field guard."""

    @pytest.mark.parametrize("value", [0, 1, 2.5, -3])
    def test_numbers_pass_through(self, value: float) -> None:
        assert as_number(value) == value

    @pytest.mark.parametrize("value", [None, "288", True, False, [], {}, float("nan")])
    def test_non_numbers(self, value: Any) -> None:
        assert as_number(value) is None

    def test_infinity_rejected(self) -> None:
        assert as_number(float("inf")) is None
        assert as_number(float("-inf")) is None

    def test_int_beyond_float_range_rejected(self) -> None:
        assert as_number(HUGE_INT) is None
        assert as_number(-HUGE_INT) is None

    def test_large_int_within_float_range_kept(self) -> None:
        assert as_number(10**300) == 10**300


class TestCurrentTemperature:
    """Current temperature derivation."""

    def test_converts_from_kelvin(self) -> None:
        assert current_temperature(MOCK_WEATHER) == 15

    @pytest.mark.parametrize(
        "weather_data",
        [
            None,
            {},
            {"name": "London"},
            {"name": "London", "main": {}},
            {"main": None},
            {"main": {"temp": None}},
            {"main": {"temp": "288.15"}},
            {"main": "hot"},
        ],
    )
    def test_missing_or_invalid_returns_none(self, weather_data: dict[str, Any] | None) -> None:
        assert current_temperature(weather_data) is None

    def test_absolute_zero_is_not_missing(self) -> None:
        assert current_temperature({"main": {"temp": 0}}) == -273

    def test_huge_int_temperature_is_missing(self) -> None:
        assert current_temperature({"main": {"temp": HUGE_INT}}) is None


class TestFormatTimestamp:
    """Locale timestamp rendering with a falsy guard."""

    @pytest.mark.parametrize("ts", [None, 0, 0.0, "", "1735689600", True])
    def test_falsy_or_invalid_is_empty(self, ts: Any) -> None:
        assert format_timestamp(ts) == ""

    def test_valid_timestamp(self) -> None:
        result = format_timestamp(1735689600)
        assert isinstance(result, str)
        assert len(result) > 10

    def test_uses_timezone(self) -> None:
        utc = format_timestamp(1735689600, tz=UTC)
        tokyo = format_timestamp(1735689600, tz=ZoneInfo("Asia/Tokyo"))
        assert utc != tokyo
        assert "2025" in utc

    def test_out_of_range_is_empty(self) -> None:
        assert format_timestamp(10**20) == ""

    def test_format_date(self) -> None:
        assert format_date(1735689600, tz=UTC)
        assert format_date(None) == ""
        assert format_date(0) == ""


class TestSummarizeCurrent:
    """Display record for current conditions."""

    def test_full_payload(self) -> None:
        result = summarize_current(MOCK_WEATHER, tz=UTC)
        assert result.city == "London"
        assert result.country == "GB"
        assert result.temperature == 15
        assert result.description == "Partly cloudy"
        assert result.humidity == 65
        assert result.wind_speed == 5.2
        assert result.last_updated

    def test_missing_sys(self) -> None:
        data = {**MOCK_WEATHER, "sys": None}
        assert summarize_current(data).country == ""

    def test_missing_weather(self) -> None:
        data = {k: v for k, v in MOCK_WEATHER.items() if k != "weather"}
        assert summarize_current(data).description == "No data"

    def test_missing_main(self) -> None:
        data = {**MOCK_WEATHER, "main": None}
        result = summarize_current(data)
        assert result.temperature is None
        assert result.humidity == 0

    def test_none_payload(self) -> None:
        assert summarize_current(None) == CurrentConditions()

    def test_huge_int_fields_fall_back(self) -> None:
        data = {
            **MOCK_WEATHER,
            "dt": HUGE_INT,
            "main": {"temp": HUGE_INT, "humidity": HUGE_INT},
            "wind": {"speed": HUGE_INT},
        }
        result = summarize_current(data)
        assert result.temperature is None
        assert result.humidity == 0
        assert result.wind_speed == 0
        assert result.last_updated == ""
