"""Unit tests for the OpenWeather client."""

from __future__ import annotations

import pytest

from poke_forecast.clients import OpenWeatherClient, OpenWeatherClientError
from tests.fakes import FakeResponse, FakeSession

BASE_URL = "https://weather.test/data/2.5"
WEATHER_URL = f"{BASE_URL}/weather"

SAMPLE_PAYLOAD = {
    "name": "Recife",
    "main": {"temp": 27.6, "temp_min": 26.1, "temp_max": 29.0, "humidity": 70},
    "weather": [
        {"id": 500, "main": "Rain", "description": "chuva leve", "icon": "10d"},
        {"id": 701, "main": "Mist", "description": "névoa", "icon": "50d"},
    ],
}


def _client(session: FakeSession) -> OpenWeatherClient:
    return OpenWeatherClient(api_key="secret", base_url=BASE_URL, session=session)


def test_get_weather_report_sends_metric_portuguese_query() -> None:
    session = FakeSession({WEATHER_URL: FakeResponse(SAMPLE_PAYLOAD)})

    report = _client(session).get_weather_report("Recife")

    assert session.calls[0]["params"] == {
        "q": "Recife",
        "units": "metric",
        "lang": "pt_br",
        "appid": "secret",
    }
    assert report.city == "Recife"
    assert report.temp == 27.6
    assert report.temp_max == 29.0
    assert report.primary_condition.description == "chuva leve"
    assert [c.id for c in report.weather] == [500, 701]


def test_not_found_raises_client_error() -> None:
    session = FakeSession({WEATHER_URL: FakeResponse({"cod": "404"}, status_code=404)})

    with pytest.raises(OpenWeatherClientError):
        _client(session).get_weather_report("InvalidCityXYZ")


def test_transport_failure_raises_client_error() -> None:
    with pytest.raises(OpenWeatherClientError):
        _client(FakeSession({})).get_current_weather("Recife")


def test_empty_body_raises_client_error() -> None:
    session = FakeSession({WEATHER_URL: FakeResponse({})})

    with pytest.raises(OpenWeatherClientError):
        _client(session).get_current_weather("Recife")


def test_invalid_json_raises_client_error() -> None:
    session = FakeSession({WEATHER_URL: FakeResponse(ValueError("no json"))})

    with pytest.raises(OpenWeatherClientError):
        _client(session).get_current_weather("Recife")


def test_malformed_payloads_are_rejected() -> None:
    with pytest.raises(OpenWeatherClientError):
        OpenWeatherClient.parse_report({"weather": SAMPLE_PAYLOAD["weather"]})
    with pytest.raises(OpenWeatherClientError):
        OpenWeatherClient.parse_report({"main": SAMPLE_PAYLOAD["main"], "weather": []})
    with pytest.raises(OpenWeatherClientError):
        OpenWeatherClient.parse_report({"main": {"temp": "hot"}, "weather": SAMPLE_PAYLOAD["weather"]})
    with pytest.raises(OpenWeatherClientError):
        OpenWeatherClient.parse_report({"main": {"temp": "NaN"}, "weather": SAMPLE_PAYLOAD["weather"]})
    with pytest.raises(OpenWeatherClientError):
        OpenWeatherClient.parse_report({"main": {"temp": 20, "temp_max": "Infinity"}, "weather": SAMPLE_PAYLOAD["weather"]})


def test_missing_api_key_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)

    with pytest.raises(RuntimeError, match="OPENWEATHER_API_KEY"):
        OpenWeatherClient(session=FakeSession({}))


def test_base_url_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
    monkeypatch.setenv("OPENWEATHER_BASE_URL", "https://mirror.test/")

    client = OpenWeatherClient(session=FakeSession({}))

    assert client.api_key == "from-env"
    assert client.base_url == "https://mirror.test"
