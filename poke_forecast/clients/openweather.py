"""Client for the OpenWeather current-weather endpoint."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

import requests

from .. import config
from ..models import WeatherCondition, WeatherReport


class OpenWeatherClientError(RuntimeError):
    """Raised when the weather lookup fails or returns an unusable payload."""


class OpenWeatherClient:
    """Fetches current weather for a city by name."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        units: str = "metric",
        lang: str = "pt_br",
        user_agent: str = "poke-forecast/0.1 (+https://github.com/)",
    ) -> None:
        api_key = api_key or config.openweather_api_key()
        if not api_key:
            raise RuntimeError("OPENWEATHER_API_KEY is not configured")
        self.api_key = api_key
        self.base_url = (base_url or config.openweather_base_url()).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.units = units
        self.lang = lang
        self.user_agent = user_agent

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_current_weather(self, city: str) -> Dict[str, Any]:
        """Return the raw JSON body for ``city``."""

        params = {
            "q": city,
            "units": self.units,
            "lang": self.lang,
            "appid": self.api_key,
        }
        try:
            response = self.session.get(
                f"{self.base_url}/weather",
                params=params,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise OpenWeatherClientError(str(exc)) from exc

        if not payload:
            raise OpenWeatherClientError(f"Empty weather response for {city!r}")
        return payload

    def get_weather_report(self, city: str) -> WeatherReport:
        return self.parse_report(self.get_current_weather(city))

    # ------------------------------------------------------------------
    # Parsing helpers
    # ------------------------------------------------------------------
    @staticmethod
    def parse_report(payload: Dict[str, Any]) -> WeatherReport:
        try:
            main = payload["main"]
            conditions: List[WeatherCondition] = [
                WeatherCondition(
                    id=int(entry.get("id", 0)),
                    main=str(entry.get("main", "")),
                    description=str(entry["description"]),
                    icon=str(entry.get("icon", "")),
                )
                for entry in payload["weather"]
            ]
            report = WeatherReport(
                temp=float(main["temp"]),
                temp_min=float(main.get("temp_min", main["temp"])),
                temp_max=float(main.get("temp_max", main["temp"])),
                weather=conditions,
                city=payload.get("name"),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise OpenWeatherClientError(f"Malformed weather payload: {exc}") from exc

        if not all(math.isfinite(value) for value in (report.temp, report.temp_min, report.temp_max)):
            raise OpenWeatherClientError("Weather payload has a non-finite temperature")
        if not report.weather:
            raise OpenWeatherClientError("Weather payload has no conditions")
        return report
