"""FastMCP server exposing the weather-driven Pokémon lookup as tools."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from fastmcp import FastMCP

from .analysis import classify, round_half_up
from .services import ForecastOrchestrator

app = FastMCP("poke-forecast", version="0.1.0")
_orchestrator: Optional[ForecastOrchestrator] = None


def _get_orchestrator() -> ForecastOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = ForecastOrchestrator()
    return _orchestrator


@app.tool()
def forecast_pokemon(
    city: Annotated[str, "City name (e.g., 'São Paulo')"],
) -> Dict[str, Any]:
    """Look up the weather in a city and return a Pokémon matching it."""

    return _get_orchestrator().submit(city).to_dict()


@app.tool()
def classify_weather(
    temperature: Annotated[float, "Temperature in °C"],
    condition_text: Annotated[str, "Weather description (e.g., 'chuva leve')"],
) -> str:
    """Return the Pokémon type associated with a temperature and condition."""

    return classify(round_half_up(temperature), condition_text)


def run() -> None:
    """Entry point for `python -m poke_forecast.server` or console script."""

    print("[poke-forecast] Starting MCP server. Press Ctrl+C to stop.")
    app.run()


if __name__ == "__main__":
    run()
