"""FastAPI web server exposing the weather-driven Pokémon lookup via REST API."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from .analysis import classify, round_half_up
from .services import ForecastOrchestrator

app = FastAPI(
    title="Poke-Forecast Web API",
    description="REST API that picks a Pokémon from the current weather of a city",
    version="0.1.0",
)

_orchestrator: Optional[ForecastOrchestrator] = None


def get_orchestrator() -> ForecastOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        try:
            _orchestrator = ForecastOrchestrator()
        except RuntimeError as exc:
            raise HTTPException(status_code=500, detail=str(exc))
    return _orchestrator


# Pydantic models for request/response
class ForecastResponse(BaseModel):
    """Response model for a forecast lookup."""

    result: Dict[str, Any]


class ClassifyResponse(BaseModel):
    """Response model for the weather classification."""

    result: str


@app.get("/api/forecast", response_model=ForecastResponse)
async def forecast(city: str = Query(..., description="City name (e.g., 'Curitiba')")) -> ForecastResponse:
    """Run the full weather -> type -> Pokémon lookup for a city."""
    state = get_orchestrator().submit(city)
    return ForecastResponse(result=state.to_dict())


@app.get("/api/classify", response_model=ClassifyResponse)
async def classify_weather(
    temperature: float = Query(..., description="Temperature in °C"),
    condition_text: str = Query("", description="Weather description"),
) -> ClassifyResponse:
    """Return the Pokémon type for a temperature and weather description."""
    return ClassifyResponse(result=classify(round_half_up(temperature), condition_text))


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Entry point for running the web server."""
    import uvicorn

    print(f"[poke-forecast-web] Starting web server at http://{host}:{port}")
    print("[poke-forecast-web] Press Ctrl+C to stop.")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
