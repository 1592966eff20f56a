"""Orchestration services."""

from .forecast_pipeline import (
    GENERIC_FAILURE,
    LISTING_FAILED,
    WEATHER_NOT_FOUND,
    ForecastOrchestrator,
    StageResult,
)

__all__ = [
    "ForecastOrchestrator",
    "StageResult",
    "GENERIC_FAILURE",
    "LISTING_FAILED",
    "WEATHER_NOT_FOUND",
]
