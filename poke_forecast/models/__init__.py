"""Shared dataclasses for weather-driven Pokémon lookups."""

from .forecast import (
    CandidateDetail,
    CandidateRef,
    SessionState,
    StatEntry,
    WeatherCondition,
    WeatherReport,
)

__all__ = [
    "CandidateDetail",
    "CandidateRef",
    "SessionState",
    "StatEntry",
    "WeatherCondition",
    "WeatherReport",
]
