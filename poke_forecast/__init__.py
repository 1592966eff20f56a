"""Weather-driven Pokémon picker."""

from .analysis import classify
from .services import ForecastOrchestrator

__all__ = [
    "ForecastOrchestrator",
    "classify",
]
