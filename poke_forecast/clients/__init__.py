"""External data clients used by the forecast orchestrator."""

from .openweather import OpenWeatherClient, OpenWeatherClientError
from .pokeapi import PokeAPIClient, PokeAPIClientError

__all__ = [
    "OpenWeatherClient",
    "OpenWeatherClientError",
    "PokeAPIClient",
    "PokeAPIClientError",
]
