"""Environment-driven settings for the weather and PokeAPI clients."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

# Load default .env first, then overlay .env.local so user-specific keys win.
load_dotenv()
load_dotenv(".env.local", override=True)

DEFAULT_OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"


def openweather_api_key() -> Optional[str]:
    return os.getenv("OPENWEATHER_API_KEY")


def openweather_base_url() -> str:
    return os.getenv("OPENWEATHER_BASE_URL") or DEFAULT_OPENWEATHER_BASE_URL


def pokeapi_base_url() -> str:
    return os.getenv("POKEAPI_BASE_URL") or DEFAULT_POKEAPI_BASE_URL
