"""Map current temperature and weather description to a Pokémon type."""

from __future__ import annotations

import math

RAIN_KEYWORD = "chuva"

CATEGORIES = (
    "electric",
    "ice",
    "water",
    "grass",
    "ground",
    "bug",
    "rock",
    "fire",
    "normal",
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going towards +inf."""

    return math.floor(value + 0.5)


def classify(temperature: float, condition_text: str) -> str:
    """Return the Pokémon type for a temperature (°C) and condition text.

    Rules are evaluated in order and the first match wins. Temperatures in
    ``[10, 12)`` and ``[21, 23)`` have no dedicated type and fall through to
    ``normal``.
    """

    if RAIN_KEYWORD in condition_text.lower():
        return "electric"
    if temperature < 5:
        return "ice"
    if 5 <= temperature < 10:
        return "water"
    if 12 <= temperature < 15:
        return "grass"
    if 15 <= temperature < 21:
        return "ground"
    if 23 <= temperature < 27:
        return "bug"
    if 27 <= temperature <= 33:
        return "rock"
    if temperature > 33:
        return "fire"
    return "normal"
