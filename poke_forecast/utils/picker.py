"""Random index selection for candidate lists."""

from __future__ import annotations

import random
from typing import Optional


def pick_index(low: int, high: int, *, rng: Optional[random.Random] = None) -> int:
    """Return a uniformly chosen integer in ``[low, high)``."""

    if high <= low:
        raise ValueError(f"Empty range [{low}, {high})")
    return (rng or random).randrange(low, high)
