"""Tests for random candidate index selection."""

from __future__ import annotations

import random

import pytest

from poke_forecast.utils import pick_index


def test_pick_index_stays_within_list_bounds() -> None:
    rng = random.Random(1234)
    for length in range(1, 30):
        for _ in range(50):
            index = pick_index(0, length, rng=rng)
            assert 0 <= index < length


def test_pick_index_single_element() -> None:
    assert pick_index(0, 1) == 0


def test_pick_index_rejects_empty_range() -> None:
    with pytest.raises(ValueError):
        pick_index(0, 0)
