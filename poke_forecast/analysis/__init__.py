"""Weather classification helpers."""

from .classifier import CATEGORIES, classify, round_half_up

__all__ = ["CATEGORIES", "classify", "round_half_up"]
