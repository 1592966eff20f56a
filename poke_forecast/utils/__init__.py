"""Small helpers shared across the package."""

from .picker import pick_index

__all__ = ["pick_index"]
