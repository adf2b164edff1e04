"""Shared utility functions for orrery."""

from orrery.utils._angle import from_radians, normalize_degrees, to_radians

__all__ = [
    "from_radians",
    "normalize_degrees",
    "to_radians",
]
