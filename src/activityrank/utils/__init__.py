"""Shared utilities for activityrank."""

from .geo import COMPASS_POINTS, BoundingBox, compass_direction

__all__ = [
    "BoundingBox",
    "COMPASS_POINTS",
    "compass_direction",
]
