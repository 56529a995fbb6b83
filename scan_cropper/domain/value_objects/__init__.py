"""Value objects - immutable data with validation."""

from .geometry import Point, BoundingBox, RotatedRect
from .settings import Settings, OutputFormat

__all__ = [
    'Point',
    'BoundingBox',
    'RotatedRect',
    'Settings',
    'OutputFormat',
]
