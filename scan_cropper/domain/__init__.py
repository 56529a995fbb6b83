"""Domain layer - geometry, regions and settings."""

from .entities.region import CandidateRegion
from .value_objects.geometry import Point, BoundingBox, RotatedRect
from .value_objects.settings import Settings, OutputFormat

__all__ = [
    # Entities
    'CandidateRegion',
    # Value Objects
    'Point',
    'BoundingBox',
    'RotatedRect',
    'Settings',
    'OutputFormat',
]
