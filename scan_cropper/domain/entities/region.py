"""Candidate region entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..value_objects.geometry import BoundingBox, Point, RotatedRect


@dataclass(frozen=True, slots=True)
class CandidateRegion:
    """A detected item that passed the area filter.
    
    ``area`` is the rotated rectangle's area, not the true contour area.
    Rotated or irregular blobs are therefore admitted a little more easily
    than their pixel count alone would allow.
    """
    corners: tuple[Point, Point, Point, Point]
    rect: RotatedRect
    area: float
    
    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.corners)
    
    @classmethod
    def from_rotated_rect(
        cls,
        rect: RotatedRect,
        corners: Iterable[Point]
    ) -> CandidateRegion:
        """Create from a rectangle and its four corner points."""
        corners = tuple(corners)
        if len(corners) != 4:
            raise ValueError(f"Expected 4 corners, got {len(corners)}")
        return cls(corners=corners, rect=rect, area=rect.area)
