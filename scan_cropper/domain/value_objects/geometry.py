"""Geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Point:
    """2D point in pixel coordinates."""
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    
    @property
    def width(self) -> float:
        return self.max_x - self.min_x
    
    @property
    def height(self) -> float:
        return self.max_y - self.min_y
    
    @property
    def area(self) -> float:
        return self.width * self.height
    
    @property
    def center(self) -> Point:
        return Point(
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2
        )
    
    @property
    def is_empty(self) -> bool:
        """True when the box has no positive width or height."""
        return self.width <= 0 or self.height <= 0
    
    def clip(self, width: float, height: float) -> BoundingBox:
        """Clip box to the ``[0, width] x [0, height]`` frame."""
        return BoundingBox(
            max(self.min_x, 0),
            max(self.min_y, 0),
            min(self.max_x, width),
            min(self.max_y, height)
        )
    
    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BoundingBox:
        """Smallest box containing all points."""
        points = list(points)
        if not points:
            raise ValueError("Cannot compute bounding box of no points")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True, slots=True)
class RotatedRect:
    """Minimum-area rectangle as reported by the geometry backend.
    
    ``angle`` is in degrees and follows the backend's own convention, so it
    may lie outside [-45, 45]. Callers normalize it before rotating.
    """
    center: Point
    width: float
    height: float
    angle: float
    
    @property
    def area(self) -> float:
        """Rectangle area (width * height)."""
        return self.width * self.height
    
    @classmethod
    def from_cv(cls, rect: tuple) -> RotatedRect:
        """Create from an OpenCV ``((cx, cy), (w, h), angle)`` tuple."""
        (cx, cy), (w, h), angle = rect
        return cls(Point(float(cx), float(cy)), float(w), float(h), float(angle))
