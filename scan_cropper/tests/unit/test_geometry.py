"""Unit tests for geometry value objects."""

import pytest

from scan_cropper.domain.entities.region import CandidateRegion
from scan_cropper.domain.value_objects.geometry import BoundingBox, Point, RotatedRect


class TestPoint:
    """Tests for Point class."""
    
    def test_creation(self):
        p = Point(10, 20)
        assert p.x == 10
        assert p.y == 20

    def test_equality(self):
        assert Point(1.5, 2) == Point(1.5, 2.0)
        assert Point(1, 2) != Point(2, 1)


class TestBoundingBox:
    """Tests for BoundingBox class."""
    
    def test_dimensions(self):
        box = BoundingBox(10, 20, 110, 70)
        assert box.width == 100
        assert box.height == 50
        assert box.area == 5000
        assert box.center == Point(60, 45)
    
    def test_from_points(self):
        box = BoundingBox.from_points([Point(5, 9), Point(-1, 3), Point(7, 4)])
        assert box == BoundingBox(-1, 3, 7, 9)
    
    def test_from_no_points(self):
        with pytest.raises(ValueError):
            BoundingBox.from_points([])
    
    def test_clip_to_frame(self):
        box = BoundingBox(-10, -5, 250, 90).clip(200, 100)
        assert box == BoundingBox(0, 0, 200, 90)
    
    def test_clip_outside_is_empty(self):
        box = BoundingBox(-50, 10, -40, 60).clip(200, 100)
        assert box.is_empty
    
    def test_zero_width_is_empty(self):
        assert BoundingBox(50, 10, 50, 60).is_empty
        assert not BoundingBox(50, 10, 51, 60).is_empty


class TestRotatedRect:
    """Tests for RotatedRect class."""
    
    def test_area(self):
        rect = RotatedRect(Point(0, 0), 30, 10, 15)
        assert rect.area == 300
    
    def test_from_cv(self):
        rect = RotatedRect.from_cv(((12.5, 40.0), (30.0, 10.0), 75.0))
        assert rect.center == Point(12.5, 40.0)
        assert (rect.width, rect.height) == (30.0, 10.0)
        assert rect.angle == 75.0


class TestCandidateRegion:
    """Tests for CandidateRegion."""
    
    def test_area_is_rectangle_area(self):
        rect = RotatedRect(Point(50, 50), 40, 20, 0)
        corners = [Point(30, 40), Point(70, 40), Point(70, 60), Point(30, 60)]
        region = CandidateRegion.from_rotated_rect(rect, corners)
        assert region.area == 800
        assert region.bounding_box == BoundingBox(30, 40, 70, 60)
    
    def test_requires_four_corners(self):
        rect = RotatedRect(Point(0, 0), 1, 1, 0)
        with pytest.raises(ValueError):
            CandidateRegion.from_rotated_rect(rect, [Point(0, 0)])
