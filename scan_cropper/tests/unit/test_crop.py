"""Unit tests for cropping."""

import math

import numpy as np
import pytest

from scan_cropper.core.crop import crop_region
from scan_cropper.exceptions import RegionError


def gradient_image(width: int = 100, height: int = 80) -> np.ndarray:
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, :, 0] = np.arange(width, dtype=np.uint8)[None, :]
    image[:, :, 1] = np.arange(height, dtype=np.uint8)[:, None]
    return image


class TestCropRegion:
    """Tests for crop_region."""
    
    def test_crop_inside(self):
        image = gradient_image()
        corners = [[10, 20], [40, 20], [40, 50], [10, 50]]
        crop = crop_region(image, corners)
        assert crop.shape == (30, 30, 3)
        assert crop[0, 0, 0] == 10 and crop[0, 0, 1] == 20
    
    def test_clipped_to_image(self):
        image = gradient_image()
        corners = [[-15, -5], [120, -5], [120, 30], [-15, 30]]
        crop = crop_region(image, corners)
        assert crop.shape == (30, 100, 3)
    
    def test_returns_copy(self):
        image = gradient_image()
        crop = crop_region(image, [[0, 0], [10, 10]])
        crop[:] = 255
        assert image[0, 0, 0] == 0
    
    def test_zero_width_raises(self):
        image = gradient_image()
        corners = [[50, 10], [50, 10], [50, 60], [50, 60]]
        with pytest.raises(RegionError) as exc_info:
            crop_region(image, corners, region_index=3)
        assert exc_info.value.region_index == 3
    
    def test_sub_pixel_width_raises(self):
        image = gradient_image()
        # 0.2 px wide, both edges round to column 50
        corners = [[50.2, 10], [50.4, 10], [50.4, 60], [50.2, 60]]
        with pytest.raises(RegionError):
            crop_region(image, corners)

    def test_outside_image_raises(self):
        image = gradient_image()
        corners = [[-50, 10], [-40, 10], [-40, 60], [-50, 60]]
        with pytest.raises(RegionError):
            crop_region(image, corners)
    
    def test_non_finite_raises(self):
        image = gradient_image()
        corners = [[math.nan, 10], [40, 10], [40, 60], [10, 60]]
        with pytest.raises(RegionError):
            crop_region(image, corners)
    
    def test_no_corners_raises(self):
        with pytest.raises(RegionError):
            crop_region(gradient_image(), np.empty((0, 2)))
