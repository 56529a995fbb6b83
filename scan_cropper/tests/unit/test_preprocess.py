"""Unit tests for mask extraction."""

import numpy as np

from scan_cropper.core.preprocess import build_mask


class TestBuildMask:
    """Tests for build_mask."""
    
    def test_same_dimensions(self, rotated_square_scan):
        mask = build_mask(rotated_square_scan)
        assert mask.shape == rotated_square_scan.shape[:2]
        assert mask.dtype == np.uint8
    
    def test_values_are_binary(self, rotated_square_scan):
        mask = build_mask(rotated_square_scan, max_val=200)
        assert set(np.unique(mask)) == {0, 200}
    
    def test_dark_items_are_foreground(self, rotated_square_scan):
        mask = build_mask(rotated_square_scan)
        assert mask[100, 100] == 255  # Inside the square
        assert mask[5, 5] == 0  # Background
    
    def test_threshold_is_inclusive(self, blank):
        scan = blank(20, 10)
        scan[:, :10] = 250
        scan[:, 10:] = 251
        mask = build_mask(scan, blur=1, thresh=250)
        assert np.all(mask[:, :10] == 255)
        assert np.all(mask[:, 10:] == 0)
    
    def test_white_scan_is_empty(self, blank):
        mask = build_mask(blank(64, 48))
        assert not mask.any()
    
    def test_blur_removes_specks(self, blank):
        scan = blank(50, 50)
        scan[25, 25] = 0
        assert build_mask(scan, blur=1)[25, 25] == 255
        assert not build_mask(scan, blur=5).any()
