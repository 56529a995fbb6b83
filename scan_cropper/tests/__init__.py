"""Test suite for Scan Cropper."""
