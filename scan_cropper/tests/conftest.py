"""Shared fixtures: synthetic flatbed scans."""

import cv2
import numpy as np
import pytest


def blank_scan(width: int, height: int, value: int = 255) -> np.ndarray:
    """Uniform BGR canvas, white by default."""
    return np.full((height, width, 3), value, dtype=np.uint8)


def draw_item(
    canvas: np.ndarray,
    center: tuple[float, float],
    size: tuple[float, float],
    angle: float,
    color: tuple[int, int, int] = (0, 0, 0)
) -> np.ndarray:
    """Fill a rotated rectangle onto the canvas in place."""
    box = cv2.boxPoints((center, size, angle))
    cv2.fillPoly(canvas, [np.round(box).astype(np.int32)], color)
    return canvas


def dark_mask(image: np.ndarray, level: int = 128) -> np.ndarray:
    """Boolean mask of dark pixels."""
    gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    return gray < level


@pytest.fixture
def rotated_square_scan() -> np.ndarray:
    """200x200 white scan with one black 100x100 square rotated 15 degrees."""
    return draw_item(blank_scan(200, 200), (100, 100), (100, 100), 15)


@pytest.fixture
def two_item_scan() -> np.ndarray:
    """300x300 white scan with a large and a small item."""
    canvas = blank_scan(300, 300)
    draw_item(canvas, (70, 220), (60, 60), 10, color=(40, 80, 120))
    draw_item(canvas, (190, 100), (110, 90), -20, color=(20, 20, 20))
    return canvas


@pytest.fixture
def blank():
    return blank_scan


@pytest.fixture
def draw():
    return draw_item


@pytest.fixture
def dark():
    return dark_mask
