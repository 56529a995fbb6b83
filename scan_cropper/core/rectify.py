"""Rotation of a scan so that one candidate region becomes axis-aligned."""

import logging
import math
from dataclasses import dataclass

import cv2
import numpy as np
import numpy.typing as npt

from ..config import CROPPER_DEFAULTS
from ..domain.entities.region import CandidateRegion
from ..domain.value_objects.geometry import BoundingBox, Point
from .image_ops import ImageArray, Points, points_to_array

logger = logging.getLogger(__name__)


@dataclass
class RectifiedRegion:
    """A rotated copy of the scan and the region's corners within it."""
    image: ImageArray
    corners: npt.NDArray[np.int64]  # Shape (4, 2)
    angle: float
    pivot: Point


def normalize_angle(angle: float) -> float:
    """Fold a minimum-area rectangle angle into [-45, 45] degrees.
    
    The same rectangle can be reported either as a near-0 wide rectangle
    or as a near-90 tall one. OpenCV before 4.5.1 reports angles in
    [-90, 0) and later versions in (0, 90], so both ends are folded.
    """
    limit = CROPPER_DEFAULTS.angle_limit
    right = CROPPER_DEFAULTS.right_angle
    if angle < -limit:
        angle += right
    elif angle > limit:
        angle -= right
    return angle


def reference_point(points: Points) -> Point:
    """Midpoint of the points' bounding box, used as the rotation pivot."""
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    box = BoundingBox(
        float(points[:, 0].min()), float(points[:, 1].min()),
        float(points[:, 0].max()), float(points[:, 1].max())
    )
    return box.center


def rotate_image(image: ImageArray, angle: float, pivot: Point) -> ImageArray:
    """Rotate the whole image about ``pivot``, keeping its size.
    
    Uses the same direction as :func:`rotate_points`. Pixels that come
    from outside the source are filled with zeros.
    """
    h, w = image.shape[:2]
    matrix = cv2.getRotationMatrix2D((pivot.x, pivot.y), angle, 1.0)
    return cv2.warpAffine(
        image,
        matrix,
        (w, h),
        flags=cv2.INTER_LINEAR,
        borderMode=cv2.BORDER_CONSTANT,
        borderValue=CROPPER_DEFAULTS.border_value
    )


def rotate_points(
    points: Points,
    angle: float,
    pivot: Point
) -> npt.NDArray[np.int64]:
    """Rotate points about ``pivot`` and round to whole pixels.
    
    Raises:
        ValueError: If the rotation produces non-finite coordinates
    """
    rad = math.radians(-angle)
    cos, sin = math.cos(rad), math.sin(rad)
    rotation = np.array([[cos, -sin], [sin, cos]], dtype=np.float64)
    origin = np.array([pivot.x, pivot.y], dtype=np.float64)
    
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    rotated = (points - origin) @ rotation.T + origin
    
    if not np.all(np.isfinite(rotated)):
        raise ValueError(f"Rotation by {angle} produced non-finite coordinates")
    return np.rint(rotated).astype(np.int64)


def rectify(image: ImageArray, candidate: CandidateRegion) -> RectifiedRegion:
    """Straighten one candidate region.
    
    The corners come from the rectangle as reported; only the amount of
    rotation is normalized. Image and corners are rotated with the same
    angle and pivot so the corners stay on the rotated item.
    """
    angle = normalize_angle(candidate.rect.angle)
    corners = points_to_array(candidate.corners)
    pivot = reference_point(corners)
    
    rotated = rotate_image(image, angle, pivot)
    rotated_corners = rotate_points(corners, angle, pivot)
    
    logger.debug(
        f"Rectified region at ({pivot.x:.1f}, {pivot.y:.1f}): "
        f"reported {candidate.rect.angle:.2f} deg, rotated {angle:.2f} deg"
    )
    return RectifiedRegion(
        image=rotated,
        corners=rotated_corners,
        angle=angle,
        pivot=pivot
    )
