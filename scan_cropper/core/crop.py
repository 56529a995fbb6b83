"""Cropping of rectified regions."""

import logging
from typing import Optional

import numpy as np
import numpy.typing as npt

from ..domain.value_objects.geometry import BoundingBox
from ..exceptions import RegionError
from .image_ops import ImageArray

logger = logging.getLogger(__name__)


def crop_region(
    image: ImageArray,
    corners: npt.ArrayLike,
    region_index: Optional[int] = None
) -> ImageArray:
    """Crop the axis-aligned box around ``corners``, clipped to the image.
    
    Args:
        image: Rotated image
        corners: (N, 2) corner points in the rotated image's frame
        region_index: Rank of the region, for error reporting
        
    Returns:
        Cropped copy of the image
        
    Raises:
        RegionError: If the corners are not finite or the clipped box is empty
    """
    corners = np.asarray(corners, dtype=np.float64).reshape(-1, 2)
    if corners.shape[0] == 0 or not np.all(np.isfinite(corners)):
        raise RegionError("Region corners are missing or not finite", region_index)
    
    h, w = image.shape[:2]
    clipped = BoundingBox(
        float(corners[:, 0].min()), float(corners[:, 1].min()),
        float(corners[:, 0].max()), float(corners[:, 1].max())
    ).clip(w, h)
    box = BoundingBox(
        round(clipped.min_x), round(clipped.min_y),
        round(clipped.max_x), round(clipped.max_y)
    )

    x1, y1, x2, y2 = int(box.min_x), int(box.min_y), int(box.max_x), int(box.max_y)
    if box.is_empty:
        raise RegionError(
            f"Clipped crop is empty ({x2 - x1}x{y2 - y1} at {x1},{y1})",
            region_index
        )

    logger.debug(f"Cropping {x2 - x1}x{y2 - y1} at ({x1}, {y1})")
    return image[y1:y2, x1:x2].copy()
