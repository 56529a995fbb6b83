"""Foreground mask extraction."""

import logging

import cv2

from ..config import CROPPER_DEFAULTS
from .image_ops import ImageArray, MaskArray

logger = logging.getLogger(__name__)


def build_mask(
    image: ImageArray,
    blur: int = CROPPER_DEFAULTS.blur,
    thresh: int = CROPPER_DEFAULTS.thresh,
    max_val: int = CROPPER_DEFAULTS.max_val
) -> MaskArray:
    """Binarize a scan so that the scanned items are foreground.
    
    The median blur suppresses sensor noise and paper texture that would
    otherwise fragment contours. Pixels at or below ``thresh`` become
    ``max_val`` and everything brighter becomes 0, so the scanner
    background must be brighter than ``thresh``.
    
    Args:
        image: BGR image
        blur: Odd median kernel size
        thresh: Binarization cutoff
        max_val: Value written for foreground pixels
        
    Returns:
        Single-channel mask with the image's dimensions
    """
    blurred = cv2.medianBlur(image, blur)
    gray = cv2.cvtColor(blurred, cv2.COLOR_BGR2GRAY)
    _, mask = cv2.threshold(gray, thresh, max_val, cv2.THRESH_BINARY_INV)
    
    logger.debug(
        f"Mask: {cv2.countNonZero(mask)} foreground pixels "
        f"(blur={blur}, thresh={thresh})"
    )
    return mask
