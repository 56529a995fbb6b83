"""Core detection and rectification pipeline."""

from .image_ops import (
    ImageArray,
    MaskArray,
    Contour,
    Points,
    decode_image,
    encode_image,
    is_supported_image,
)
from .preprocess import build_mask
from .regions import (
    find_contours,
    candidate_from_contour,
    select_candidates,
    extract_candidate_regions,
)
from .rectify import (
    RectifiedRegion,
    normalize_angle,
    reference_point,
    rotate_image,
    rotate_points,
    rectify,
)
from .crop import crop_region

__all__ = [
    # Image operations
    'ImageArray',
    'MaskArray',
    'Contour',
    'Points',
    'decode_image',
    'encode_image',
    'is_supported_image',
    # Preprocessing
    'build_mask',
    # Regions
    'find_contours',
    'candidate_from_contour',
    'select_candidates',
    'extract_candidate_regions',
    # Rectification
    'RectifiedRegion',
    'normalize_angle',
    'reference_point',
    'rotate_image',
    'rotate_points',
    'rectify',
    # Cropping
    'crop_region',
]
