"""Candidate region extraction and ranking."""

import logging
from typing import Iterable

import cv2

from ..config import CROPPER_DEFAULTS
from ..domain.entities.region import CandidateRegion
from ..domain.value_objects.geometry import RotatedRect
from .image_ops import Contour, MaskArray, array_to_points

logger = logging.getLogger(__name__)


def find_contours(mask: MaskArray) -> list[Contour]:
    """Find outer contours of the mask's foreground blobs.
    
    Holes and nested contours are ignored and collinear boundary points
    are dropped.
    """
    contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    return list(contours)


def candidate_from_contour(contour: Contour) -> CandidateRegion:
    """Reduce a contour to its minimum-area rotated rectangle."""
    cv_rect = cv2.minAreaRect(contour)
    rect = RotatedRect.from_cv(cv_rect)
    corners = array_to_points(cv2.boxPoints(cv_rect))
    return CandidateRegion.from_rotated_rect(rect, corners)


def select_candidates(
    candidates: Iterable[CandidateRegion],
    image_size: tuple[int, int],
    min_area_ratio: float = CROPPER_DEFAULTS.min_area_ratio
) -> list[CandidateRegion]:
    """Drop small candidates and rank the rest largest first.
    
    Args:
        candidates: Candidate regions in contour order
        image_size: (width, height) of the source image
        min_area_ratio: Candidates must cover strictly more than this
            share of the image
            
    Returns:
        Candidates sorted by area, descending
    """
    width, height = image_size
    min_area = width * height * min_area_ratio
    
    kept = [c for c in candidates if c.area > min_area]
    kept.sort(key=lambda c: c.area, reverse=True)
    return kept


def extract_candidate_regions(
    mask: MaskArray,
    image_size: tuple[int, int],
    min_area_ratio: float = CROPPER_DEFAULTS.min_area_ratio
) -> list[CandidateRegion]:
    """Find, filter and rank candidate regions in a mask.
    
    An empty list is a valid result.
    """
    contours = find_contours(mask)
    candidates = [candidate_from_contour(c) for c in contours]
    regions = select_candidates(candidates, image_size, min_area_ratio)
    
    logger.debug(
        f"{len(contours)} contour(s), {len(regions)} candidate(s) "
        f"above {min_area_ratio:.1%} of the image"
    )
    return regions
