"""Scan session - runs the cropping pipeline and keeps batch counters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import cv2

from ...core.crop import crop_region
from ...core.image_ops import ImageArray, decode_image
from ...core.preprocess import build_mask
from ...core.rectify import rectify
from ...core.regions import extract_candidate_regions
from ...domain.entities.region import CandidateRegion
from ...domain.value_objects.settings import Settings
from ...exceptions import DecodeError, RegionError
from ..ports.event_publisher import EventPublisher, ProcessingEvent, SimpleEventPublisher

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Pipeline stage the session is currently in."""
    IDLE = "idle"
    DECODING = "decoding"
    PREPROCESSING = "preprocessing"
    EXTRACTING = "extracting"
    RECTIFYING = "rectifying"
    DONE = "done"


@dataclass
class SessionStats:
    """Counters aggregated over one batch."""
    images_processed: int = 0
    regions_extracted: int = 0
    region_errors: int = 0
    
    def summary(self) -> str:
        return (
            f"Done: {self.images_processed} images → "
            f"{self.regions_extracted} scans ({self.region_errors} errors)"
        )


class ScanSession:
    """Detect, straighten and crop the items in scanned images.
    
    One session is used per batch. Images and their regions are processed
    one after another; a failing region is counted and skipped, and an
    image that cannot be decoded yields no regions.
    """
    
    def __init__(
        self,
        settings: Settings | None = None,
        event_publisher: EventPublisher | None = None
    ):
        self.settings = settings or Settings()
        self.stats = SessionStats()
        self.state = SessionState.IDLE
        self._events = event_publisher or SimpleEventPublisher()
    
    def process_buffer(self, data: bytes, name: str = "scan") -> list[ImageArray]:
        """Decode an encoded image and crop its regions.
        
        Args:
            data: Encoded image bytes
            name: Image name for logs and events
            
        Returns:
            Cropped regions, largest first. Empty if decoding failed.
        """
        self.stats.images_processed += 1
        try:
            self._enter(SessionState.DECODING, name)
            try:
                image = decode_image(data, name)
            except DecodeError as e:
                logger.warning(f"Skipping {name}: {e}")
                return []
            return self._extract_scans(image, name)
        finally:
            self.state = SessionState.IDLE
    
    def process_image(self, image: ImageArray, name: str = "scan") -> list[ImageArray]:
        """Crop the regions of an already decoded BGR image."""
        self.stats.images_processed += 1
        try:
            return self._extract_scans(image, name)
        finally:
            self.state = SessionState.IDLE
    
    def find_candidates(self, image: ImageArray, name: str = "scan") -> list[CandidateRegion]:
        """Run the preprocessing and region extraction stages only."""
        settings = self.settings
        
        self._enter(SessionState.PREPROCESSING, name)
        mask = build_mask(image, settings.blur, settings.thresh, settings.max_val)
        
        self._enter(SessionState.EXTRACTING, name)
        h, w = image.shape[:2]
        return extract_candidate_regions(mask, (w, h), settings.min_area_ratio)
    
    def crop_candidate(
        self,
        image: ImageArray,
        candidate: CandidateRegion,
        index: int | None = None
    ) -> ImageArray:
        """Rectify and crop one candidate.
        
        Raises:
            RegionError: If the region cannot produce a non-empty crop
        """
        try:
            rectified = rectify(image, candidate)
        except (ValueError, OverflowError, cv2.error) as e:
            raise RegionError(f"Rectification failed: {e}", index) from e
        
        return crop_region(rectified.image, rectified.corners, index)
    
    def _extract_scans(self, image: ImageArray, name: str) -> list[ImageArray]:
        candidates = self.find_candidates(image, name)
        
        self._enter(SessionState.RECTIFYING, name)
        scans: list[ImageArray] = []
        for index, candidate in enumerate(candidates):
            try:
                scan = self.crop_candidate(image, candidate, index)
            except RegionError as e:
                self.stats.region_errors += 1
                logger.warning(f"{name}: skipping region {index}: {e}")
                self._events.publish(ProcessingEvent(
                    stage="region_failed",
                    message=str(e),
                    progress=(index + 1) / len(candidates),
                    image_name=name
                ))
                continue
            
            self.stats.regions_extracted += 1
            scans.append(scan)
            self._events.publish(ProcessingEvent(
                stage="region_cropped",
                message=f"Region {index}: {scan.shape[1]}x{scan.shape[0]}",
                progress=(index + 1) / len(candidates),
                image_name=name
            ))
        
        self._enter(SessionState.DONE, name)
        logger.info(f"{name}: {len(scans)} of {len(candidates)} region(s) cropped")
        return scans
    
    def _enter(self, state: SessionState, name: str) -> None:
        self.state = state
        self._events.publish(ProcessingEvent(
            stage=state.value,
            message=f"{state.value.capitalize()} {name}",
            image_name=name
        ))

    def subscribe_to_events(self, callback: Callable[[ProcessingEvent], None]) -> None:
        """Subscribe to processing events."""
        self._events.subscribe(callback)
