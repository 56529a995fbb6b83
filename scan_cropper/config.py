"""Configuration and constants for the Scan Cropper project."""

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    """Supported output image formats."""
    PNG = "png"
    JPG = "jpg"

    @property
    def pillow_format(self) -> str:
        """Format name understood by Pillow's ``Image.save``."""
        return "JPEG" if self is OutputFormat.JPG else "PNG"


# Image processing constants
@dataclass(frozen=True)
class CropperDefaults:
    """Default values for the detection and rectification pipeline."""
    blur: int = 9  # Median blur kernel, must be odd
    thresh: int = 250  # Scanner background is brighter than this
    max_val: int = 255  # Foreground value written into the mask

    # Candidates must cover more than this share of the image
    min_area_ratio: float = 0.03

    # minAreaRect angle fix-up
    angle_limit: float = 45.0
    right_angle: float = 90.0

    # Fill for pixels rotated in from outside the source image
    border_value: tuple[int, int, int] = (0, 0, 0)

    # Encoding
    jpeg_quality: int = 95


CROPPER_DEFAULTS = CropperDefaults()


# File handling
SUPPORTED_IMAGE_EXTENSIONS: tuple[str, ...] = (
    '.jpg', '.jpeg',
    '.png',
    '.tiff',
)


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
LOG_LEVEL_ENV = "SCAN_CROPPER_LOG_LEVEL"
