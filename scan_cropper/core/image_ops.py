"""Image decoding, encoding and array helpers."""

import io
import logging
from pathlib import Path
from typing import Iterable

import cv2
import numpy as np
import numpy.typing as npt
from PIL import Image

from ..config import CROPPER_DEFAULTS, SUPPORTED_IMAGE_EXTENSIONS, OutputFormat
from ..domain.value_objects.geometry import Point
from ..exceptions import DecodeError, EncodeError

logger = logging.getLogger(__name__)

# Type aliases
ImageArray = npt.NDArray[np.uint8]  # HxWx3, BGR
MaskArray = npt.NDArray[np.uint8]  # HxW
Contour = npt.NDArray[np.int32]  # Shape (N, 1, 2)
Points = npt.NDArray[np.float64]  # Shape (N, 2)


def decode_image(data: bytes, name: str = "scan") -> ImageArray:
    """Decode raw file bytes into a 3-channel BGR image.
    
    Args:
        data: Encoded image bytes (JPEG, PNG, TIFF, ...)
        name: Image name used in error messages
        
    Returns:
        Decoded image as HxWx3 uint8 array
        
    Raises:
        DecodeError: If the bytes are empty or not a supported image
    """
    if not data:
        raise DecodeError("Image data is empty", image_name=name)
    
    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if image is None or image.size == 0:
        raise DecodeError(
            "Could not decode image. The data may be corrupted or in an unsupported format.",
            image_name=name
        )
    
    logger.debug(f"Decoded {name}: {image.shape[1]}x{image.shape[0]}")
    return image


def encode_image(
    image: ImageArray,
    output_format: OutputFormat = OutputFormat.PNG,
    jpeg_quality: int = CROPPER_DEFAULTS.jpeg_quality
) -> bytes:
    """Encode a BGR image to bytes in the requested format.
    
    Raises:
        EncodeError: If the image is empty or Pillow fails to encode it
    """
    output_format = OutputFormat(output_format)
    if image is None or image.size == 0:
        raise EncodeError("Cannot encode an empty image", output_format.value)
    
    rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    params = {"quality": jpeg_quality} if output_format is OutputFormat.JPG else {}
    
    out = io.BytesIO()
    try:
        Image.fromarray(rgb).save(out, format=output_format.pillow_format, **params)
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to encode image: {e}", output_format.value) from e
    return out.getvalue()


def is_supported_image(path: Path) -> bool:
    """Check whether the file extension is a supported input format."""
    return path.suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS


def points_to_array(points: Iterable[Point]) -> Points:
    """Convert points to an (N, 2) float array."""
    return np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)


def array_to_points(array: npt.ArrayLike) -> tuple[Point, ...]:
    """Convert an (N, 2) array to points."""
    return tuple(Point(float(x), float(y)) for x, y in np.asarray(array).reshape(-1, 2))
