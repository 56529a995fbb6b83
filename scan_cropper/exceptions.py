"""Custom exceptions for Scan Cropper."""

from pathlib import Path
from typing import Optional


class ScanCropperError(Exception):
    """Base exception for all application errors.
    
    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """
    
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
    
    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(ScanCropperError):
    """Error in configuration or settings.
    
    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """
    
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key


class DecodeError(ScanCropperError):
    """Input bytes could not be interpreted as an image.
    
    Attributes:
        image_name: Name of the image being decoded when error occurred
    """
    
    def __init__(self, message: str, image_name: Optional[str] = None):
        super().__init__(message, error_code="DECODE_ERROR")
        self.image_name = image_name
    
    def __str__(self) -> str:
        if self.image_name:
            return f"{super().__str__()} (image: {self.image_name})"
        return super().__str__()


class RegionError(ScanCropperError):
    """A candidate region could not be rectified or cropped.
    
    Attributes:
        region_index: Rank of the candidate within its image (if applicable)
    """
    
    def __init__(self, message: str, region_index: Optional[int] = None):
        super().__init__(message, error_code="REGION_ERROR")
        self.region_index = region_index


class EncodeError(ScanCropperError):
    """Error encoding a cropped image.
    
    Attributes:
        output_format: The requested output format
    """
    
    def __init__(self, message: str, output_format: Optional[str] = None):
        super().__init__(message, error_code="ENCODE_ERROR")
        self.output_format = output_format


class OutputError(ScanCropperError):
    """Output resources could not be created. Fatal to the batch.
    
    Attributes:
        path: The path that could not be created or written
    """
    
    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message, error_code="OUTPUT_ERROR")
        self.path = path
