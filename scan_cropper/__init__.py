"""Scan Cropper - split flatbed scans into straightened, cropped photos."""

__version__ = "1.0.0"

from .config import OutputFormat
from .application import BatchProcessor, BatchResult, ScanSession, SessionStats
from .domain import CandidateRegion, RotatedRect, Settings
from .exceptions import (
    ScanCropperError,
    ConfigurationError,
    DecodeError,
    RegionError,
    EncodeError,
    OutputError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'OutputFormat',
    'Settings',
    'ScanSession',
    'SessionStats',
    'BatchProcessor',
    'BatchResult',
    'CandidateRegion',
    'RotatedRect',
    'setup_logging',
    # Exceptions
    'ScanCropperError',
    'ConfigurationError',
    'DecodeError',
    'RegionError',
    'EncodeError',
    'OutputError',
]
