"""Application services - orchestrate use cases."""

from .scan_session import ScanSession, SessionState, SessionStats
from .batch_processor import BatchProcessor, BatchResult, FileResult

__all__ = [
    'ScanSession',
    'SessionState',
    'SessionStats',
    'BatchProcessor',
    'BatchResult',
    'FileResult',
]
