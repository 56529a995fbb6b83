"""Application layer - use cases and orchestration."""

from .services.scan_session import ScanSession, SessionStats
from .services.batch_processor import BatchProcessor, BatchResult

__all__ = ['ScanSession', 'SessionStats', 'BatchProcessor', 'BatchResult']
