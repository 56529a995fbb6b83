"""Batch processor for cropping scans from files and directories."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from ...core.image_ops import ImageArray, encode_image, is_supported_image
from ...domain.value_objects.settings import Settings
from ...exceptions import ConfigurationError, EncodeError, OutputError
from ..ports.event_publisher import EventPublisher, ProcessingEvent, SimpleEventPublisher
from .scan_session import ScanSession, SessionStats

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Result of processing one input file."""
    path: Path
    scans: list[ImageArray] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.error_message is None


@dataclass
class BatchResult:
    """Result of batch processing."""
    results: list[FileResult]
    stats: SessionStats
    processing_time_ms: float

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)


class BatchProcessor:
    """Read scans from disk, crop them and optionally write the crops."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: ScanSession | None = None,
        event_publisher: EventPublisher | None = None
    ):
        self.settings = settings or Settings()
        self._events = event_publisher or SimpleEventPublisher()
        self.session = session or ScanSession(self.settings, self._events)
        self._output_ready = False

    @property
    def stats(self) -> SessionStats:
        return self.session.stats

    def prepare_output(self) -> None:
        """Create the output directory if output is enabled.

        Raises:
            OutputError: If the directory cannot be created
        """
        if not self.settings.write_output or self._output_ready:
            return

        output_dir = self.settings.output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot create output directory: {e}", output_dir) from e
        self._output_ready = True

    def output_path(self, source: Path, index: int) -> Path:
        """Path for the crop ranked ``index`` of ``source``."""
        fmt = self.settings.output_format.value
        return self.settings.output_dir / f"{source.stem}_{index}.{fmt}"

    def process_file(self, path: Path) -> FileResult:
        """Crop one file and write its scans if output is enabled."""
        path = Path(path)
        self.prepare_output()

        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            return FileResult(path=path, error_message=f"Cannot read file: {e}")

        scans = self.session.process_buffer(data, path.stem)
        result = FileResult(path=path, scans=scans)

        if self.settings.write_output:
            self._write_scans(result)
        return result

    def _write_scans(self, result: FileResult) -> None:
        settings = self.settings
        for index, scan in enumerate(result.scans):
            out_path = self.output_path(result.path, index)
            try:
                data = encode_image(scan, settings.output_format, settings.jpeg_quality)
            except EncodeError as e:
                logger.error(f"Failed to encode {out_path.name}: {e}")
                result.error_message = str(e)
                continue

            try:
                out_path.write_bytes(data)
            except OSError as e:
                raise OutputError(f"Cannot write output file: {e}", out_path) from e

            result.written.append(out_path)
            logger.info(f"→ {out_path}")

    def collect_files(self, input_dir: Path) -> list[Path]:
        """Supported image files directly inside ``input_dir``, sorted."""
        files = [
            f for f in Path(input_dir).iterdir()
            if f.is_file() and is_supported_image(f)
        ]
        files.sort()
        return files

    def process_paths(self, files: list[Path]) -> BatchResult:
        """Process multiple files.

        Args:
            files: Image files to process, in order

        Returns:
            Batch processing result

        Raises:
            OutputError: If output cannot be created or written
        """
        start_time = time.time()
        self.prepare_output()

        self._events.publish(ProcessingEvent(
            stage="batch_start",
            message=f"Starting batch of {len(files)} files",
            progress=0.0
        ))

        results: list[FileResult] = []
        for i, file_path in enumerate(files, 1):
            logger.info(f"[{i}/{len(files)}] Processing {file_path.name}...")
            results.append(self.process_file(file_path))

        elapsed = (time.time() - start_time) * 1000
        logger.info(self.stats.summary())

        self._events.publish(ProcessingEvent(
            stage="batch_complete",
            message=self.stats.summary(),
            progress=1.0
        ))

        return BatchResult(
            results=results,
            stats=self.stats,
            processing_time_ms=elapsed
        )

    def process_directory(self, input_dir: Path | None = None) -> BatchResult:
        """Process all supported images in a directory.

        Args:
            input_dir: Folder to scan; defaults to ``settings.input_dir``

        Raises:
            ConfigurationError: If no input directory is given or configured
            OutputError: If output cannot be created or written
        """
        input_dir = input_dir or self.settings.input_dir
        if input_dir is None:
            raise ConfigurationError("No input directory given", config_key="input_dir")
        return self.process_paths(self.collect_files(input_dir))

    def subscribe_to_events(self, callback) -> None:
        """Subscribe to processing events."""
        self._events.subscribe(callback)
