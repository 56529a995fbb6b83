"""Command-line interface for Scan Cropper."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .application import BatchProcessor
from .config import CROPPER_DEFAULTS, OutputFormat
from .domain import Settings
from .exceptions import ConfigurationError, OutputError
from .utils.env import log_level_from_env, setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="scan-cropper",
        description="Detect, straighten and crop the photos on a flatbed scan"
    )
    
    parser.add_argument("input", help="Input image or folder")
    parser.add_argument("-o", "--output-dir", type=Path, help="Output folder")
    
    parser.add_argument(
        "-w", "--write-output",
        action="store_true",
        help="Write cropped images to the output folder"
    )
    
    parser.add_argument(
        "-f", "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.PNG.value,
        help="Output format (default: png)"
    )
    
    # Detection settings
    detect_group = parser.add_argument_group("Detection options")
    detect_group.add_argument(
        "-b", "--blur",
        type=int,
        default=CROPPER_DEFAULTS.blur,
        help=f"Median blur kernel size, odd (default: {CROPPER_DEFAULTS.blur})"
    )
    detect_group.add_argument(
        "-t", "--thresh",
        type=int,
        default=CROPPER_DEFAULTS.thresh,
        help=f"Background threshold (default: {CROPPER_DEFAULTS.thresh})"
    )
    detect_group.add_argument(
        "-m", "--max-val",
        type=int,
        default=CROPPER_DEFAULTS.max_val,
        help=f"Max threshold value (default: {CROPPER_DEFAULTS.max_val})"
    )
    detect_group.add_argument(
        "--min-area-ratio",
        type=float,
        default=CROPPER_DEFAULTS.min_area_ratio,
        metavar="RATIO",
        help="Minimum region size as a share of the image "
             f"(default: {CROPPER_DEFAULTS.min_area_ratio})"
    )
    
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log messages to this file"
    )
    
    return parser


def build_settings(parsed: argparse.Namespace) -> Settings:
    """Create settings from parsed arguments.
    
    Raises:
        ConfigurationError: If the arguments do not form valid settings
    """
    input_path = Path(parsed.input)
    try:
        return Settings(
            blur=parsed.blur,
            thresh=parsed.thresh,
            max_val=parsed.max_val,
            min_area_ratio=parsed.min_area_ratio,
            output_format=parsed.format,
            write_output=parsed.write_output,
            input_dir=input_path if input_path.is_dir() else None,
            output_dir=parsed.output_dir,
        )
    except ValidationError as e:
        errors = e.errors()
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in errors
        )
        key = str(errors[0]['loc'][0]) if errors and errors[0]['loc'] else None
        raise ConfigurationError(f"Invalid settings: {details}", config_key=key) from e


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)
    
    # Setup logging
    level = logging.DEBUG if parsed.verbose else log_level_from_env(logging.INFO)
    setup_logging(level, parsed.log_file)
    logger = logging.getLogger(__name__)
    
    input_path = Path(parsed.input)
    if not input_path.exists():
        logger.error(f"Input not found: {input_path}")
        return 1
    
    try:
        settings = build_settings(parsed)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    
    processor = BatchProcessor(settings)
    
    if input_path.is_file():
        files = [input_path]
    else:
        files = processor.collect_files(settings.input_dir)
    
    if not files:
        logger.error("No image files found")
        return 1
    
    logger.info(f"Processing {len(files)} image(s)...")
    
    try:
        result = processor.process_paths(files)
    except OutputError as e:
        logger.error(f"Aborting batch: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        logger.info(processor.stats.summary())
        return 1
    
    for file_result in result.results:
        if not file_result.success:
            logger.warning(f"  - {file_result.path.name}: {file_result.error_message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
