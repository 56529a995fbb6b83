"""Tests for the command-line interface."""

import logging

import pytest

from ..cli import build_settings, create_parser, main
from ..config import OutputFormat
from ..core.image_ops import encode_image
from ..exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger().handlers.clear()


@pytest.fixture
def scan_file(tmp_path, two_item_scan):
    path = tmp_path / "album.png"
    path.write_bytes(encode_image(two_item_scan))
    return path


class TestParser:
    """Test argument parsing."""

    def test_defaults(self, tmp_path):
        """Defaults match the cropper defaults; a folder input becomes input_dir."""
        parsed = create_parser().parse_args([str(tmp_path)])
        settings = build_settings(parsed)
        assert settings.blur == 9
        assert settings.thresh == 250
        assert settings.max_val == 255
        assert settings.output_format is OutputFormat.PNG
        assert settings.write_output is False
        assert settings.input_dir == tmp_path

    def test_file_input_has_no_input_dir(self, scan_file):
        """A single file input leaves input_dir unset."""
        settings = build_settings(create_parser().parse_args([str(scan_file)]))
        assert settings.input_dir is None

    def test_invalid_settings(self, tmp_path):
        """Validation errors surface as ConfigurationError with the field name."""
        parsed = create_parser().parse_args([str(tmp_path), "--blur", "4"])
        with pytest.raises(ConfigurationError) as exc_info:
            build_settings(parsed)
        assert exc_info.value.config_key == "blur"

    def test_bad_format_rejected(self, tmp_path):
        """Unknown output formats are rejected by argparse."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([str(tmp_path), "-f", "gif"])


class TestMain:
    """Test the CLI entry point."""

    def test_missing_input(self, tmp_path):
        """A nonexistent input path fails."""
        assert main([str(tmp_path / "nope")]) == 1

    def test_empty_directory(self, tmp_path):
        """A folder without images fails."""
        assert main([str(tmp_path)]) == 1

    def test_single_file_with_output(self, scan_file, tmp_path):
        """Crops of a single file are written in the chosen format."""
        out = tmp_path / "crops"
        assert main([str(scan_file), "-w", "-o", str(out), "-f", "jpg"]) == 0
        assert sorted(p.name for p in out.iterdir()) == ["album_0.jpg", "album_1.jpg"]

    def test_directory_without_writing(self, scan_file, tmp_path):
        """A folder is processed without touching disk when output is off."""
        assert main([str(scan_file.parent)]) == 0
        assert not (tmp_path / "crops").exists()

    def test_directory_with_output(self, scan_file, tmp_path):
        """Every image in the folder contributes numbered crops."""
        out = tmp_path / "crops"
        assert main([str(scan_file.parent), "-w", "-o", str(out)]) == 0
        assert sorted(p.name for p in out.iterdir()) == ["album_0.png", "album_1.png"]

    def test_write_without_output_dir(self, scan_file):
        """Writing requires an output folder."""
        assert main([str(scan_file), "-w"]) == 1

    def test_output_dir_failure(self, scan_file, tmp_path):
        """An output folder that cannot be created aborts the run."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        assert main([str(scan_file), "-w", "-o", str(blocker / "out")]) == 1
