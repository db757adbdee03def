"""Unit tests for the image I/O layer."""

from pathlib import Path

import pytest
from PIL import Image

from rastersize.domain import ImageDimensions
from rastersize.exceptions import ImageReadError, InvalidDimensionError
from rastersize.io import parse_source_size, read_image_dimensions


class TestReadImageDimensions:
    """Tests for read_image_dimensions."""

    def test_reads_png(self, tmp_path: Path) -> None:
        """Test dimensions come from the image header."""
        path = tmp_path / "wide.png"
        Image.new("RGB", (64, 32), color=(10, 20, 30)).save(path)

        assert read_image_dimensions(path) == ImageDimensions(64, 32)

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        """Test string paths work."""
        path = tmp_path / "tall.jpg"
        Image.new("RGB", (12, 40)).save(path)

        assert read_image_dimensions(str(path)) == ImageDimensions(12, 40)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_image_dimensions(tmp_path / "nope.png")

    def test_not_an_image(self, tmp_path: Path) -> None:
        """Test unreadable data raises ImageReadError."""
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png")

        with pytest.raises(ImageReadError) as exc_info:
            read_image_dimensions(path)
        assert exc_info.value.path == str(path)


class TestParseSourceSize:
    """Tests for parse_source_size."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1600x800", ImageDimensions(1600, 800)),
            ("300X300", ImageDimensions(300, 300)),
            (" 12 x 7 ", ImageDimensions(12, 7)),
        ],
    )
    def test_valid(self, value: str, expected: ImageDimensions) -> None:
        """Test WIDTHxHEIGHT strings parse."""
        assert parse_source_size(value) == expected

    @pytest.mark.parametrize("value", ["1600", "axb", "1x2x3", ""])
    def test_malformed(self, value: str) -> None:
        """Test malformed strings raise ValueError."""
        with pytest.raises(ValueError, match="WIDTHxHEIGHT"):
            parse_source_size(value)

    def test_zero_rejected(self) -> None:
        """Test zero-sized sources are rejected."""
        with pytest.raises(InvalidDimensionError):
            parse_source_size("0x100")
