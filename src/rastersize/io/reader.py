"""Image dimension reader.

Reads the natural pixel size of an image from its header using Pillow.
Pixel data is never decoded.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from rastersize.domain import ImageDimensions
from rastersize.exceptions import ImageReadError


def read_image_dimensions(image_path: str | Path) -> ImageDimensions:
    """Read the natural dimensions of an image file.

    Args:
        image_path: Path to the image

    Returns:
        Natural width and height of the image

    Raises:
        FileNotFoundError: If the image does not exist
        ImageReadError: If Pillow cannot identify the image
    """
    image_path = Path(image_path)
    if not image_path.exists():
        raise FileNotFoundError(f"Image file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            width, height = img.size
    except (UnidentifiedImageError, OSError) as e:
        raise ImageReadError(str(image_path), str(e)) from e

    return ImageDimensions(width=width, height=height)


def parse_source_size(value: str) -> ImageDimensions:
    """Parse a ``WIDTHxHEIGHT`` string such as ``1600x800``.

    Raises:
        ValueError: If the string is not two integers separated by ``x``
    """
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Expected WIDTHxHEIGHT, got '{value}'")
    try:
        width, height = (int(part.strip()) for part in parts)
    except ValueError as e:
        raise ValueError(f"Expected WIDTHxHEIGHT, got '{value}'") from e
    return ImageDimensions(width=width, height=height)
