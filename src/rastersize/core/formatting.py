"""HTML attribute and color formatting helpers."""

from collections.abc import Iterable
from pathlib import PurePath

from rastersize.domain import SrcSetEntry
from rastersize.exceptions import ColorValueError


def get_sizes(width: int) -> str:
    """Build a ``sizes`` attribute for an image capped at ``width``."""
    return f"(max-width: {width}px) 100vw, {width}px"


def get_srcset(entries: Iterable[SrcSetEntry]) -> str:
    """Build a ``srcset`` attribute, one candidate per line."""
    return "\n".join(f"{entry.src} {entry.width}w" for entry in entries)


def variant_filename(source_name: str, width: int) -> str:
    """Name the raster generated at ``width`` for ``source_name``.

    Example:
        >>> variant_filename("photos/cat.jpg", 400)
        'cat-400w.jpg'
    """
    path = PurePath(source_name)
    return f"{path.stem}-{width}w{path.suffix}"


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Pack RGB channels into a ``#rrggbb`` string.

    Raises:
        ColorValueError: If a channel is outside 0-255
    """
    for channel, value in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= value <= 255:
            raise ColorValueError(channel, value)
    return f"#{red:02x}{green:02x}{blue:02x}"
