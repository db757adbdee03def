"""Image I/O layer for rastersize.

This module reads source image metadata using Pillow. Only headers are
opened; decoding and resizing are left to the rendering pipeline.

Key functions:
- read_image_dimensions: Natural size of an image file
- parse_source_size: Natural size from a ``WIDTHxHEIGHT`` string
"""

from rastersize.io.reader import parse_source_size, read_image_dimensions

__all__ = [
    "parse_source_size",
    "read_image_dimensions",
]
