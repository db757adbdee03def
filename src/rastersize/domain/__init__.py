"""Domain models for rastersize.

This module contains the value types describing a sizing request and its
result. All models are:

- Immutable (frozen dataclasses)
- Free of any image-library details
- Constructed fresh per sizing call

Key classes:
- ImageDimensions: Natural pixel size of the source image
- SizeConstraints: Caller-supplied width/height limits and fit policy
- ResolvedDimensions: Output of the fit resolver
- SizeResult: Raster widths plus presentation box
- SrcSetEntry: One candidate of a ``srcset`` attribute
"""

from rastersize.domain.dimensions import (
    FitPolicy,
    ImageDimensions,
    ImageLayout,
    SizeConstraints,
)
from rastersize.domain.result import ResolvedDimensions, SizeResult, SrcSetEntry

__all__: list[str] = [
    # Enums
    "FitPolicy",
    "ImageLayout",
    # Core types
    "ImageDimensions",
    "SizeConstraints",
    "ResolvedDimensions",
    "SizeResult",
    "SrcSetEntry",
]
