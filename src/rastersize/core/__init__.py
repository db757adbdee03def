"""Core sizing algorithms for rastersize.

This module contains the core algorithms for:

- Pixel density normalization
- Fit policy resolution (fill, inside, outside, default)
- Fixed layout sizing
- Fluid and constrained layout sizing
- Request validation and layout dispatch

All functions are pure apart from advisory warnings sent to the reporter
passed in by the caller, so they are safe to call from any thread.

Key functions:
- calculate_image_sizes: Validate a request and route it by layout
- fixed_image_sizes: Widths for a fixed display box
- fluid_image_sizes: Widths for a fluid box capped at a maximum width
- resolve_fit: Resolve a target box against the natural aspect ratio
- dedupe_and_sort_densities: Normalize output pixel densities
- get_sizes / get_srcset: Format HTML attribute values
"""

from rastersize.core.calculator import calculate_image_sizes, validate_dimensions
from rastersize.core.densities import dedupe_and_sort_densities, round_half_up
from rastersize.core.fit import resolve_fit
from rastersize.core.fixed import fixed_image_sizes
from rastersize.core.fluid import fluid_image_sizes
from rastersize.core.formatting import get_sizes, get_srcset, rgb_to_hex, variant_filename

__all__ = [
    # Dispatch
    "calculate_image_sizes",
    # Normalization
    "dedupe_and_sort_densities",
    # Sizers
    "fixed_image_sizes",
    "fluid_image_sizes",
    # Formatting
    "get_sizes",
    "get_srcset",
    "resolve_fit",
    "rgb_to_hex",
    "round_half_up",
    "validate_dimensions",
    "variant_filename",
]
