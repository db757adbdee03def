"""Configuration management for rastersize.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SizingConfig: Default densities and fallback widths
- LoggingConfig: Logging settings
- RasterSizeSettings: Main application settings
"""

from rastersize.config.settings import (
    DEFAULT_FIXED_WIDTH,
    DEFAULT_FLUID_WIDTH,
    DEFAULT_PIXEL_DENSITIES,
    LoggingConfig,
    RasterSizeSettings,
    SizingConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_FIXED_WIDTH",
    "DEFAULT_FLUID_WIDTH",
    "DEFAULT_PIXEL_DENSITIES",
    "LoggingConfig",
    "RasterSizeSettings",
    "SizingConfig",
    "get_default_settings",
]
