"""Utility functions for rastersize.

This module provides utility functions including:

- Logging setup and configuration
- The reporter protocol used for advisory warnings
- Progress reporting helpers
"""

from rastersize.utils.logging import (
    LoggingReporter,
    Reporter,
    configure_logging,
    get_logger,
)
from rastersize.utils.progress import ThumbnailProgress

__all__ = [
    "LoggingReporter",
    "Reporter",
    "ThumbnailProgress",
    "configure_logging",
    "get_logger",
]
