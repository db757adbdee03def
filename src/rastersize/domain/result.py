"""Sizing results.

This module defines the outputs of the sizing pipeline: the resolved box
produced by the fit resolver and the final list of raster widths.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ResolvedDimensions:
    """Concrete box produced by resolving a fit policy.

    Attributes:
        width: Resolved width in pixels
        height: Resolved height in pixels
        aspect_ratio: width / height of the resolved pair
    """

    width: int
    height: int
    aspect_ratio: float


@dataclass(frozen=True, slots=True)
class SizeResult:
    """Raster widths to generate for one source image.

    Attributes:
        sizes: Ascending, distinct raster widths to render
        aspect_ratio: Aspect ratio of the presentation box
        presentation_width: Displayed (CSS) width
        presentation_height: Displayed (CSS) height
    """

    sizes: tuple[int, ...]
    aspect_ratio: float
    presentation_width: int
    presentation_height: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary.

        Returns:
            Dictionary representation of the result
        """
        return {
            "sizes": list(self.sizes),
            "aspect_ratio": self.aspect_ratio,
            "presentation_width": self.presentation_width,
            "presentation_height": self.presentation_height,
        }


@dataclass(frozen=True, slots=True)
class SrcSetEntry:
    """One candidate in a ``srcset`` attribute."""

    src: str
    width: int
