"""Dimension and constraint types for sizing requests.

This module defines the value types describing a source image and what
the caller asked for:
- ImageDimensions: natural pixel size of the source raster
- FitPolicy: how a target box is reconciled with the natural aspect ratio
- ImageLayout: fixed vs fluid/constrained rendering
- SizeConstraints: user-supplied width/height limits
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rastersize.exceptions import InvalidDimensionError


class FitPolicy(str, Enum):
    """Policy for resolving a width/height pair against a target box.

    Mirrors CSS ``object-fit``:
    - FILL: stretch to exactly the requested box
    - INSIDE: scale to fit entirely within the box
    - OUTSIDE: scale to fully cover the box
    - DEFAULT: derive a missing dimension from the aspect ratio
    """

    FILL = "fill"
    INSIDE = "inside"
    OUTSIDE = "outside"
    DEFAULT = "default"

    @classmethod
    def _missing_(cls, value: object) -> "FitPolicy | None":
        # Image-library names that fall through to proportional sizing
        if isinstance(value, str):
            lowered = value.lower()
            if lowered in ("cover", "contain"):
                return cls.DEFAULT
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class ImageLayout(str, Enum):
    """How the rendered image box behaves."""

    FIXED = "fixed"
    FLUID = "fluid"
    CONSTRAINED = "constrained"


@dataclass(frozen=True, slots=True)
class ImageDimensions:
    """Natural pixel size of a source image.

    Attributes:
        width: Width in pixels (> 0)
        height: Height in pixels (> 0)
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        violations = [
            (name, value)
            for name, value in (("width", self.width), ("height", self.height))
            if value < 1
        ]
        if violations:
            raise InvalidDimensionError(violations)

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with width and height
        """
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class SizeConstraints:
    """Sizing intent supplied by the caller.

    Any numeric field may be None. Fixed layouts read ``width``/``height``,
    fluid and constrained layouts read ``max_width``/``max_height``.

    Attributes:
        width: Exact displayed width for fixed layouts
        max_width: Maximum displayed width for fluid layouts
        height: Exact displayed height for fixed layouts
        max_height: Maximum displayed height for fluid layouts
        fit: Policy used when both a width and a height are given
    """

    width: int | None = None
    max_width: int | None = None
    height: int | None = None
    max_height: int | None = None
    fit: FitPolicy = FitPolicy.DEFAULT

    def __post_init__(self) -> None:
        # Unknown policies fail here, before any sizing starts
        object.__setattr__(self, "fit", FitPolicy(self.fit))

    def dimension_items(self) -> list[tuple[str, int | None]]:
        """Return the numeric constraints as (field, value) pairs.

        Returns:
            Pairs in declaration order, including unset fields
        """
        return [
            ("width", self.width),
            ("max_width", self.max_width),
            ("height", self.height),
            ("max_height", self.max_height),
        ]
