"""Entry point that validates a sizing request and routes it by layout."""

import dataclasses
import numbers
from collections.abc import Iterable

from rastersize.config import SizingConfig
from rastersize.core.fixed import fixed_image_sizes
from rastersize.core.fluid import fluid_image_sizes
from rastersize.core.parameters import resolve_reporter
from rastersize.domain import ImageDimensions, ImageLayout, SizeConstraints, SizeResult
from rastersize.exceptions import InvalidDimensionError
from rastersize.utils.logging import Reporter


def validate_dimensions(constraints: SizeConstraints) -> None:
    """Check that every supplied dimension is an integer of at least 1.

    Args:
        constraints: Requested constraints

    Raises:
        InvalidDimensionError: Listing every offending field at once
    """
    violations = [
        (name, value)
        for name, value in constraints.dimension_items()
        if value is not None and not _is_positive_integer(value)
    ]
    if violations:
        raise InvalidDimensionError(violations)


def _is_positive_integer(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return value >= 1 and float(value).is_integer()


def _as_integers(constraints: SizeConstraints) -> SizeConstraints:
    return dataclasses.replace(
        constraints,
        **{
            name: int(value)
            for name, value in constraints.dimension_items()
            if value is not None
        },
    )


def calculate_image_sizes(
    dimensions: ImageDimensions,
    constraints: SizeConstraints,
    layout: ImageLayout | str,
    *,
    output_pixel_densities: Iterable[float] | None = None,
    srcset_breakpoints: Iterable[int] | None = None,
    reporter: Reporter | None = None,
    source: str = "<image>",
    config: SizingConfig | None = None,
) -> SizeResult:
    """Compute the raster widths for a source image.

    Args:
        dimensions: Natural dimensions of the source image
        constraints: Requested dimensions and fit policy
        layout: ``fixed``, ``fluid`` or ``constrained``
        output_pixel_densities: Densities to render for (config default if None)
        srcset_breakpoints: Explicit widths for fluid layouts
        reporter: Warning sink (logs through structlog if None)
        source: Label of the image used in warnings
        config: Sizing defaults

    Returns:
        The sizing result. An unknown layout yields no sizes and a warning.

    Raises:
        InvalidDimensionError: If any supplied dimension is below 1
    """
    validate_dimensions(constraints)
    constraints = _as_integers(constraints)
    reporter = resolve_reporter(reporter)

    try:
        layout = ImageLayout(layout)
    except ValueError:
        reporter.warn(
            f"No valid layout was provided for the image at {source}. "
            "Valid image layouts are fixed, fluid, and constrained."
        )
        return SizeResult(
            sizes=(),
            aspect_ratio=dimensions.aspect_ratio,
            presentation_width=dimensions.width,
            presentation_height=dimensions.height,
        )

    if layout is ImageLayout.FIXED:
        return fixed_image_sizes(
            dimensions,
            constraints,
            output_pixel_densities=output_pixel_densities,
            reporter=reporter,
            source=source,
            config=config,
        )

    return fluid_image_sizes(
        dimensions,
        constraints,
        output_pixel_densities=output_pixel_densities,
        srcset_breakpoints=srcset_breakpoints,
        reporter=reporter,
        source=source,
        config=config,
    )
