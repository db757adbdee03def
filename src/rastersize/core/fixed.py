"""Raster widths for fixed layouts.

A fixed image is displayed at one exact box size. Extra rasters only exist
to serve high-density screens, and the source is never upscaled.
"""

from collections.abc import Iterable

from rastersize.config import SizingConfig
from rastersize.core.densities import dedupe_and_sort_densities, round_half_up
from rastersize.core.fit import resolve_fit
from rastersize.core.parameters import resolve_reporter, warn_for_ignored_parameters
from rastersize.domain import ImageDimensions, SizeConstraints, SizeResult
from rastersize.utils.logging import Reporter, get_logger

logger = get_logger()


def fixed_image_sizes(
    dimensions: ImageDimensions,
    constraints: SizeConstraints,
    *,
    output_pixel_densities: Iterable[float] | None = None,
    reporter: Reporter | None = None,
    source: str = "<image>",
    config: SizingConfig | None = None,
) -> SizeResult:
    """Compute the raster widths for a fixed-size image.

    Args:
        dimensions: Natural dimensions of the source image
        constraints: Requested width/height and fit policy
        output_pixel_densities: Densities to render for (config default if None)
        reporter: Warning sink (logs through structlog if None)
        source: Label of the image used in warnings
        config: Sizing defaults

    Returns:
        Sizes never wider than the source, unless the requested width
        itself is wider, in which case that single width is returned.
    """
    config = config or SizingConfig()
    reporter = resolve_reporter(reporter)
    if output_pixel_densities is None:
        output_pixel_densities = config.output_pixel_densities
    densities = dedupe_and_sort_densities(output_pixel_densities)

    warn_for_ignored_parameters(
        "fixed",
        {"max_width": constraints.max_width, "max_height": constraints.max_height},
        source,
        reporter,
    )

    width = constraints.width
    height = constraints.height
    aspect_ratio = dimensions.aspect_ratio

    if width and height:
        resolved = resolve_fit(dimensions, width=width, height=height, fit=constraints.fit)
        width = resolved.width
        height = resolved.height
        aspect_ratio = resolved.aspect_ratio

    if not width and not height:
        width = config.default_fixed_width

    if not width:
        width = round_half_up(height * aspect_ratio)
    width = int(width)

    # Smaller densities are pointless for a box that never shrinks
    candidates = {round_half_up(density * width) for density in densities if density >= 1}
    sizes = sorted(size for size in candidates if size <= dimensions.width)

    if not sizes:
        sizes = [width]
        _warn_requested_too_large(dimensions, constraints, width, source, reporter)

    result = SizeResult(
        sizes=tuple(sizes),
        aspect_ratio=aspect_ratio,
        presentation_width=width,
        presentation_height=round_half_up(width / aspect_ratio),
    )
    logger.debug(
        "Fixed sizes computed",
        source=source,
        sizes=list(result.sizes),
        presentation_width=result.presentation_width,
    )
    return result


def _warn_requested_too_large(
    dimensions: ImageDimensions,
    constraints: SizeConstraints,
    width: int,
    source: str,
    reporter: Reporter,
) -> None:
    """Warn that the requested box is larger than the source image."""
    if constraints.height and not constraints.width:
        dimension, requested, actual = "height", constraints.height, dimensions.height
    else:
        dimension, requested, actual = "width", width, dimensions.width

    reporter.warn(
        f'The requested {dimension} "{requested}px" for the file {source} '
        f"was larger than the actual image {dimension} of {actual}px "
        f"(by {requested - actual}px)! "
        "If possible, replace the current image with a larger one."
    )
