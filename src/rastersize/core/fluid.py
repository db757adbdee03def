"""Raster widths for fluid and constrained layouts.

A fluid image scales with its container up to a maximum displayed width.
Rasters cover a range of viewport widths and densities, capped at the
source width.
"""

from collections.abc import Iterable

from rastersize.config import SizingConfig
from rastersize.core.densities import dedupe_and_sort_densities, round_half_up
from rastersize.core.fit import resolve_fit
from rastersize.core.parameters import resolve_reporter, warn_for_ignored_parameters
from rastersize.domain import ImageDimensions, SizeConstraints, SizeResult
from rastersize.utils.logging import Reporter, get_logger

logger = get_logger()


def fluid_image_sizes(
    dimensions: ImageDimensions,
    constraints: SizeConstraints,
    *,
    output_pixel_densities: Iterable[float] | None = None,
    srcset_breakpoints: Iterable[int] | None = None,
    reporter: Reporter | None = None,
    source: str = "<image>",
    config: SizingConfig | None = None,
) -> SizeResult:
    """Compute the raster widths for a fluid or constrained image.

    Args:
        dimensions: Natural dimensions of the source image
        constraints: Requested max_width/max_height and fit policy
        output_pixel_densities: Densities to render for (config default if None)
        srcset_breakpoints: Explicit widths to use instead of densities
        reporter: Warning sink (logs through structlog if None)
        source: Label of the image used in warnings
        config: Sizing defaults

    Returns:
        Ascending sizes that always include the presentation width.
    """
    config = config or SizingConfig()
    reporter = resolve_reporter(reporter)

    warn_for_ignored_parameters(
        "fluid and constrained",
        {"width": constraints.width, "height": constraints.height},
        source,
        reporter,
    )

    if output_pixel_densities is None:
        output_pixel_densities = config.output_pixel_densities
    densities = dedupe_and_sort_densities(output_pixel_densities)

    max_width: float | None = constraints.max_width
    max_height: float | None = constraints.max_height
    aspect_ratio = dimensions.aspect_ratio

    if max_width and max_height:
        resolved = resolve_fit(
            dimensions, width=max_width, height=max_height, fit=constraints.fit
        )
        max_width = resolved.width
        max_height = resolved.height
        aspect_ratio = resolved.aspect_ratio

    # Never ask for a maximum larger than the source
    if max_width:
        max_width = min(max_width, dimensions.width)
    if max_height:
        max_height = min(max_height, dimensions.height)

    if not max_width and not max_height:
        max_width = min(config.default_fluid_width, dimensions.width)
        max_height = max_width / aspect_ratio

    if not max_width:
        max_width = max_height * aspect_ratio

    presentation_width = max(1, round_half_up(max_width))

    if srcset_breakpoints is not None:
        candidates = set(srcset_breakpoints)
    else:
        candidates = {round_half_up(density * presentation_width) for density in densities}

    widths = {size for size in candidates if 0 < size <= dimensions.width}
    widths.add(presentation_width)

    result = SizeResult(
        sizes=tuple(sorted(widths)),
        aspect_ratio=aspect_ratio,
        presentation_width=presentation_width,
        presentation_height=round_half_up(presentation_width / aspect_ratio),
    )
    logger.debug(
        "Fluid sizes computed",
        source=source,
        sizes=list(result.sizes),
        presentation_width=result.presentation_width,
        breakpoints=srcset_breakpoints is not None,
    )
    return result
