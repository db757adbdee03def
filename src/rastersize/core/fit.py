"""Fit policy resolution.

Turns a partial target box (width and/or height) into a concrete width,
height and aspect ratio for a source of known natural size.
"""

import math

from rastersize.core.densities import round_half_up
from rastersize.domain import FitPolicy, ImageDimensions, ResolvedDimensions


def resolve_fit(
    natural: ImageDimensions,
    width: int | None = None,
    height: int | None = None,
    fit: FitPolicy | str = FitPolicy.DEFAULT,
) -> ResolvedDimensions:
    """Resolve a target box against the natural image size.

    Without any target the natural size is returned whatever the policy.
    Derived dimensions never drop below one pixel.

    Args:
        natural: Natural dimensions of the source image
        width: Target width (None if unconstrained)
        height: Target height (None if unconstrained)
        fit: Policy used to reconcile the box with the natural aspect ratio

    Returns:
        Resolved width, height and their aspect ratio

    Example:
        >>> resolve_fit(ImageDimensions(1000, 500), width=300, height=300, fit="inside")
        ResolvedDimensions(width=300, height=150, aspect_ratio=2.0)
    """
    fit = FitPolicy(fit)
    ratio = natural.aspect_ratio

    if not width and not height:
        resolved_width, resolved_height = natural.width, natural.height

    elif fit is FitPolicy.FILL:
        resolved_width = width or natural.width
        resolved_height = height or natural.height

    elif fit is FitPolicy.INSIDE:
        width_bound = width or math.inf
        height_bound = height or math.inf
        resolved_width = min(width_bound, _derive(height_bound, ratio))
        resolved_height = min(height_bound, _derive(width_bound, 1 / ratio))

    elif fit is FitPolicy.OUTSIDE:
        width_bound = width or 0
        height_bound = height or 0
        resolved_width = max(width_bound, _derive(height_bound, ratio))
        resolved_height = max(height_bound, _derive(width_bound, 1 / ratio))

    elif width and height:
        # Both given: the caller chose the box, distortion included
        resolved_width, resolved_height = width, height

    elif width:
        resolved_width, resolved_height = width, _derive(width, 1 / ratio)

    else:
        resolved_width, resolved_height = _derive(height, ratio), height

    resolved_width = int(resolved_width)
    resolved_height = int(resolved_height)
    return ResolvedDimensions(
        width=resolved_width,
        height=resolved_height,
        aspect_ratio=resolved_width / resolved_height,
    )


def _derive(bound: float, factor: float) -> float:
    """Scale and round a bound; unbounded stays unbounded."""
    if math.isinf(bound):
        return bound
    return max(1, round_half_up(bound * factor))
