"""Pixel density normalization and rounding."""

import math
from collections.abc import Iterable


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which would shift derived widths by a pixel.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def dedupe_and_sort_densities(values: Iterable[float]) -> tuple[float, ...]:
    """Normalize a list of output pixel densities.

    Args:
        values: Requested device pixel ratios

    Returns:
        Ascending, duplicate-free densities, always including 1
    """
    return tuple(sorted({1.0, *(float(value) for value in values)}))
