"""Exception hierarchy for Rastersize."""


class RasterSizeError(Exception):
    """Base exception for all Rastersize errors."""

    pass


class DimensionError(RasterSizeError):
    """Errors related to image or constraint dimensions."""

    pass


class InvalidDimensionError(DimensionError):
    """One or more requested dimensions are not positive integers.

    All violations are collected so they can be reported together.
    """

    def __init__(self, violations: list[tuple[str, object]]) -> None:
        self.violations = violations
        problems = ", ".join(f"{name}: {value}" for name, value in violations)
        super().__init__(
            "Specified dimensions for images must be positive numbers (> 0). "
            f"Problem dimensions you have are {problems}"
        )


class ImageError(RasterSizeError):
    """Errors related to reading source images."""

    pass


class ImageReadError(ImageError):
    """Error reading the header of an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read image '{path}': {reason}")


class ColorValueError(RasterSizeError):
    """Color channel outside the 0-255 range."""

    def __init__(self, channel: str, value: int) -> None:
        self.channel = channel
        self.value = value
        super().__init__(f"Color channel '{channel}' must be within 0-255, got {value}")
