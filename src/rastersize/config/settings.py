"""Configuration settings for Rastersize."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_PIXEL_DENSITIES: tuple[float, ...] = (0.25, 0.5, 1.0, 2.0)
DEFAULT_FIXED_WIDTH = 400
DEFAULT_FLUID_WIDTH = 800


class SizingConfig(BaseModel):
    """Defaults applied when a request leaves dimensions unset."""

    output_pixel_densities: tuple[float, ...] = Field(
        default=DEFAULT_PIXEL_DENSITIES,
        description="Device pixel ratios to render for",
    )
    default_fixed_width: int = Field(
        default=DEFAULT_FIXED_WIDTH,
        ge=1,
        description="Width used for fixed layouts when neither width nor height is given",
    )
    default_fluid_width: int = Field(
        default=DEFAULT_FLUID_WIDTH,
        ge=1,
        description="Maximum width used for fluid layouts when no maximum is given",
    )

    @field_validator("output_pixel_densities")
    @classmethod
    def _densities_positive(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        if not value:
            raise ValueError("at least one pixel density is required")
        if any(density <= 0 for density in value):
            raise ValueError("pixel densities must be positive")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RasterSizeSettings(BaseModel):
    """Main application settings."""

    sizing: SizingConfig = Field(default_factory=SizingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterSizeSettings:
    """Get default application settings."""
    return RasterSizeSettings()
