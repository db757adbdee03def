"""CLI application entry point for rastersize.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from rastersize import __version__
from rastersize.cli.output import (
    ConsoleReporter,
    console,
    create_progress,
    print_error,
    print_header,
    print_result,
    print_step,
    print_summary,
)
from rastersize.config import LoggingConfig, RasterSizeSettings, SizingConfig
from rastersize.core import (
    calculate_image_sizes,
    get_sizes,
    get_srcset,
    validate_dimensions,
    variant_filename,
)
from rastersize.domain import (
    FitPolicy,
    ImageDimensions,
    ImageLayout,
    SizeConstraints,
    SizeResult,
    SrcSetEntry,
)
from rastersize.exceptions import ImageReadError, InvalidDimensionError, RasterSizeError
from rastersize.io import parse_source_size, read_image_dimensions
from rastersize.utils import ThumbnailProgress, configure_logging

# Create the Typer app
app = typer.Typer(
    name="rastersize",
    help="Plan the raster widths a responsive image needs.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rastersize[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def plan(
    images: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Source images to read dimensions from",
            show_default=False,
        ),
    ] = None,
    source_size: Annotated[
        str | None,
        typer.Option(
            "--source-size",
            "-s",
            help="Natural size as WIDTHxHEIGHT instead of reading an image",
        ),
    ] = None,
    layout: Annotated[
        str,
        typer.Option(
            "--layout",
            "-l",
            help="Image layout (fixed|fluid|constrained)",
        ),
    ] = "constrained",
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Displayed width for fixed layouts"),
    ] = None,
    height: Annotated[
        int | None,
        typer.Option("--height", "-H", help="Displayed height for fixed layouts"),
    ] = None,
    max_width: Annotated[
        int | None,
        typer.Option("--max-width", help="Maximum displayed width for fluid layouts"),
    ] = None,
    max_height: Annotated[
        int | None,
        typer.Option("--max-height", help="Maximum displayed height for fluid layouts"),
    ] = None,
    fit: Annotated[
        str,
        typer.Option(
            "--fit",
            "-f",
            help="Fit policy when width and height are both given (fill|inside|outside|default)",
        ),
    ] = "default",
    densities: Annotated[
        list[float] | None,
        typer.Option(
            "--density",
            "-d",
            help="Output pixel density (repeatable, default: 0.25 0.5 1 2)",
        ),
    ] = None,
    breakpoints: Annotated[
        list[int] | None,
        typer.Option(
            "--breakpoint",
            "-b",
            help="Explicit srcset width for fluid layouts (repeatable)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute the widths to render for each source image.

    Example:
        rastersize hero.jpg --layout fixed --width 600

    This prints the raster widths (600 and 1200 when the source is wide
    enough), the presentation box and the sizes/srcset attribute values.
    """
    if not images and source_size is None:
        print_error(
            "No source given",
            details="Pass one or more image paths or --source-size WIDTHxHEIGHT.",
        )
        raise typer.Exit(code=1)

    if images and source_size is not None:
        print_error(
            "Conflicting sources",
            details="Pass image paths or --source-size, not both.",
        )
        raise typer.Exit(code=1)

    try:
        fit_policy = FitPolicy(fit)
    except ValueError:
        print_error(
            f"Invalid fit: {fit}",
            details="Valid values: fill, inside, outside, default",
        )
        raise typer.Exit(code=1)

    constraints = SizeConstraints(
        width=width,
        max_width=max_width,
        height=height,
        max_height=max_height,
        fit=fit_policy,
    )

    try:
        validate_dimensions(constraints)
        settings = RasterSizeSettings(
            sizing=SizingConfig(output_pixel_densities=tuple(densities))
            if densities
            else SizingConfig(),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except InvalidDimensionError as e:
        print_error(
            "Invalid dimensions",
            details=", ".join(f"{name}: {value}" for name, value in e.violations),
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet or json_output,
    )

    show_progress = not (quiet or json_output)
    reporter = ConsoleReporter(quiet=quiet or json_output)
    sources = [source_size] if source_size is not None else [str(path) for path in images]

    if show_progress:
        print_header(__version__)
        print_step(f"Planning {len(sources)} image(s)")

    progress = ThumbnailProgress(progress_factory=create_progress) if show_progress else None
    if progress is not None:
        progress.add_images(len(sources))

    planned: list[dict[str, Any]] = []
    failed = 0

    try:
        for source in sources:
            try:
                dimensions = _load_dimensions(source, from_size=source_size is not None)
                result = calculate_image_sizes(
                    dimensions,
                    constraints,
                    layout,
                    output_pixel_densities=settings.sizing.output_pixel_densities,
                    srcset_breakpoints=breakpoints or None,
                    reporter=reporter,
                    source=source,
                    config=settings.sizing,
                )
            except (FileNotFoundError, ImageReadError, InvalidDimensionError, ValueError) as e:
                failed += 1
                if not json_output:
                    print_error(f"Could not read {source}", details=str(e))
                continue
            finally:
                if progress is not None:
                    progress.tick()

            entry = _describe(source, dimensions, layout, result)
            planned.append(entry)
            if not json_output and not quiet:
                print_result(
                    source,
                    dimensions,
                    layout,
                    result,
                    entry["sizes_attribute"],
                    entry["srcset"],
                )
    except RasterSizeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        if progress is not None:
            progress.done()

    if json_output:
        typer.echo(
            json.dumps({"images": planned, "warnings": reporter.warnings}, indent=2)
        )
    elif not quiet:
        print_summary(len(planned), failed, len(reporter.warnings))

    if failed:
        raise typer.Exit(code=1)


def _load_dimensions(source: str, from_size: bool) -> ImageDimensions:
    """Read natural dimensions from a size string or an image file.

    Args:
        source: ``WIDTHxHEIGHT`` string or image path
        from_size: Whether ``source`` is a size string

    Returns:
        Natural dimensions of the source
    """
    if from_size:
        return parse_source_size(source)
    return read_image_dimensions(Path(source))


def _describe(
    source: str, dimensions: ImageDimensions, layout: str, result: SizeResult
) -> dict[str, Any]:
    """Build the serializable description of one planned image."""
    entries = [SrcSetEntry(src=variant_filename(source, size), width=size) for size in result.sizes]
    known_layout = layout in {member.value for member in ImageLayout}
    return {
        "source": source,
        "natural": dimensions.to_dict(),
        "layout": layout,
        **result.to_dict(),
        "sizes_attribute": get_sizes(result.presentation_width) if known_layout else "",
        "srcset": get_srcset(entries),
    }


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
