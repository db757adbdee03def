"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, progress bars and formatted messages.
"""

from rich.console import Console
from rich.progress import Progress
from rich.table import Table
from rich.text import Text

from rastersize.domain import ImageDimensions, SizeResult
from rastersize.utils.progress import default_progress_factory

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


class ConsoleReporter:
    """Reporter that prints warnings to the console."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        """Record a warning and print it unless quiet."""
        message = " ".join(message.split())
        self.warnings.append(message)
        if not self.quiet:
            console.print(f"  [yellow]{SYM_WARN} {message}[/yellow]")


def create_progress() -> Progress:
    """Create the progress bar used while planning images."""
    return default_progress_factory(console)


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Rastersize[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_result(
    source: str,
    dimensions: ImageDimensions,
    layout: str,
    result: SizeResult,
    sizes_attr: str,
    srcset_attr: str,
) -> None:
    """Print the sizing result for one image.

    Args:
        source: Image label (path or ``WxH``)
        dimensions: Natural dimensions of the source
        layout: Layout used
        result: Computed sizes
        sizes_attr: ``sizes`` attribute value
        srcset_attr: ``srcset`` attribute value
    """
    # Use Text to safely handle paths with special characters
    title = Text("  ")
    title.append(source, style="bold")
    title.append(f" ({dimensions.width}×{dimensions.height}, {layout})")
    console.print(title)

    if not result.sizes:
        console.print("  [yellow]No sizes computed[/yellow]")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Width", justify="right")
    table.add_column("Density", justify="right")
    for size in result.sizes:
        density = size / result.presentation_width
        table.add_row(f"{size}px", f"{density:g}x")
    console.print(table)

    console.print(
        f"  Presentation {result.presentation_width}×{result.presentation_height} "
        f"{SYM_DOT} ratio {result.aspect_ratio:.4g}"
    )
    sizes_line = Text("  sizes  ")
    sizes_line.append(sizes_attr)
    console.print(sizes_line)
    srcset_line = Text("  srcset ")
    srcset_line.append(srcset_attr.replace("\n", ", "))
    console.print(srcset_line)


def print_summary(planned: int, failed: int, warnings: int) -> None:
    """Print run summary.

    Args:
        planned: Number of images planned successfully
        failed: Number of images that could not be read
        warnings: Number of warnings raised
    """
    style = "red" if failed else "green"
    console.print(
        f"\n[bold {style}]{SYM_OK if not failed else SYM_ERR} Complete[/bold {style}] "
        f"{planned} images {SYM_DOT} {failed} failed {SYM_DOT} {warnings} warnings"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
