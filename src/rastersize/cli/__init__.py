"""Command-line interface for rastersize.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Dimensions read from image headers or given as WIDTHxHEIGHT
- Tables of raster widths with sizes/srcset attribute values
- JSON output for build scripts
- Verbose/quiet output modes
"""

from rastersize.cli.app import cli, main

__all__ = ["cli", "main"]
