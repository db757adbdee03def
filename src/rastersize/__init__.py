"""Rastersize - Plan the raster widths a responsive image needs.

Rastersize computes which widths should be generated for a single source
image given a layout (fixed, fluid or constrained), optional width/height
constraints and a fit policy. It never touches pixel data; only the natural
dimensions of the source are needed.

Example:
    $ rastersize photo.jpg --layout fluid --max-width 1200

This prints the widths to render (e.g. 300, 600, 1200, 2400), the
presentation box and ready-to-use ``sizes``/``srcset`` attribute values.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
