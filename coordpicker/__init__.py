"""Pick and record screen coordinates on a zoomable, grid-aligned canvas."""

__version__ = "0.1.1"