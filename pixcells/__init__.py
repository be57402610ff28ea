"""Pixel-art documents: canvases, blending, rasterising, timeline, palette and file formats."""

__version__ = "0.1.0"