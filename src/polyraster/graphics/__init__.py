"""Graphics module for the polyraster rendering pipeline."""

from polyraster.graphics.framebuffer import PixelBuffer
from polyraster.graphics.primitives import (
    line_points,
    draw_line,
    scanline_intersections,
    fill_polygon,
    draw_polygon_outline,
)
from polyraster.graphics.renderer import PolygonRenderer, RenderStyle, RenderStats
from polyraster.graphics.exporter import ImageExporter, load_rgb_bytes

__all__ = [
    # Framebuffer
    "PixelBuffer",
    # Renderer
    "PolygonRenderer",
    "RenderStyle",
    "RenderStats",
    # Primitives
    "line_points",
    "draw_line",
    "scanline_intersections",
    "fill_polygon",
    "draw_polygon_outline",
    # Export
    "ImageExporter",
    "load_rgb_bytes",
]
