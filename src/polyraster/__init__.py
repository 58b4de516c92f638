"""polyraster: scanline polygon rasterizer with PNG export."""

__version__ = "0.1.0"

from polyraster.core.geometry import Point2D, Color, parse_color
from polyraster.graphics import (
    PixelBuffer,
    PolygonRenderer,
    RenderStyle,
    ImageExporter,
    draw_line,
    fill_polygon,
)
from polyraster.frame import FrameDriver

__all__ = [
    "Point2D",
    "Color",
    "parse_color",
    "PixelBuffer",
    "PolygonRenderer",
    "RenderStyle",
    "ImageExporter",
    "draw_line",
    "fill_polygon",
    "FrameDriver",
]
