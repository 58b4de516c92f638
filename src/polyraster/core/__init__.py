"""Core types for polyraster."""

from .geometry import Point2D, Color, BLACK, WHITE, RED, parse_color
from .errors import (
    RasterError,
    BufferSizeError,
    DegenerateInputError,
    ExportError,
    ImageEncodingError,
    ImageWriteError,
)

__all__ = [
    "Point2D",
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "parse_color",
    "RasterError",
    "BufferSizeError",
    "DegenerateInputError",
    "ExportError",
    "ImageEncodingError",
    "ImageWriteError",
]
