"""Exception types raised by the rasterization core and exporter."""


class RasterError(Exception):
    """Base class for polyraster errors."""


class BufferSizeError(RasterError, ValueError):
    """Pixel buffer dimensions are not positive integers."""


class DegenerateInputError(RasterError, ValueError):
    """Polygon has too few vertices to be processed."""


class ExportError(RasterError):
    """Base class for image export failures."""


class ImageEncodingError(ExportError, ValueError):
    """Pixel data does not describe a valid RGB image."""


class ImageWriteError(ExportError, OSError):
    """Image file could not be created or written."""
