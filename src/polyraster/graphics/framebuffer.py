"""Pixel buffer that all rasterization writes into."""

from typing import Iterator, Tuple
import numpy as np
from numpy.typing import NDArray

from polyraster.core.errors import BufferSizeError
from polyraster.core.geometry import BLACK, Color

# Type aliases
Buffer = NDArray[np.uint8]


class PixelBuffer:
    """
    Fixed-size RGB framebuffer.

    Stored as a numpy array of shape (height, width, 3), row-major.
    Writes outside the buffer are silently discarded so rasterizers
    never need to clip on their own.
    """

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int, height: int, color: Color = BLACK) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise BufferSizeError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise BufferSizeError(f"{name} must be positive, got {value}")

        self._width = int(width)
        self._height = int(height)
        self._pixels: Buffer = np.zeros((self._height, self._width, 3), dtype=np.uint8)
        if color != BLACK:
            self._pixels[:, :] = color

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) in pixels."""
        return self._width, self._height

    @property
    def pixels(self) -> Buffer:
        """Underlying (height, width, 3) array. Mutations are visible."""
        return self._pixels

    def set(self, x: int, y: int, color: Color) -> None:
        """Write a pixel. Out-of-bounds coordinates are ignored."""
        if 0 <= x < self._width and 0 <= y < self._height:
            self._pixels[y, x] = color

    def get(self, x: int, y: int) -> Color:
        """Read a pixel.

        Raises:
            IndexError: If (x, y) is outside the buffer
        """
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} buffer")
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def fill_span(self, y: int, x0: int, x1: int, color: Color) -> None:
        """Fill the inclusive run x0..x1 on row y, clipped to the buffer."""
        if not 0 <= y < self._height or x1 < x0:
            return
        start = max(0, x0)
        end = min(self._width - 1, x1)
        if start > end:
            return
        self._pixels[y, start:end + 1] = color

    def clear(self, color: Color = BLACK) -> None:
        """Overwrite every pixel with color."""
        self._pixels[:, :] = color

    def to_rgb_bytes(self) -> bytes:
        """Row-major RGB bytes, 3 per pixel."""
        return self._pixels.tobytes()

    def iter_pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield (x, y, color) row by row, x fastest."""
        for y in range(self._height):
            row = self._pixels[y]
            for x in range(self._width):
                r, g, b = row[x]
                yield x, y, (int(r), int(g), int(b))

    def copy(self) -> Buffer:
        """Get a copy of the pixel array."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"PixelBuffer({self._width}x{self._height})"
