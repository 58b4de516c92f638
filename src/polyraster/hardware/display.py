"""In-memory display used for headless rendering."""

import logging
import numpy as np
from numpy.typing import NDArray

from .base import Display

logger = logging.getLogger(__name__)


class BufferDisplay(Display):
    """
    Display that keeps presented frames in memory.

    Usage:
        display = BufferDisplay(800, 600)
        display.set_buffer(buffer.pixels)
        display.show()
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self._frame: NDArray[np.uint8] | None = None
        self.frames_shown = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._buffer[y, x] = [r, g, b]

    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        if buffer.shape == self._buffer.shape:
            np.copyto(self._buffer, buffer)
            return

        # Crop or zero-pad to display size
        logger.debug(f"Buffer shape {buffer.shape} != display {self._buffer.shape}")
        h = min(buffer.shape[0], self._height)
        w = min(buffer.shape[1], self._width)
        self._buffer.fill(0)
        self._buffer[:h, :w] = buffer[:h, :w, :3]

    def show(self) -> None:
        self._frame = self._buffer.copy()
        self.frames_shown += 1

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()

    @property
    def last_frame(self) -> NDArray[np.uint8] | None:
        """Buffer contents at the most recent show() call."""
        return self._frame
