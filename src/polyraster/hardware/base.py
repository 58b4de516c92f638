"""
Abstract base class for presentation sinks.

Both the pygame window display and the headless in-memory display
follow this contract.
"""

from abc import ABC, abstractmethod
import numpy as np
from numpy.typing import NDArray

from polyraster.graphics.framebuffer import PixelBuffer


class Display(ABC):
    """Abstract base class for display surfaces."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Display width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Display height in pixels."""
        ...

    @abstractmethod
    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set a single pixel color."""
        ...

    @abstractmethod
    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        """
        Set entire display buffer.

        Args:
            buffer: numpy array of shape (height, width, 3) with RGB values
        """
        ...

    @abstractmethod
    def show(self) -> None:
        """Present the current buffer contents."""
        ...

    @abstractmethod
    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of current display buffer."""
        ...

    def draw_pixels(self, buffer: PixelBuffer) -> None:
        """Paint a pixel buffer one pixel at a time, row-major, x fastest."""
        for x, y, (r, g, b) in buffer.iter_pixels():
            self.set_pixel(x, y, r, g, b)
