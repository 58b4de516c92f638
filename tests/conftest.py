import numpy as np
import pytest

from polyraster.core.geometry import RED
from polyraster.graphics.framebuffer import PixelBuffer


@pytest.fixture
def buffer():
    """Small black 20x20 buffer."""
    return PixelBuffer(20, 20)


@pytest.fixture
def painted(buffer):
    """Return the set of (x, y) pixels in buffer that are not black."""
    def _painted(buf=None):
        buf = buf or buffer
        ys, xs = np.nonzero(np.any(buf.pixels != 0, axis=2))
        return set(zip(xs.tolist(), ys.tolist()))
    return _painted


@pytest.fixture
def square():
    return [(0, 0), (10, 0), (10, 10), (0, 10)]


@pytest.fixture
def fill_color():
    return RED
