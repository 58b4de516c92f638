"""
graphics.framebuffer tests
"""
import numpy as np
import pytest

from polyraster.core.errors import BufferSizeError
from polyraster.core.geometry import BLACK, RED, WHITE
from polyraster.graphics.framebuffer import PixelBuffer


class TestConstruction:
    def test_initial_color(self):
        buf = PixelBuffer(4, 3, (1, 2, 3))
        assert buf.size == (4, 3)
        assert buf.pixels.shape == (3, 4, 3)
        assert buf.get(3, 2) == (1, 2, 3)

    def test_defaults_to_black(self):
        buf = PixelBuffer(2, 2)
        assert not buf.pixels.any()

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5), (5, -3)])
    def test_rejects_non_positive_size(self, width, height):
        with pytest.raises(BufferSizeError):
            PixelBuffer(width, height)

    def test_rejects_non_integer_size(self):
        with pytest.raises(BufferSizeError):
            PixelBuffer(2.5, 4)

    def test_size_error_is_value_error(self):
        with pytest.raises(ValueError):
            PixelBuffer(0, 0)


class TestWrites:
    def test_set_and_get(self, buffer):
        buffer.set(3, 7, RED)
        assert buffer.get(3, 7) == RED
        # Row-major: y is the first array index
        assert tuple(buffer.pixels[7, 3]) == RED

    @pytest.mark.parametrize("x,y", [
        (-1, 0), (0, -1), (20, 0), (0, 20), (20, 20), (-5, -5), (10**9, -10**9),
    ])
    def test_out_of_bounds_set_is_ignored(self, buffer, x, y):
        buffer.set(5, 5, WHITE)
        before = buffer.copy()
        buffer.set(x, y, RED)
        np.testing.assert_array_equal(buffer.pixels, before)

    def test_get_out_of_bounds_raises(self, buffer):
        with pytest.raises(IndexError):
            buffer.get(20, 0)

    def test_clear(self, buffer):
        buffer.set(1, 1, RED)
        buffer.clear(WHITE)
        assert np.all(buffer.pixels == 255)
        buffer.clear()
        assert not buffer.pixels.any()

    def test_fill_span_inclusive(self, buffer, painted):
        buffer.fill_span(4, 2, 6, RED)
        assert painted() == {(x, 4) for x in range(2, 7)}

    def test_fill_span_clipped(self, buffer, painted):
        buffer.fill_span(0, -5, 3, RED)
        buffer.fill_span(1, 17, 40, RED)
        assert painted() == {(x, 0) for x in range(0, 4)} | {(x, 1) for x in range(17, 20)}

    def test_fill_span_outside_rows_ignored(self, buffer):
        buffer.fill_span(-1, 0, 19, RED)
        buffer.fill_span(20, 0, 19, RED)
        buffer.fill_span(3, 25, 30, RED)
        assert not buffer.pixels.any()


class TestExport:
    def test_rgb_bytes_length(self):
        for w, h in [(1, 1), (7, 3), (800, 600)]:
            assert len(PixelBuffer(w, h).to_rgb_bytes()) == w * h * 3

    def test_rgb_bytes_layout(self):
        buf = PixelBuffer(2, 2)
        buf.set(1, 0, (1, 2, 3))
        buf.set(0, 1, (4, 5, 6))
        assert buf.to_rgb_bytes() == bytes([0, 0, 0, 1, 2, 3, 4, 5, 6, 0, 0, 0])

    def test_iter_pixels_row_major(self):
        buf = PixelBuffer(3, 2)
        buf.set(2, 1, RED)
        pixels = list(buf.iter_pixels())
        assert [(x, y) for x, y, _ in pixels] == [
            (0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1),
        ]
        assert pixels[-1][2] == RED
        assert pixels[0][2] == BLACK

    def test_copy_is_independent(self, buffer):
        snapshot = buffer.copy()
        buffer.set(0, 0, RED)
        assert not snapshot.any()
