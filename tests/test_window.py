"""
simulator.window display tests
"""
import logging

import numpy as np
import pytest

pygame = pytest.importorskip("pygame")

from polyraster.core.geometry import RED
from polyraster.graphics.framebuffer import PixelBuffer
from polyraster.simulator.window import WindowDisplay


class TestWindowDisplay:
    def test_set_buffer(self):
        display = WindowDisplay(4, 3)
        buf = PixelBuffer(4, 3)
        buf.set(1, 2, RED)
        display.set_buffer(buf.pixels)
        np.testing.assert_array_equal(display.get_buffer(), buf.pixels)

    def test_wrong_shape_cropped(self):
        display = WindowDisplay(4, 3)
        display.set_buffer(np.ones((5, 5, 3), dtype=np.uint8))
        assert np.all(display.get_buffer() == 1)

    def test_show_counts_frames(self):
        display = WindowDisplay(4, 3)
        display.show()
        assert display.frames_shown == 1

    def test_render_surface(self):
        display = WindowDisplay(4, 3)
        display.set_pixel(1, 2, 255, 0, 0)
        surface = display.render()
        assert surface.get_size() == (4, 3)
        assert tuple(surface.get_at((1, 2)))[:3] == RED

    def test_render_scaled(self):
        display = WindowDisplay(4, 3)
        assert display.render(scale=3).get_size() == (12, 9)


@pytest.fixture
def window(square):
    from polyraster.frame import FrameDriver
    from polyraster.graphics.renderer import PolygonRenderer
    from polyraster.simulator.window import PolygonWindow

    driver = FrameDriver(PixelBuffer(20, 20), PolygonRenderer(), [square])
    win = PolygonWindow(driver)
    yield win
    win._cleanup()


class TestPolygonWindowLogs:
    def test_captures_log_messages(self, window):
        logging.getLogger("polyraster.tests").warning("frame dropped")
        assert window.log_lines[-1] == "W polyraster.tests: frame dropped"

    def test_log_buffer_capped(self, window):
        log = logging.getLogger("polyraster.tests")
        for i in range(100):
            log.warning(f"message {i}")
        lines = window.log_lines
        assert len(lines) <= window._max_log_lines * 2
        assert lines[-1].endswith("message 99")

    def test_cleanup_detaches_handler(self, square):
        from polyraster.frame import FrameDriver
        from polyraster.graphics.renderer import PolygonRenderer
        from polyraster.simulator.window import PolygonWindow

        win = PolygonWindow(FrameDriver(PixelBuffer(20, 20), PolygonRenderer(), [square]))
        win._cleanup()
        logging.getLogger("polyraster.tests").warning("after cleanup")
        assert not any("after cleanup" in line for line in win.log_lines)
