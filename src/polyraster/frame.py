"""Per-frame render driver.

Each frame is one sequential pass: clear the buffer, render every
polygon in order, export when eligible, then present.
"""

import logging
from pathlib import Path
from typing import Sequence

from polyraster.core.errors import ExportError
from polyraster.core.geometry import BLACK, Color, Polygon
from polyraster.graphics.exporter import ImageExporter, PathLike
from polyraster.graphics.framebuffer import PixelBuffer
from polyraster.graphics.renderer import PolygonRenderer, RenderStats
from polyraster.hardware.base import Display

logger = logging.getLogger(__name__)


class FrameDriver:
    """
    Owns the pixel buffer and the export-once state of a render loop.

    Usage:
        driver = FrameDriver(PixelBuffer(800, 600), PolygonRenderer(), polygons,
                             export_path="polygons.png")
        driver.render_frame()
        driver.present(display)
    """

    def __init__(
        self,
        buffer: PixelBuffer,
        renderer: PolygonRenderer,
        polygons: Sequence[Polygon],
        background: Color = BLACK,
        exporter: ImageExporter | None = None,
        export_path: PathLike | None = None,
        export_once: bool = True,
    ) -> None:
        self.buffer = buffer
        self.renderer = renderer
        self.polygons = list(polygons)
        self.background = background
        self.exporter = exporter or ImageExporter()
        self.export_path = Path(export_path) if export_path is not None else None
        self.export_once = export_once

        self.exported = False
        self.frame_count = 0
        self.last_stats: RenderStats | None = None
        self.last_export_error: ExportError | None = None

    @property
    def export_pending(self) -> bool:
        """True if the next frame will try to export."""
        if self.export_path is None:
            return False
        return not (self.export_once and self.exported)

    def render_frame(self) -> PixelBuffer:
        """Render one frame into the buffer and export if eligible."""
        self.buffer.clear(self.background)
        self.last_stats = self.renderer.render(self.buffer, self.polygons)

        if self.export_pending:
            self.export()

        self.frame_count += 1
        return self.buffer

    def export(self, path: PathLike | None = None) -> bool:
        """Export the current buffer.

        Failures are logged and reported through the return value so
        the render loop keeps running.

        Returns:
            True if the image was written
        """
        target = Path(path) if path is not None else self.export_path
        if target is None:
            return False

        try:
            self.exporter.export(self.buffer, target)
        except ExportError as e:
            self.last_export_error = e
            logger.error(f"Export failed: {e}")
            return False

        self.last_export_error = None
        if path is None:
            self.exported = True
        return True

    def present(self, display: Display) -> None:
        """Hand the current buffer to a display and show it."""
        display.set_buffer(self.buffer.pixels)
        display.show()
