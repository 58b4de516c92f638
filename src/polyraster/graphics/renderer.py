"""Polygon renderer: scanline fill followed by outline."""

import logging
from dataclasses import dataclass
from typing import Iterable

from polyraster.core.geometry import RED, WHITE, Color, Polygon
from polyraster.graphics.framebuffer import PixelBuffer
from polyraster.graphics.primitives import draw_polygon_outline, fill_polygon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderStyle:
    """Colors and thresholds used when rendering polygons."""

    fill_color: Color = RED
    outline_color: Color = WHITE
    min_outline_vertices: int = 4
    fill: bool = True
    outline: bool = True


@dataclass
class RenderStats:
    """Counts from a single render pass."""

    polygons: int = 0
    filled: int = 0
    outlined: int = 0


class PolygonRenderer:
    """Renders polygon lists into a pixel buffer.

    Each polygon is filled first and outlined second, so outline pixels
    are never covered by the same polygon's fill. Polygons are drawn in
    list order; later polygons paint over earlier ones.
    """

    def __init__(self, style: RenderStyle | None = None) -> None:
        self.style = style or RenderStyle()

    def render_polygon(self, buffer: PixelBuffer, vertices: Polygon) -> tuple[bool, bool]:
        """Render one polygon.

        Returns:
            (filled, outlined) flags
        """
        style = self.style
        filled = False
        outlined = False

        if style.fill:
            fill_polygon(buffer, vertices, style.fill_color)
            filled = True

        if style.outline:
            outlined = draw_polygon_outline(
                buffer, vertices, style.outline_color, style.min_outline_vertices
            )

        return filled, outlined

    def render(self, buffer: PixelBuffer, polygons: Iterable[Polygon]) -> RenderStats:
        """Render every polygon in order."""
        stats = RenderStats()
        for vertices in polygons:
            filled, outlined = self.render_polygon(buffer, vertices)
            stats.polygons += 1
            stats.filled += int(filled)
            stats.outlined += int(outlined)

        logger.debug(
            f"Rendered {stats.polygons} polygons "
            f"({stats.filled} filled, {stats.outlined} outlined)"
        )
        return stats
