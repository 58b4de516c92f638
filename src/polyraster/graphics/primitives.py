"""Line and polygon rasterization primitives."""

import logging
from typing import Iterator, List, Sequence

from polyraster.core.errors import DegenerateInputError
from polyraster.core.geometry import Color, Point2D, PointLike, Polygon, as_point, as_polygon, vertical_extent
from polyraster.graphics.framebuffer import PixelBuffer

logger = logging.getLogger(__name__)


def line_points(start: PointLike, end: PointLike) -> Iterator[Point2D]:
    """Yield the pixels of a line using Bresenham's algorithm.

    Integer-only, so identical endpoints always give identical output.
    Both endpoints are included and exactly max(dx, dy) + 1 points
    are produced.

    Args:
        start: First endpoint
        end: Second endpoint
    """
    x, y = as_point(start)
    x2, y2 = as_point(end)

    dx = abs(x2 - x)
    dy = abs(y2 - y)
    sx = 1 if x < x2 else -1
    sy = 1 if y < y2 else -1
    err = dx - dy

    while True:
        yield Point2D(x, y)

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_line(
    buffer: PixelBuffer,
    start: PointLike,
    end: PointLike,
    color: Color,
) -> None:
    """Draw a line on the buffer.

    Args:
        buffer: Target pixel buffer
        start: First endpoint
        end: Second endpoint
        color: RGB color tuple
    """
    for x, y in line_points(start, end):
        buffer.set(x, y, color)


def _trunc_div(num: int, den: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(num) // abs(den)
    return q if (num < 0) == (den < 0) else -q


def scanline_intersections(vertices: Sequence[PointLike], y: int) -> List[int]:
    """Sorted x coordinates where polygon edges cross scanline y.

    Edges are half-open in y (lower endpoint included, upper excluded) so
    a vertex shared by two edges is counted once. Horizontal edges never
    cross. The intersection x is truncated toward zero.
    """
    points = as_polygon(vertices)
    n = len(points)
    xs: List[int] = []

    for i in range(n):
        current = points[i]
        nxt = points[(i + 1) % n]

        if (current.y <= y < nxt.y) or (nxt.y <= y < current.y):
            x = current.x + _trunc_div(
                (y - current.y) * (nxt.x - current.x),
                nxt.y - current.y,
            )
            xs.append(x)

    xs.sort()
    return xs


def fill_polygon(buffer: PixelBuffer, vertices: Polygon, color: Color) -> None:
    """Fill a polygon interior with horizontal scanlines.

    Intersections on each scanline are paired in order (1st-2nd,
    3rd-4th, ...) and each pair is filled inclusively. A trailing
    unpaired intersection is left unfilled.

    Args:
        buffer: Target pixel buffer
        vertices: Polygon vertices, implicitly closed
        color: RGB fill color

    Raises:
        DegenerateInputError: If vertices is empty
    """
    points = as_polygon(vertices)
    if not points:
        raise DegenerateInputError("Cannot fill a polygon with no vertices")
    if len(points) < 3:
        logger.debug(f"Filling degenerate polygon with {len(points)} vertices")

    min_y, max_y = vertical_extent(points)

    for y in range(min_y, max_y + 1):
        xs = scanline_intersections(points, y)
        for i in range(0, len(xs) - 1, 2):
            buffer.fill_span(y, xs[i], xs[i + 1], color)


def draw_polygon_outline(
    buffer: PixelBuffer,
    vertices: Polygon,
    color: Color,
    min_vertices: int = 4,
) -> bool:
    """Draw every edge of a polygon, closing last vertex to first.

    Args:
        buffer: Target pixel buffer
        vertices: Polygon vertices
        color: RGB outline color
        min_vertices: Polygons with fewer vertices are skipped

    Returns:
        True if the outline was drawn
    """
    points = as_polygon(vertices)
    if len(points) < min_vertices:
        logger.warning(
            f"Skipping outline: polygon has {len(points)} vertices, "
            f"need at least {min_vertices}"
        )
        return False

    n = len(points)
    for i in range(n):
        draw_line(buffer, points[i], points[(i + 1) % n], color)
    return True
