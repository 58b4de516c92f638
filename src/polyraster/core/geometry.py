"""Geometry and color types shared by the rasterizers."""

import numbers
from typing import NamedTuple, Sequence, Tuple, Union

# Type aliases
Color = Tuple[int, int, int]
ColorLike = Union[Color, Sequence[int], str]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)


class Point2D(NamedTuple):
    """Integer pixel coordinate."""
    x: int
    y: int


PointLike = Union[Point2D, Tuple[int, int]]
Polygon = Sequence[PointLike]


def as_point(point: PointLike) -> Point2D:
    """Coerce an (x, y) pair into a Point2D.

    Raises:
        ValueError: If the pair does not hold two integer coordinates
    """
    try:
        x, y = point
    except (TypeError, ValueError):
        raise ValueError(f"Vertex must be an (x, y) pair, got {point!r}") from None
    for c in (x, y):
        if isinstance(c, bool) or not isinstance(c, numbers.Integral):
            raise ValueError(f"Coordinates must be integers, got {point!r}")
    return Point2D(int(x), int(y))


def as_polygon(vertices: Polygon) -> list[Point2D]:
    """Coerce a vertex sequence into a list of Point2D."""
    return [as_point(v) for v in vertices]


def parse_color(value: ColorLike) -> Color:
    """
    Parse a color into an (r, g, b) tuple.

    Accepts '#RRGGBB' / 'RRGGBB' strings or a sequence of three
    integers in 0-255.

    Raises:
        ValueError: If the value is not a valid RGB color
    """
    if isinstance(value, str):
        val = value.strip().lstrip('#')
        if len(val) != 6:
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            return (int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None

    channels = tuple(value)
    if len(channels) != 3:
        raise ValueError(f"Color needs exactly 3 channels, got {len(channels)}")
    for c in channels:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            raise ValueError(f"Color channel out of range 0-255: {c!r}")
    return channels  # type: ignore[return-value]


def vertical_extent(vertices: Sequence[Point2D]) -> Tuple[int, int]:
    """Return (min_y, max_y) across all vertices."""
    ys = [v.y for v in vertices]
    return min(ys), max(ys)
