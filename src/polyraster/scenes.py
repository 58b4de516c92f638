"""Polygon scenes: the built-in default set and JSON scene files."""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from polyraster.core.geometry import Point2D

logger = logging.getLogger(__name__)

Scene = List[List[Point2D]]


class SceneError(ValueError):
    """Scene file is missing or malformed."""


def _p(x: int, y: int) -> Point2D:
    return Point2D(x, y)


DEFAULT_POLYGONS: Scene = [
    # Star-like shape
    [
        _p(165, 380), _p(185, 360), _p(180, 330), _p(207, 345), _p(233, 330),
        _p(230, 360), _p(250, 380), _p(220, 385), _p(205, 410), _p(193, 383),
    ],
    # Tilted square
    [_p(321, 335), _p(288, 286), _p(339, 251), _p(374, 302)],
    # Triangle (below the outline threshold)
    [_p(377, 249), _p(411, 197), _p(436, 249)],
    # Large irregular outline
    [
        _p(413, 177), _p(448, 159), _p(502, 88), _p(553, 53), _p(535, 36),
        _p(676, 37), _p(660, 52), _p(750, 145), _p(761, 179), _p(672, 192),
        _p(659, 214), _p(615, 214), _p(632, 230), _p(580, 230), _p(597, 215),
        _p(552, 214), _p(517, 144), _p(466, 180),
    ],
    # Small quad inside the previous shape
    [_p(682, 175), _p(708, 120), _p(735, 148), _p(739, 170)],
]


def _parse_point(raw: Any, where: str) -> Point2D:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise SceneError(f"{where}: vertex must be an [x, y] pair, got {raw!r}")
    x, y = raw
    for c in (x, y):
        if isinstance(c, bool) or not isinstance(c, int):
            raise SceneError(f"{where}: coordinates must be integers, got {raw!r}")
    return Point2D(x, y)


def parse_polygons(data: Any) -> Scene:
    """Validate decoded JSON and convert it to a list of polygons.

    Accepts a bare list of polygons or an object with a "polygons" key.
    """
    if isinstance(data, dict):
        if "polygons" not in data:
            raise SceneError("Scene object has no 'polygons' key")
        data = data["polygons"]

    if not isinstance(data, list):
        raise SceneError(f"Scene must be a list of polygons, got {type(data).__name__}")

    polygons: Scene = []
    for i, raw_polygon in enumerate(data):
        where = f"polygon {i}"
        if not isinstance(raw_polygon, list):
            raise SceneError(f"{where}: must be a list of vertices")
        if len(raw_polygon) < 3:
            raise SceneError(f"{where}: needs at least 3 vertices, got {len(raw_polygon)}")
        polygons.append([_parse_point(v, where) for v in raw_polygon])

    return polygons


def load_polygons(path: Union[str, Path]) -> Scene:
    """Load polygons from a JSON scene file.

    Raises:
        SceneError: If the file cannot be read or is malformed
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SceneError(f"Cannot read scene file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SceneError(f"Invalid JSON in {path}: {e}") from e

    polygons = parse_polygons(data)
    logger.info(f"Loaded {len(polygons)} polygons from {path}")
    return polygons
