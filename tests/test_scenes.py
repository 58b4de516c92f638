"""
scenes tests
"""
import json

import pytest

from polyraster.core.geometry import Point2D
from polyraster.scenes import DEFAULT_POLYGONS, SceneError, load_polygons, parse_polygons


class TestDefaultScene:
    def test_vertex_counts(self):
        assert [len(p) for p in DEFAULT_POLYGONS] == [10, 4, 3, 18, 4]

    def test_fits_default_window(self):
        for polygon in DEFAULT_POLYGONS:
            for p in polygon:
                assert 0 <= p.x < 800 and 0 <= p.y < 600


class TestLoadPolygons:
    def test_bare_list(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps([[[0, 0], [4, 0], [4, 4]]]))
        assert load_polygons(path) == [[Point2D(0, 0), Point2D(4, 0), Point2D(4, 4)]]

    def test_object_form(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps({"polygons": [[[1, 2], [3, 4], [5, 6], [7, 8]]]}))
        polygons = load_polygons(path)
        assert len(polygons) == 1
        assert polygons[0][3] == Point2D(7, 8)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SceneError):
            load_polygons(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("{not json")
        with pytest.raises(SceneError):
            load_polygons(path)

    @pytest.mark.parametrize("data", [
        {"shapes": []},
        "polygons",
        [[[0, 0], [1, 1]]],
        [[[0, 0], [1, 1], [2]]],
        [[[0, 0], [1, 1], [2.5, 3]]],
        [[[0, 0], [1, 1], [True, 3]]],
        [{"x": 0}],
    ])
    def test_rejects_malformed(self, data):
        with pytest.raises(SceneError):
            parse_polygons(data)

    def test_scene_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_polygons(42)
