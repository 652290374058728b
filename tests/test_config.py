"""
Tests for JSON preset loading.
"""

import json

import pytest

from curvegen.config import ConfigError, load_presets, table_from_dict
from curvegen.params import InvalidShape


def _write(tmp_path, data, name="tables.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


class TestTableFromDict:
    def test_defaults(self):
        curve, spec, options = table_from_dict({})
        assert curve.shape == "exponential"
        assert curve.curvature == 1.0
        assert not curve.use_midpoint
        assert (spec.min_value, spec.max_value, spec.num_points) == (0, 255, 128)
        assert options.name == "curve"
        assert options.add_const and not options.add_progmem

    def test_full_entry(self):
        curve, spec, options = table_from_dict({
            "name": "fade", "min": -100, "max": 100, "points": 64,
            "shape": "sigmoid", "curvature": 2.5, "invert": True,
            "midpoint": {"x": 0.3, "y": 0.6},
            "shape_right": "parabolic", "curvature_right": 0.7, "invert_right": True,
            "const": False, "progmem": True,
        })
        assert curve.midpoint == (0.3, 0.6)
        assert curve.shape_right == "parabolic"
        assert curve.invert and curve.invert_right
        assert spec.num_points == 64
        # progmem forces const
        assert options.add_const and options.add_progmem

    def test_midpoint_list_is_clamped(self):
        curve, _, _ = table_from_dict({"midpoint": [0.0, 1.4]})
        assert curve.midpoint == (0.1, 1.0)

    def test_midpoint_missing_key(self):
        with pytest.raises(ConfigError):
            table_from_dict({"midpoint": {"x": 0.5}})

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="curvatur"):
            table_from_dict({"curvatur": 2})

    def test_not_an_object(self):
        with pytest.raises(ConfigError):
            table_from_dict([1, 2])


class TestLoadPresets:
    def test_single_table(self, tmp_path):
        path = _write(tmp_path, {"name": "gamma", "shape": "parabolic", "curvature": 1.1})
        tables = load_presets(path)
        assert len(tables) == 1
        assert tables[0][2].name == "gamma"

    def test_multiple_tables(self, tmp_path):
        path = _write(tmp_path, {"tables": [{"name": "a"}, {"name": "b", "points": 16}]})
        tables = load_presets(path, progmem_macro="FLASH")
        assert [o.name for _, _, o in tables] == ["a", "b"]
        assert tables[1][1].num_points == 16
        assert tables[0][2].progmem_macro == "FLASH"

    def test_top_level_list(self, tmp_path):
        path = _write(tmp_path, [{"name": "a"}])
        assert len(load_presets(path)) == 1

    def test_duplicate_names(self, tmp_path):
        path = _write(tmp_path, {"tables": [{"name": "a"}, {"name": "a"}]})
        with pytest.raises(ConfigError, match="duplicate"):
            load_presets(path)

    def test_empty(self, tmp_path):
        with pytest.raises(ConfigError):
            load_presets(_write(tmp_path, {"tables": []}))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_presets(tmp_path / "nope.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_presets(path)

    def test_shape_checked_at_generation(self, tmp_path):
        from curvegen import generate
        curve, spec, options = load_presets(_write(tmp_path, {"shape": "wobble"}))[0]
        with pytest.raises(InvalidShape):
            generate(curve, spec, options)


def test_midpoint_not_numeric():
    with pytest.raises(ConfigError):
        table_from_dict({"midpoint": ["a", 0.5]})


@pytest.mark.parametrize("key", ["invert", "invert_right", "const", "progmem"])
@pytest.mark.parametrize("value", ["false", 0, 1, None])
def test_flags_must_be_booleans(key, value):
    with pytest.raises(ConfigError, match=key):
        table_from_dict({key: value})


def test_flags_accept_booleans():
    curve, _, options = table_from_dict({"invert": True, "const": False, "progmem": False})
    assert curve.invert is True
    assert options.add_const is False
