"""
Tests for ViewportConfig validation and the JSON config service.
"""
import json
import dataclasses
import pytest

from models.viewport_config import ViewportConfig
from services.config_service import config_from_dict, load_viewport_config, save_viewport_config


class TestViewportConfigDefaults:

    def test_defaults(self, config):
        assert config.min_zoom == 0.25
        assert config.max_zoom == 4
        assert config.zoom_step == 0.25
        assert config.zoom_sensitivity == 0.008
        assert config.pan_sensitivity == 1
        assert config.zoom_epsilon == 0.001

    def test_frozen(self, config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_zoom = 10


class TestViewportConfigValidation:

    @pytest.mark.parametrize("kwargs", [
        {"min_zoom": 0},
        {"min_zoom": -1},
        {"min_zoom": 5, "max_zoom": 4},
        {"zoom_step": 0},
        {"zoom_sensitivity": -0.1},
        {"zoom_epsilon": -1},
        {"max_zoom": float("inf")},
        {"pan_sensitivity": float("nan")},
        {"zoom_step": "0.5"},
        {"min_zoom": True},
        {"min_zoom": 2, "max_zoom": 4},
        {"min_zoom": 0.1, "max_zoom": 0.5},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ViewportConfig(**kwargs)

    def test_equal_bounds_allowed(self):
        config = ViewportConfig(min_zoom=1, max_zoom=1)
        assert config.min_zoom == config.max_zoom


class TestConfigFromDict:

    def test_snake_case_keys(self):
        config = config_from_dict({"max_zoom": 10, "zoom_step": 0.5})
        assert config == ViewportConfig(max_zoom=10, zoom_step=0.5)

    def test_camel_case_keys(self):
        config = config_from_dict({"minZoom": 0.1, "zoomSensitivity": 0.002, "panSensitivity": 2})
        assert config == ViewportConfig(min_zoom=0.1, zoom_sensitivity=0.002, pan_sensitivity=2)

    def test_unknown_keys_ignored(self, caplog):
        config = config_from_dict({"theme": "dark", "maxZoom": 8})
        assert config.max_zoom == 8
        assert "theme" in caplog.text

    def test_invalid_value_raises(self):
        with pytest.raises(ValueError):
            config_from_dict({"minZoom": 3, "maxZoom": 2})

    def test_range_without_unit_scale_raises(self):
        with pytest.raises(ValueError, match="must include"):
            config_from_dict({"minZoom": 2, "maxZoom": 4})


class TestConfigFile:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_viewport_config(str(tmp_path / "missing.json")) == ViewportConfig()

    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"maxZoom": 10, "zoom_step": 0.5}), encoding="utf-8")
        config = load_viewport_config(str(path))
        assert config.max_zoom == 10
        assert config.zoom_step == 0.5

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        original = ViewportConfig(min_zoom=0.1, max_zoom=8, zoom_sensitivity=0.004)
        save_viewport_config(original, str(path))
        assert load_viewport_config(str(path)) == original

    def test_bad_json_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_viewport_config(str(path))

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_viewport_config(str(path))

    def test_invalid_values_raise(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"zoomStep": -1}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_viewport_config(str(path))
