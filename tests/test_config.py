import json
import logging
import os

import pytest

from pixel_perfect_camera import config


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "_config_dir_cache", str(tmp_path))
    return tmp_path


def _write(path, data):
    path.write_text(data if isinstance(data, str) else json.dumps(data))


def test_missing_file_gives_defaults(config_dir):
    loaded = config.load_config()
    assert loaded == config.DEFAULT_CONFIG
    assert loaded is not config.DEFAULT_CONFIG


def test_round_trip(config_dir):
    data = dict(config.DEFAULT_CONFIG, pixel_perfect=False, zoom=2.0, stretch_mode="keep_integer")
    config.save_config(data)
    assert (config_dir / "config.json").is_file()
    assert config.load_config() == data


def test_corrupt_file_falls_back(config_dir, caplog):
    _write(config_dir / "config.json", "{not json")
    with caplog.at_level(logging.WARNING, logger="pixel_perfect_camera.config"):
        assert config.load_config() == config.DEFAULT_CONFIG
    assert "unreadable" in caplog.text


def test_non_object_falls_back(config_dir):
    _write(config_dir / "config.json", [1, 2, 3])
    assert config.load_config() == config.DEFAULT_CONFIG


def test_bad_values_use_defaults(config_dir, caplog):
    _write(config_dir / "config.json", {
        "zoom": 100,
        "pixel_perfect": "yes",
        "use_physics_tick": False,
        "stretch_mode": "KEEP_INTEGER",
        "window_width": 640,
        "window_height": True,
        "mystery": 1,
    })
    with caplog.at_level(logging.WARNING, logger="pixel_perfect_camera.config"):
        loaded = config.load_config()
    assert loaded["zoom"] == 1.0
    assert loaded["pixel_perfect"] is True
    assert loaded["use_physics_tick"] is False
    assert loaded["stretch_mode"] == "keep_integer"
    assert loaded["window_width"] == 640
    assert loaded["window_height"] == config.DEFAULT_CONFIG["window_height"]
    assert "mystery" not in loaded
    assert "Unknown config key 'mystery'" in caplog.text


def test_unknown_stretch_mode_uses_default(config_dir):
    _write(config_dir / "config.json", {"stretch_mode": "zoom_to_fill"})
    assert config.load_config()["stretch_mode"] == "keep"


def test_config_dir_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "_config_dir_cache", None)
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    path = config._get_config_dir()
    assert path == os.path.join(str(tmp_path), "PixelPerfectCamera")
    assert os.path.isdir(path)


@pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_window_size_uses_default(config_dir, caplog, raw):
    _write(config_dir / "config.json", '{"window_width": %s, "smoothing_speed": %s}' % (raw, raw))
    with caplog.at_level(logging.WARNING, logger="pixel_perfect_camera.config"):
        loaded = config.load_config()
    assert loaded["window_width"] == config.DEFAULT_CONFIG["window_width"]
    assert loaded["smoothing_speed"] == config.DEFAULT_CONFIG["smoothing_speed"]
    assert "Invalid value" in caplog.text
