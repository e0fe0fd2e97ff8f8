"""User config (flags, window size, zoom) persisted as JSON in the platform data dir."""

from __future__ import annotations

import json
import logging
import math
import os
import sys

from pixel_perfect_camera.metrics import StretchMode
from pixel_perfect_camera.settings import (
    WINDOW_WIDTH, WINDOW_HEIGHT, SMOOTHING_SPEED, MIN_ZOOM, MAX_ZOOM,
    PIXEL_PERFECT_ENABLED, USE_PHYSICS_TICK,
)

logger = logging.getLogger(__name__)

_APP_DIR_NAME = "PixelPerfectCamera"

DEFAULT_CONFIG = {
    "pixel_perfect": PIXEL_PERFECT_ENABLED,
    "use_physics_tick": USE_PHYSICS_TICK,
    "stretch_mode": StretchMode.KEEP.value,
    "window_width": WINDOW_WIDTH,
    "window_height": WINDOW_HEIGHT,
    "zoom": 1.0,
    "smoothing_speed": SMOOTHING_SPEED,
    "show_hud": True,
}

_config_dir_cache: str | None = None


def _get_config_dir() -> str:
    """Return platform-appropriate config directory, creating it if needed.

    macOS:   ~/Library/Application Support/PixelPerfectCamera/
    Linux:   ~/.local/share/PixelPerfectCamera/
    Windows: %APPDATA%/PixelPerfectCamera/
    """
    global _config_dir_cache
    if _config_dir_cache is not None:
        return _config_dir_cache

    if sys.platform == "darwin":
        base = os.path.expanduser("~/Library/Application Support")
    elif sys.platform == "win32":
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))

    config_dir = os.path.join(base, _APP_DIR_NAME)
    os.makedirs(config_dir, exist_ok=True)
    _config_dir_cache = config_dir
    return config_dir


def _config_path() -> str:
    return os.path.join(_get_config_dir(), "config.json")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _validate(key, value):
    """Return *value* if acceptable for *key*, else None."""
    if key in ("pixel_perfect", "use_physics_tick", "show_hud"):
        return value if isinstance(value, bool) else None
    if key in ("window_width", "window_height"):
        return int(value) if _is_number(value) and value >= 1 else None
    if key == "zoom":
        return float(value) if _is_number(value) and MIN_ZOOM <= value <= MAX_ZOOM else None
    if key == "smoothing_speed":
        return float(value) if _is_number(value) and value >= 0 else None
    if key == "stretch_mode":
        try:
            return StretchMode.parse(value).value
        except ValueError:
            return None
    return value


def load_config() -> dict:
    """Load config.json over the defaults. Bad or missing values fall back to defaults."""
    config = dict(DEFAULT_CONFIG)
    path = _config_path()
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except FileNotFoundError:
        return config
    except (json.JSONDecodeError, TypeError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return config

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return config

    for key, value in data.items():
        if key not in DEFAULT_CONFIG:
            logger.warning("Unknown config key '%s' ignored", key)
            continue
        checked = _validate(key, value)
        if checked is None:
            logger.warning("Invalid value %r for '%s', using default %r", value, key, DEFAULT_CONFIG[key])
            continue
        config[key] = checked
    return config


def save_config(config: dict) -> None:
    """Write config.json to the config directory."""
    path = _config_path()
    with open(path, "w") as f:
        json.dump(config, f, indent=2)
