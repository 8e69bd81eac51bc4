"""Load and save ViewportConfig as JSON.

File format (all keys optional):
    {
      "min_zoom": 0.25,
      "max_zoom": 4,
      "zoom_step": 0.25,
      "zoom_sensitivity": 0.008,
      "pan_sensitivity": 1,
      "zoom_epsilon": 0.001
    }

camelCase keys (minZoom, zoomSensitivity, ...) are accepted too.
"""
import os
import re
import json
import logging

from constants import CONFIG_FILE
from models.viewport_config import ViewportConfig
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


def _snake_case(key):
    return re.sub(r'(?<!^)(?=[A-Z])', '_', key).lower()


def config_from_dict(data):
    """Build a ViewportConfig from a dict, ignoring unknown keys.

    Raises:
        ValueError: If a value is invalid
    """
    known = set(ViewportConfig.field_names())
    values = {}
    for key, value in data.items():
        name = _snake_case(key)
        if name not in known:
            logger.warning(f"Ignoring unknown viewport config key: {key}")
            continue
        values[name] = value
    return ViewportConfig(**values)


def load_viewport_config(path=None):
    """Read a config file, falling back to defaults if it doesn't exist.

    Args:
        path: JSON file path (defaults to ~/.canvasviewport/config.json)

    Returns:
        ViewportConfig
    """
    path = path or CONFIG_FILE
    if not os.path.exists(path):
        logger.debug(f"No config at {path}, using defaults")
        return ViewportConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        config = config_from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        loggerRaise(e, f"Error loading viewport config from {path}")

    logger.debug(f"Loaded viewport config from {path}: {config}")
    return config


def save_viewport_config(config, path=None):
    """Write a config file, creating its directory if needed."""
    path = path or CONFIG_FILE
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
    except OSError as e:
        loggerRaise(e, f"Error saving viewport config to {path}")
