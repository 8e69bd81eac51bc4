"""Wheel and trackpad handling for the viewport.

Two behaviours share the same input:
- Zoom (ctrl/meta held, which is also how trackpad pinch arrives):
  exponential scaling anchored at the cursor, so the canvas point under
  the cursor stays under the cursor.
- Pan (no modifier): deltas move the translation directly.
"""
import logging

from constants import DELTA_MODE_MULTIPLIERS, DELTA_MODE_PIXEL, MAX_ZOOM_EXPONENT
from models.transform import TransformState
from models.viewport_config import DEFAULT_CONFIG
from services.zoom_operations import clamp_scale, pan_by

logger = logging.getLogger(__name__)


def delta_multiplier(delta_mode):
    """Pixels per delta unit. Unknown modes are treated as pixels."""
    multiplier = DELTA_MODE_MULTIPLIERS.get(delta_mode)
    if multiplier is None:
        logger.debug(f"Unknown wheel delta_mode {delta_mode!r}, using pixel units")
        return DELTA_MODE_MULTIPLIERS[DELTA_MODE_PIXEL]
    return multiplier


def normalize_delta(delta, delta_mode):
    """Convert a wheel delta to pixels."""
    return delta * delta_multiplier(delta_mode)


def zoom_factor_for_delta(normalized_delta, config=DEFAULT_CONFIG):
    """Scale multiplier for a pixel delta.

    Negative deltas (scrolling toward the viewer) zoom in.
    """
    exponent = -normalized_delta * config.zoom_sensitivity
    # Saturate so huge deltas cannot overflow; the scale is clamped afterwards anyway
    exponent = max(-MAX_ZOOM_EXPONENT, min(exponent, MAX_ZOOM_EXPONENT))
    return 2 ** exponent


def zoom_at_point(state, new_scale, cursor_x, cursor_y, config=DEFAULT_CONFIG):
    """Change scale while keeping the canvas point at (cursor_x, cursor_y) fixed.

    Cursor coordinates are relative to the container's top-left corner.
    Returns the original state object when the clamped change is below
    config.zoom_epsilon.
    """
    new_scale = clamp_scale(new_scale, config)
    if abs(new_scale - state.scale) < config.zoom_epsilon:
        return state

    # Canvas point currently under the cursor
    point_x = (cursor_x - state.translate_x) / state.scale
    point_y = (cursor_y - state.translate_y) / state.scale

    return TransformState(
        scale=new_scale,
        translate_x=cursor_x - point_x * new_scale,
        translate_y=cursor_y - point_y * new_scale,
    )


def wheel_zoom(state, event, rect, config=DEFAULT_CONFIG):
    """Cursor-anchored continuous zoom from a wheel event.

    Args:
        state: Current TransformState
        event: WheelEvent (delta_y drives the zoom)
        rect: ContainerRect of the canvas on screen
        config: ViewportConfig

    Returns:
        New TransformState, or `state` itself if the change is negligible
    """
    normalized = normalize_delta(event.delta_y, event.delta_mode)
    factor = zoom_factor_for_delta(normalized, config)
    cursor_x = event.client_x - rect.left
    cursor_y = event.client_y - rect.top
    return zoom_at_point(state, state.scale * factor, cursor_x, cursor_y, config)


def wheel_pan(state, event, config=DEFAULT_CONFIG):
    """Two-axis pan from a wheel event.

    Content moves opposite to the scroll direction: scrolling down
    (positive delta_y) moves the content up.
    """
    multiplier = delta_multiplier(event.delta_mode) * config.pan_sensitivity
    return pan_by(state, -event.delta_x * multiplier, -event.delta_y * multiplier)


def handle_wheel(state, event, rect, config=DEFAULT_CONFIG):
    """Route a wheel event to zoom (ctrl/meta held) or pan."""
    if event.is_zoom_gesture:
        return wheel_zoom(state, event, rect, config)
    return wheel_pan(state, event, config)
