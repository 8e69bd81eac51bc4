"""Zoom and translation operations on TransformState.

Pure functions: each takes the current state and returns a new one.
Scale is clamped to [config.min_zoom, config.max_zoom] by every function
here, so callers never need to validate input.
"""
from dataclasses import replace

from models.transform import TransformState
from models.viewport_config import DEFAULT_CONFIG


def clamp_scale(scale, config=DEFAULT_CONFIG):
    """Clamp a scale value into the configured zoom range."""
    return max(config.min_zoom, min(scale, config.max_zoom))


def zoom_in(state, config=DEFAULT_CONFIG):
    """Increase scale by one zoom step. Translation is left alone."""
    return replace(state, scale=clamp_scale(state.scale + config.zoom_step, config))


def zoom_out(state, config=DEFAULT_CONFIG):
    """Decrease scale by one zoom step. Translation is left alone."""
    return replace(state, scale=clamp_scale(state.scale - config.zoom_step, config))


def set_zoom(state, scale, config=DEFAULT_CONFIG):
    """Set an absolute scale, clamped."""
    return replace(state, scale=clamp_scale(scale, config))


def set_zoom_percent(state, percent, config=DEFAULT_CONFIG):
    """Set an absolute scale from a percentage (150 -> 1.5)."""
    return set_zoom(state, percent / 100.0, config)


def reset_transform():
    """Identity transform: scale 1, no translation."""
    return TransformState.identity()


def fit_to_view():
    """Fit content to the view.

    Currently identical to reset_transform(); content bounds are not
    tracked by the viewport.
    """
    return TransformState.identity()


def set_transform(state, config=DEFAULT_CONFIG):
    """Accept a whole replacement state, clamping its scale."""
    scale = clamp_scale(state.scale, config)
    if scale == state.scale:
        return state
    return replace(state, scale=scale)


def pan_by(state, delta_x, delta_y):
    """Shift the translation by a pixel delta."""
    return replace(
        state,
        translate_x=state.translate_x + delta_x,
        translate_y=state.translate_y + delta_y,
    )


def can_zoom_in(state, config=DEFAULT_CONFIG):
    return state.scale < config.max_zoom


def can_zoom_out(state, config=DEFAULT_CONFIG):
    return state.scale > config.min_zoom


def zoom_percentage(state):
    return state.zoom_percentage
