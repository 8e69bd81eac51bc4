"""Viewport configuration values."""
import math
from dataclasses import dataclass, fields

from constants import (
    DEFAULT_MIN_ZOOM, DEFAULT_MAX_ZOOM, DEFAULT_ZOOM_STEP,
    DEFAULT_ZOOM_SENSITIVITY, DEFAULT_PAN_SENSITIVITY, DEFAULT_ZOOM_EPSILON,
    IDENTITY_SCALE,
)


@dataclass(frozen=True)
class ViewportConfig:
    """Zoom/pan tuning, fixed for the lifetime of a Viewport.

    Attributes:
        min_zoom: Lowest allowed scale (must be > 0)
        max_zoom: Highest allowed scale (the range must include 1.0)
        zoom_step: Additive step used by zoom_in/zoom_out
        zoom_sensitivity: Exponent multiplier for wheel zoom
        pan_sensitivity: Multiplier for wheel pan deltas
        zoom_epsilon: Wheel zoom changes smaller than this are skipped
    """
    min_zoom: float = DEFAULT_MIN_ZOOM
    max_zoom: float = DEFAULT_MAX_ZOOM
    zoom_step: float = DEFAULT_ZOOM_STEP
    zoom_sensitivity: float = DEFAULT_ZOOM_SENSITIVITY
    pan_sensitivity: float = DEFAULT_PAN_SENSITIVITY
    zoom_epsilon: float = DEFAULT_ZOOM_EPSILON

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{f.name} must be a finite number, got {value!r}")
        if self.min_zoom <= 0:
            raise ValueError(f"min_zoom must be positive, got {self.min_zoom}")
        if self.min_zoom > self.max_zoom:
            raise ValueError(f"min_zoom ({self.min_zoom}) exceeds max_zoom ({self.max_zoom})")
        if not self.min_zoom <= IDENTITY_SCALE <= self.max_zoom:
            raise ValueError(
                f"zoom range [{self.min_zoom}, {self.max_zoom}] must include {IDENTITY_SCALE}, "
                f"the scale used by reset and fit"
            )
        if self.zoom_step <= 0:
            raise ValueError(f"zoom_step must be positive, got {self.zoom_step}")
        if self.zoom_sensitivity < 0:
            raise ValueError(f"zoom_sensitivity must not be negative, got {self.zoom_sensitivity}")
        if self.zoom_epsilon < 0:
            raise ValueError(f"zoom_epsilon must not be negative, got {self.zoom_epsilon}")

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def to_dict(self):
        return {name: getattr(self, name) for name in self.field_names()}


DEFAULT_CONFIG = ViewportConfig()
