"""
Zoom Mixin for Viewport Model

Step, absolute and reset zoom. Scale is always clamped to the configured
range; out-of-range requests are never rejected.
"""

from services import zoom_operations


class ViewportZoomMixin:
    """Mixin providing discrete zoom operations

    This mixin assumes the class has:
    - self._transform: TransformState
    - self._config: ViewportConfig
    - self._apply(new_state, description)
    """

    def zoom_in(self):
        """Zoom in by one step (translation unchanged)."""
        return self._apply(zoom_operations.zoom_in(self._transform, self._config), "zoom_in")

    def zoom_out(self):
        """Zoom out by one step (translation unchanged)."""
        return self._apply(zoom_operations.zoom_out(self._transform, self._config), "zoom_out")

    def set_zoom(self, scale):
        """Set absolute scale, clamped to [min_zoom, max_zoom]."""
        return self._apply(zoom_operations.set_zoom(self._transform, scale, self._config), "set_zoom")

    def set_zoom_percent(self, percent):
        return self._apply(
            zoom_operations.set_zoom_percent(self._transform, percent, self._config),
            "set_zoom_percent",
        )

    def reset_transform(self):
        """Back to scale 1 with no translation."""
        return self._apply(zoom_operations.reset_transform(), "reset_transform")

    def fit_to_view(self):
        return self._apply(zoom_operations.fit_to_view(), "fit_to_view")

    def set_transform(self, state):
        """Replace the whole transform. Scale is clamped."""
        return self._apply(zoom_operations.set_transform(state, self._config), "set_transform")

    def pan_by(self, delta_x, delta_y):
        """Shift the translation by a pixel delta."""
        return self._apply(zoom_operations.pan_by(self._transform, delta_x, delta_y), "pan_by")

    @property
    def can_zoom_in(self):
        return zoom_operations.can_zoom_in(self._transform, self._config)

    @property
    def can_zoom_out(self):
        return zoom_operations.can_zoom_out(self._transform, self._config)
