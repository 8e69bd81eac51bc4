"""
Wheel Mixin for Viewport Model

Wheel/trackpad input: cursor-anchored zoom and direct two-axis pan.
"""

from services import wheel_operations


class ViewportWheelMixin:
    """Mixin providing wheel zoom and wheel pan

    This mixin assumes the class has:
    - self._transform: TransformState
    - self._config: ViewportConfig
    - self._apply(new_state, description)
    """

    def handle_wheel_zoom(self, event, rect):
        """Zoom keeping the canvas point under the cursor in place.

        Args:
            event: WheelEvent
            rect: ContainerRect of the canvas on screen

        Returns:
            True if the transform changed
        """
        return self._apply(
            wheel_operations.wheel_zoom(self._transform, event, rect, self._config),
            "wheel_zoom",
        )

    def handle_wheel_pan(self, event):
        """Translate by the wheel deltas (content moves against the scroll)."""
        return self._apply(
            wheel_operations.wheel_pan(self._transform, event, self._config),
            "wheel_pan",
        )

    def handle_wheel(self, event, rect):
        """Zoom when ctrl/meta is held (including trackpad pinch), otherwise pan."""
        if event.is_zoom_gesture:
            return self.handle_wheel_zoom(event, rect)
        return self.handle_wheel_pan(event)
