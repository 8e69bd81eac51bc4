"""
Canvas Viewport - Viewport Model

Owns the transform state of a pannable, zoomable canvas and the drag-pan
session. This is the single source of truth for zoom/pan.

This class handles:
- Discrete zoom (step in/out, absolute, reset, fit)
- Cursor-anchored wheel zoom and wheel pan
- Drag-pan sessions
- Screen <-> canvas coordinate mapping

The Viewport is INDEPENDENT of UI:
- No Qt imports
- No rendering
- No toolkit event wiring (the widget feeds it plain input values)

Every operation reads the current state, computes a new one with a pure
function from services/, and replaces the state in a single assignment.
Listeners are notified after each effective change.

Usage:
    viewport = Viewport(ViewportConfig(max_zoom=8))
    viewport.zoom_in()
    viewport.handle_wheel(WheelEvent(delta_y=-100, client_x=120, client_y=80, ctrl_key=True), rect)
    point = viewport.screen_to_canvas(120, 80, rect)
"""
import logging

from models.input_events import IDLE_PAN_SESSION
from models.transform import TransformState
from models.viewport_config import ViewportConfig
from .zoom_mixin import ViewportZoomMixin
from .wheel_mixin import ViewportWheelMixin
from .pan_mixin import ViewportPanMixin
from .coordinate_mixin import ViewportCoordinateMixin


class Viewport(ViewportZoomMixin, ViewportWheelMixin, ViewportPanMixin, ViewportCoordinateMixin):
    """Zoom/pan state holder for one canvas.

    Properties:
        transform: Current TransformState (read-only)
        config: ViewportConfig fixed at construction
        pan_session: Current PanSession
        is_panning: True while a drag-pan session is active
        zoom_percentage: scale * 100, halves rounded up
    """

    def __init__(self, config=None):
        self._logger = logging.getLogger('Viewport')
        self._config = config if config is not None else ViewportConfig()
        self._transform = TransformState.identity()
        self._pan_session = IDLE_PAN_SESSION
        self._listeners = []
        self._logger.debug(f"Created viewport with {self._config}")

    # ========================================
    # Properties
    # ========================================

    @property
    def transform(self):
        return self._transform

    @property
    def config(self):
        return self._config

    @property
    def pan_session(self):
        return self._pan_session

    @property
    def is_panning(self):
        return self._pan_session.active

    @property
    def zoom_percentage(self):
        return self._transform.zoom_percentage

    @property
    def min_zoom(self):
        return self._config.min_zoom

    @property
    def max_zoom(self):
        return self._config.max_zoom

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback):
        """Register callback(state) to run after every transform change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in list(self._listeners):
            callback(self._transform)

    # ========================================
    # State replacement
    # ========================================

    def _apply(self, new_state, description):
        """Replace the transform and notify listeners if anything changed.

        Returns:
            True if the state changed
        """
        if new_state == self._transform:
            return False
        self._transform = new_state
        self._logger.debug(
            f"{description}: scale={new_state.scale:.4f} "
            f"translate=({new_state.translate_x:.2f}, {new_state.translate_y:.2f})"
        )
        self._notify_listeners()
        return True
