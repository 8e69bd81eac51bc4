"""
Canvas Viewport - Data Models

Value types shared by the viewport services and the UI layer.

Public API: the Viewport state holder lives in models.viewport and is
imported from there directly.
"""

from .transform import Vec2, TransformState, ContainerRect, ImageBounds
from .input_events import WheelEvent, PanSession, IDLE_PAN_SESSION
from .viewport_config import ViewportConfig, DEFAULT_CONFIG

__all__ = [
    'Vec2', 'TransformState', 'ContainerRect', 'ImageBounds',
    'WheelEvent', 'PanSession', 'IDLE_PAN_SESSION',
    'ViewportConfig', 'DEFAULT_CONFIG',
]
