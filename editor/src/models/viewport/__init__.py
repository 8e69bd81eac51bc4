"""Viewport model mixins package"""

from .zoom_mixin import ViewportZoomMixin
from .wheel_mixin import ViewportWheelMixin
from .pan_mixin import ViewportPanMixin
from .coordinate_mixin import ViewportCoordinateMixin
from .core import Viewport

__all__ = [
    'Viewport',
    'ViewportZoomMixin',
    'ViewportWheelMixin',
    'ViewportPanMixin',
    'ViewportCoordinateMixin',
]
