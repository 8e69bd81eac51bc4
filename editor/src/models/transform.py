"""Transform data structures for coordinate and state representation."""
import math
from dataclasses import dataclass

from constants import IDENTITY_SCALE, IDENTITY_TRANSLATE_X, IDENTITY_TRANSLATE_Y


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Screen pixels (client coordinates)
    - Container pixels (relative to the container's top-left)
    - Canvas space (content coordinates, independent of zoom/pan)
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class TransformState:
    """Viewport transform: uniform scale plus translation in container pixels.

    Rendered as translate(translate_x, translate_y) followed by scale(scale).
    Instances are never mutated; every operation returns a new state.
    """
    scale: float = IDENTITY_SCALE
    translate_x: float = IDENTITY_TRANSLATE_X
    translate_y: float = IDENTITY_TRANSLATE_Y

    @classmethod
    def identity(cls):
        return cls()

    @property
    def translate(self):
        return Vec2(self.translate_x, self.translate_y)

    @property
    def zoom_percentage(self):
        """Scale as a whole-number percentage, halves rounded up (1.125 -> 113)."""
        return math.floor(self.scale * 100 + 0.5)


@dataclass(frozen=True)
class ContainerRect:
    """On-screen bounding box the canvas is rendered into.

    Width and height are not validated; a zero-sized rect gives
    degenerate but finite results.
    """
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class ImageBounds:
    """Where an aspect-fitted image sits inside the untransformed canvas."""
    offset_x: float
    offset_y: float
    rendered_width: float
    rendered_height: float
