"""Input values handed to the viewport by the embedding UI."""
from dataclasses import dataclass
from typing import Optional

from constants import DELTA_MODE_PIXEL
from models.transform import Vec2


@dataclass(frozen=True)
class WheelEvent:
    """Wheel or trackpad scroll, in the browser's deltaMode convention.

    Positive delta_y means scrolling down (content moves up). Trackpad
    pinch gestures arrive as wheel events with ctrl_key set.
    """
    delta_x: float = 0.0
    delta_y: float = 0.0
    delta_mode: int = DELTA_MODE_PIXEL
    client_x: float = 0.0
    client_y: float = 0.0
    ctrl_key: bool = False
    meta_key: bool = False

    @property
    def is_zoom_gesture(self):
        return self.ctrl_key or self.meta_key


@dataclass(frozen=True)
class PanSession:
    """Drag-pan session state.

    Idle sessions have no anchor. While panning, the anchor is the last
    pointer position seen, so each update applies only the movement since
    the previous one.
    """
    active: bool = False
    anchor: Optional[Vec2] = None


IDLE_PAN_SESSION = PanSession()
