"""
Shared fixtures for Canvas Viewport tests.

Provides configs, viewports, container rects and sample wheel events.
"""
import sys
import os
import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Sample transforms used across property tests ────────────────────────

SAMPLE_TRANSFORMS = [
    (1.0, 0.0, 0.0),
    (2.5, -120.0, 40.0),
    (0.25, 300.5, -75.25),
    (4.0, -1000.0, -1000.0),
    (1.7411011265922482, -74.11, -74.11),
]

SAMPLE_RECTS = [
    (0.0, 0.0, 800.0, 600.0),
    (37.0, 112.5, 1024.0, 768.0),
    (-20.0, -10.0, 300.0, 200.0),
]

SAMPLE_POINTS = [
    (0.0, 0.0),
    (100.0, 100.0),
    (512.25, 33.75),
    (-40.0, 900.0),
]


@pytest.fixture
def config():
    """Default viewport config"""
    from models.viewport_config import ViewportConfig
    return ViewportConfig()


@pytest.fixture
def viewport():
    """Fresh viewport at identity"""
    from models.viewport import Viewport
    return Viewport()


@pytest.fixture
def origin_rect():
    """Container at the screen origin"""
    from models.transform import ContainerRect
    return ContainerRect(left=0.0, top=0.0, width=800.0, height=600.0)


@pytest.fixture
def offset_rect():
    """Container offset from the screen origin"""
    from models.transform import ContainerRect
    return ContainerRect(left=50.0, top=30.0, width=800.0, height=600.0)


@pytest.fixture
def zoom_in_event():
    """Pinch/ctrl-wheel toward the viewer at (100, 100)"""
    from models.input_events import WheelEvent
    return WheelEvent(delta_y=-100, delta_mode=0, client_x=100, client_y=100, ctrl_key=True)
