"""
pytest-qt widget integration tests.

Tests the Qt layer that embeds the Viewport:
- QWheelEvent -> WheelEvent conversion
- Drag-pan through real mouse handlers (middle drag, Alt + left drag)
- Pan session ends on release and on leaving the widget
- Rendering transform matches the coordinate mapping
- Zoom toolbar display and button states
- Main window wiring between toolbar, menu actions and canvas
"""
import pytest
from PyQt5.QtCore import Qt, QPoint, QPointF, QEvent
from PyQt5.QtGui import QImage, QMouseEvent, QColor

from models.transform import TransformState, ContainerRect, Vec2
from models.viewport import Viewport
from services.coordinate_mapping import canvas_to_screen


class FakeWheelEvent:
    """Stand-in for QWheelEvent (its constructor differs across Qt versions)."""

    def __init__(self, pos=(0, 0), angle=(0, 0), pixel=(0, 0), modifiers=Qt.NoModifier):
        self._pos = QPoint(*pos)
        self._angle = QPoint(*angle)
        self._pixel = QPoint(*pixel)
        self._modifiers = Qt.KeyboardModifiers(modifiers)
        self.accepted = False

    def pos(self):
        return self._pos

    def angleDelta(self):
        return self._angle

    def pixelDelta(self):
        return self._pixel

    def modifiers(self):
        return self._modifiers

    def accept(self):
        self.accepted = True


def _mouse(event_type, pos, button=Qt.NoButton, buttons=Qt.NoButton, modifiers=Qt.NoModifier):
    return QMouseEvent(event_type, QPointF(*pos), button, Qt.MouseButtons(buttons), Qt.KeyboardModifiers(modifiers))


# ══════════════════════════════════════════════════════════════════════════
# Wheel Conversion
# ══════════════════════════════════════════════════════════════════════════

class TestWheelEventFromQt:

    def test_mouse_wheel_uses_line_units(self):
        from components.canvas_widget import wheel_event_from_qt
        event = wheel_event_from_qt(FakeWheelEvent(pos=(40, 60), angle=(0, 120)))
        assert event.delta_mode == 1
        assert event.delta_y == -3
        assert event.delta_x == 0
        assert (event.client_x, event.client_y) == (40, 60)

    def test_trackpad_uses_pixels(self):
        from components.canvas_widget import wheel_event_from_qt
        event = wheel_event_from_qt(FakeWheelEvent(angle=(0, 120), pixel=(6, -14)))
        assert event.delta_mode == 0
        assert (event.delta_x, event.delta_y) == (-6, 14)

    def test_ctrl_marks_zoom_gesture(self):
        from components.canvas_widget import wheel_event_from_qt
        event = wheel_event_from_qt(FakeWheelEvent(angle=(0, 120), modifiers=Qt.ControlModifier))
        assert event.ctrl_key
        assert event.is_zoom_gesture

    def test_no_modifier_is_pan(self):
        from components.canvas_widget import wheel_event_from_qt
        event = wheel_event_from_qt(FakeWheelEvent(angle=(0, -120)))
        assert not event.is_zoom_gesture


# ══════════════════════════════════════════════════════════════════════════
# Canvas Widget
# ══════════════════════════════════════════════════════════════════════════

class TestViewportCanvas:

    @pytest.fixture
    def canvas(self, qtbot):
        from components.canvas_widget import ViewportCanvas
        widget = ViewportCanvas(Viewport())
        qtbot.addWidget(widget)
        widget.resize(400, 300)
        return widget

    def test_container_rect(self, canvas):
        assert canvas.container_rect() == ContainerRect(0.0, 0.0, 400.0, 300.0)

    def test_ctrl_wheel_zooms_at_cursor(self, canvas):
        rect = canvas.container_rect()
        before = canvas.viewport.screen_to_canvas(120, 80, rect)
        event = FakeWheelEvent(pos=(120, 80), angle=(0, 120), modifiers=Qt.ControlModifier)
        canvas.wheelEvent(event)
        assert event.accepted
        assert canvas.viewport.transform.scale > 1.0
        after = canvas.viewport.screen_to_canvas(120, 80, rect)
        assert after.x == pytest.approx(before.x)
        assert after.y == pytest.approx(before.y)

    def test_plain_wheel_pans(self, canvas):
        canvas.wheelEvent(FakeWheelEvent(pixel=(0, 25)))
        assert canvas.viewport.transform == TransformState(1.0, 0.0, 25.0)

    def test_middle_drag_pans(self, canvas):
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, (10, 10), Qt.MiddleButton, Qt.MiddleButton))
        assert canvas.viewport.is_panning
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, (20, 15), buttons=Qt.MiddleButton))
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, (30, 25), buttons=Qt.MiddleButton))
        canvas.mouseReleaseEvent(_mouse(QEvent.MouseButtonRelease, (30, 25), Qt.MiddleButton))
        assert not canvas.viewport.is_panning
        assert canvas.viewport.transform.translate_x == 20
        assert canvas.viewport.transform.translate_y == 15

    def test_left_drag_without_alt_does_not_pan(self, canvas):
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, (10, 10), Qt.LeftButton, Qt.LeftButton))
        assert not canvas.viewport.is_panning
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, (50, 50), buttons=Qt.LeftButton))
        assert canvas.viewport.transform == TransformState.identity()

    def test_alt_left_drag_pans(self, canvas):
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, (10, 10), Qt.LeftButton, Qt.LeftButton, Qt.AltModifier))
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, (4, 18), buttons=Qt.LeftButton))
        assert canvas.viewport.transform.translate == Vec2(-6, 8)

    def test_leave_ends_pan(self, canvas):
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, (10, 10), Qt.MiddleButton, Qt.MiddleButton))
        canvas.leaveEvent(QEvent(QEvent.Leave))
        assert not canvas.viewport.is_panning
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, (90, 90)))
        assert canvas.viewport.transform == TransformState.identity()

    def test_hover_reports_cursor(self, canvas, qtbot):
        with qtbot.waitSignal(canvas.cursor_moved, timeout=1000) as blocker:
            canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, (33, 44)))
        assert blocker.args == [33.0, 44.0]

    def test_transform_changed_signal(self, canvas, qtbot):
        with qtbot.waitSignal(canvas.transform_changed, timeout=1000) as blocker:
            canvas.viewport.zoom_in()
        assert blocker.args == [1.25, 0.0, 0.0]

    def test_qtransform_matches_mapping(self):
        from components.canvas_widget import to_qtransform
        state = TransformState(scale=1.75, translate_x=-40.0, translate_y=12.5)
        mapped = to_qtransform(state).map(QPointF(100.0, -20.0))
        expected = canvas_to_screen(100.0, -20.0, state, ContainerRect())
        assert mapped.x() == pytest.approx(expected.x)
        assert mapped.y() == pytest.approx(expected.y)

    def test_renders_with_image_and_grid(self, canvas):
        image = QImage(160, 90, QImage.Format_RGB32)
        image.fill(QColor(200, 40, 40))
        canvas.set_image(image)
        canvas.viewport.set_transform(TransformState(2.0, -50.0, -20.0))
        assert canvas.image_bounds() is not None
        assert not canvas.grab().isNull()

    def test_renders_without_grid(self, canvas):
        canvas.set_show_grid(False)
        assert not canvas.grab().isNull()


# ══════════════════════════════════════════════════════════════════════════
# Zoom Toolbar
# ══════════════════════════════════════════════════════════════════════════

class TestZoomToolbar:

    @pytest.fixture
    def toolbar(self, qtbot):
        from components.gui_widgets import ZoomToolbar
        widget = ZoomToolbar()
        qtbot.addWidget(widget)
        return widget

    def test_default_display(self, toolbar):
        assert toolbar.get_zoom_percent() == 100

    def test_sync_from_viewport(self, toolbar):
        viewport = Viewport()
        viewport.set_zoom(4)
        toolbar.sync_from_viewport(viewport)
        assert toolbar.get_zoom_percent() == 400
        assert not toolbar.zoom_in_btn.isEnabled()
        assert toolbar.zoom_out_btn.isEnabled()

    def test_half_percent_rounds_up(self, toolbar):
        viewport = Viewport()
        viewport.set_zoom(1.125)
        toolbar.sync_from_viewport(viewport)
        assert toolbar.get_zoom_percent() == 113

    def test_zoom_in_button_emits(self, toolbar, qtbot):
        with qtbot.waitSignal(toolbar.zoom_in_requested, timeout=1000):
            qtbot.mouseClick(toolbar.zoom_in_btn, Qt.LeftButton)

    def test_preset_emits_percent(self, toolbar, qtbot):
        with qtbot.waitSignal(toolbar.zoom_changed, timeout=1000) as blocker:
            toolbar._on_preset_selected(200)
        assert blocker.args == [200]


# ══════════════════════════════════════════════════════════════════════════
# Main Window
# ══════════════════════════════════════════════════════════════════════════

class TestViewportEditor:

    @pytest.fixture
    def window(self, qtbot):
        from main import ViewportEditor
        editor = ViewportEditor()
        qtbot.addWidget(editor)
        editor.canvas_widget.resize(400, 300)
        return editor

    def test_zoom_in_updates_toolbar(self, window):
        window._zoom_in()
        assert window.viewport.transform.scale == 1.25
        assert window.zoom_toolbar.get_zoom_percent() == 125

    def test_preset_sets_zoom(self, window):
        window.zoom_toolbar.zoom_changed.emit(300)
        assert window.viewport.transform.scale == 3.0
        assert window.zoom_toolbar.get_zoom_percent() == 300

    def test_reset(self, window):
        window.viewport.set_transform(TransformState(2.0, 10.0, 10.0))
        window._zoom_reset()
        assert window.viewport.transform == TransformState.identity()
        assert window.zoom_toolbar.get_zoom_percent() == 100

    def test_toolbar_disables_at_min(self, window):
        window.viewport.set_zoom(0.25)
        assert not window.zoom_toolbar.zoom_out_btn.isEnabled()

    def test_cursor_status(self, window):
        window.viewport.set_transform(TransformState(2.0, 0.0, 0.0))
        window._on_cursor_moved(100.0, 50.0)
        assert window.cursor_label.text().startswith("Canvas: 50.0, 25.0")

    def test_load_image(self, window, tmp_path):
        path = tmp_path / "plan.png"
        image = QImage(64, 32, QImage.Format_RGB32)
        image.fill(QColor(0, 0, 0))
        assert image.save(str(path))

        window.viewport.set_zoom(3)
        assert window.load_image(str(path))
        assert window.viewport.transform == TransformState.identity()
        window._on_cursor_moved(10.0, 10.0)
        assert "Image:" in window.cursor_label.text()
