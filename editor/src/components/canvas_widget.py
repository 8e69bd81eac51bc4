"""Qt canvas widget driven by the Viewport model.

Translates Qt wheel/mouse events into viewport input values and paints
content with the viewport transform (translate, then scale).
"""
import math

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QSize, QRectF, QLineF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor, QTransform

from constants import (
	DELTA_MODE_PIXEL, DELTA_MODE_LINE,
	QT_ANGLE_DELTA_PER_NOTCH, LINES_PER_NOTCH,
	GRID_SPACING, GRID_MAJOR_EVERY,
	CANVAS_BACKGROUND_COLOR, GRID_MINOR_COLOR, GRID_MAJOR_COLOR,
)
from models.input_events import WheelEvent
from models.transform import ContainerRect
from models.viewport import Viewport
from services.coordinate_mapping import compute_image_bounds
from services.pan_operations import should_start_pan, LEFT_BUTTON, MIDDLE_BUTTON


_QT_BUTTONS = {
	Qt.LeftButton: LEFT_BUTTON,
	Qt.MiddleButton: MIDDLE_BUTTON,
}


def wheel_event_from_qt(event):
	"""Convert a QWheelEvent to a WheelEvent.

	Trackpads report pixelDelta; mouse wheels only report angleDelta,
	which becomes line units (3 lines per notch). Qt's positive delta
	means scrolling up, so the sign is flipped to match deltaY.
	"""
	pixel = event.pixelDelta()
	if not pixel.isNull():
		delta_x, delta_y, mode = -pixel.x(), -pixel.y(), DELTA_MODE_PIXEL
	else:
		angle = event.angleDelta()
		lines_per_unit = LINES_PER_NOTCH / QT_ANGLE_DELTA_PER_NOTCH
		delta_x = -angle.x() * lines_per_unit
		delta_y = -angle.y() * lines_per_unit
		mode = DELTA_MODE_LINE

	pos = event.pos()
	modifiers = event.modifiers()
	return WheelEvent(
		delta_x=delta_x,
		delta_y=delta_y,
		delta_mode=mode,
		client_x=pos.x(),
		client_y=pos.y(),
		ctrl_key=bool(modifiers & Qt.ControlModifier),
		meta_key=bool(modifiers & Qt.MetaModifier),
	)


def to_qtransform(state):
	"""QTransform equivalent of translate(tx, ty) scale(s)."""
	return QTransform().translate(state.translate_x, state.translate_y).scale(state.scale, state.scale)


class ViewportCanvas(QWidget):
	"""Pannable, zoomable canvas surface.

	- Ctrl/Cmd + wheel (or trackpad pinch): zoom at cursor
	- Wheel / two-finger scroll: pan
	- Middle drag, or Alt + left drag: pan
	"""

	transform_changed = pyqtSignal(float, float, float)  # scale, translate_x, translate_y
	cursor_moved = pyqtSignal(float, float)  # Cursor position in widget pixels

	def __init__(self, viewport=None, parent=None):
		super().__init__(parent)

		self.setFocusPolicy(Qt.WheelFocus)
		self.setMouseTracking(True)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

		self.viewport = viewport if viewport is not None else Viewport()
		self.viewport.add_listener(self._on_transform_changed)

		self.show_grid = True
		self.image = None  # QImage shown aspect-fitted in the canvas

	def sizeHint(self):
		return QSize(800, 600)

	# ========================================
	# Geometry
	# ========================================

	def container_rect(self):
		"""Widget-local rect; event positions are widget-local too."""
		return ContainerRect(0.0, 0.0, float(self.width()), float(self.height()))

	def image_bounds(self):
		if self.image is None:
			return None
		return compute_image_bounds(self.width(), self.height(), self.image.width(), self.image.height())

	# ========================================
	# Content
	# ========================================

	def set_image(self, image):
		self.image = image
		self.update()

	def set_show_grid(self, show):
		self.show_grid = show
		self.update()

	def _on_transform_changed(self, state):
		self.transform_changed.emit(state.scale, state.translate_x, state.translate_y)
		self.update()

	# ========================================
	# Mouse Event Handlers
	# ========================================

	def wheelEvent(self, event):
		self.viewport.handle_wheel(wheel_event_from_qt(event), self.container_rect())
		event.accept()

	def mousePressEvent(self, event):
		button = _QT_BUTTONS.get(event.button())
		alt_key = bool(event.modifiers() & Qt.AltModifier)
		if button and should_start_pan(button, alt_key):
			self.viewport.start_pan(event.x(), event.y())
			self.setCursor(Qt.ClosedHandCursor)
			event.accept()
			return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		if self.viewport.is_panning:
			self.viewport.update_pan(event.x(), event.y())
			event.accept()
			return
		self.cursor_moved.emit(float(event.x()), float(event.y()))
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		if self.viewport.is_panning and event.button() in _QT_BUTTONS:
			self._finish_pan()
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def leaveEvent(self, event):
		# Safety net for a lost mouse grab; the release would otherwise go missing
		self._finish_pan()
		super().leaveEvent(event)

	def focusOutEvent(self, event):
		self._finish_pan()
		super().focusOutEvent(event)

	def _finish_pan(self):
		if self.viewport.is_panning:
			self.viewport.end_pan()
			self.unsetCursor()

	# ========================================
	# Rendering
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.fillRect(self.rect(), QColor(CANVAS_BACKGROUND_COLOR))
		painter.setTransform(to_qtransform(self.viewport.transform))

		bounds = self.image_bounds()
		if bounds is not None:
			painter.setRenderHint(QPainter.SmoothPixmapTransform)
			target = QRectF(bounds.offset_x, bounds.offset_y, bounds.rendered_width, bounds.rendered_height)
			painter.drawImage(target, self.image)

		if self.show_grid:
			self._render_grid(painter)

		painter.end()

	def _render_grid(self, painter):
		"""Draw grid lines covering only the visible canvas area."""
		left, top, right, bottom = self.viewport.visible_canvas_bounds(self.container_rect())

		minor_pen = QPen(QColor(GRID_MINOR_COLOR), 0)  # Width 0 = cosmetic 1px
		major_pen = QPen(QColor(GRID_MAJOR_COLOR), 0)

		first_col = math.floor(left / GRID_SPACING)
		last_col = math.ceil(right / GRID_SPACING)
		for i in range(first_col, last_col + 1):
			x = i * GRID_SPACING
			painter.setPen(major_pen if i % GRID_MAJOR_EVERY == 0 else minor_pen)
			painter.drawLine(QLineF(x, top, x, bottom))

		first_row = math.floor(top / GRID_SPACING)
		last_row = math.ceil(bottom / GRID_SPACING)
		for j in range(first_row, last_row + 1):
			y = j * GRID_SPACING
			painter.setPen(major_pen if j % GRID_MAJOR_EVERY == 0 else minor_pen)
			painter.drawLine(QLineF(left, y, right, y))
