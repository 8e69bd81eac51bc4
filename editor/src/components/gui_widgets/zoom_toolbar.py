"""Zoom toolbar widget with zoom controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QMenu, QLabel
from PyQt5.QtCore import pyqtSignal, Qt

from constants import ZOOM_PRESETS


class ZoomToolbar(QWidget):
    """Toolbar with zoom in/out, reset/fit buttons and a preset dropdown.

    The toolbar holds no zoom state of its own: buttons emit requests and
    the owner pushes the resulting percentage back with set_zoom_percent().
    """

    zoom_in_requested = pyqtSignal()
    zoom_out_requested = pyqtSignal()
    reset_requested = pyqtSignal()
    fit_requested = pyqtSignal()
    zoom_changed = pyqtSignal(int)  # Emits preset zoom percentage

    def __init__(self, parent=None, presets=None):
        super().__init__(parent)
        self.presets = list(presets) if presets is not None else list(ZOOM_PRESETS)

        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        # Zoom out button
        self.zoom_out_btn = QToolButton()
        self.zoom_out_btn.setText("−")
        self.zoom_out_btn.setToolTip("Zoom Out (Ctrl+-)")
        self.zoom_out_btn.clicked.connect(self.zoom_out_requested.emit)
        layout.addWidget(self.zoom_out_btn)

        # Zoom level display (shows actual zoom)
        self.zoom_display = QLabel("100%")
        self.zoom_display.setMinimumWidth(60)
        self.zoom_display.setAlignment(Qt.AlignCenter)
        self.zoom_display.setStyleSheet("QLabel { padding: 2px 4px; background-color: #2d2d2d; border: 1px solid #555; border-radius: 2px; }")
        layout.addWidget(self.zoom_display)

        # Zoom in button
        self.zoom_in_btn = QToolButton()
        self.zoom_in_btn.setText("+")
        self.zoom_in_btn.setToolTip("Zoom In (Ctrl++)")
        self.zoom_in_btn.clicked.connect(self.zoom_in_requested.emit)
        layout.addWidget(self.zoom_in_btn)

        # Zoom preset button with dropdown menu
        self.preset_btn = QToolButton()
        self.preset_btn.setText("🔍")
        self.preset_btn.setToolTip("Jump to preset zoom level")
        self.preset_btn.setPopupMode(QToolButton.InstantPopup)

        preset_menu = QMenu(self)
        for preset in self.presets:
            action = preset_menu.addAction(f"{preset}%")
            action.setData(preset)
            action.triggered.connect(lambda checked, p=preset: self._on_preset_selected(p))
        self.preset_btn.setMenu(preset_menu)
        layout.addWidget(self.preset_btn)

        self.fit_btn = QToolButton()
        self.fit_btn.setText("Fit")
        self.fit_btn.setToolTip("Fit to View")
        self.fit_btn.clicked.connect(self.fit_requested.emit)
        layout.addWidget(self.fit_btn)

        self.reset_btn = QToolButton()
        self.reset_btn.setText("1:1")
        self.reset_btn.setToolTip("Reset View (Ctrl+0)")
        self.reset_btn.clicked.connect(self.reset_requested.emit)
        layout.addWidget(self.reset_btn)

        self.setLayout(layout)

    def _on_preset_selected(self, preset_value):
        """Handle preset selection from dropdown menu"""
        self.zoom_changed.emit(preset_value)

    def set_zoom_percent(self, percent):
        """Update the displayed zoom percentage"""
        self.zoom_display.setText(f"{percent}%")

    def get_zoom_percent(self):
        """Get current zoom percentage from display"""
        text = self.zoom_display.text().strip().rstrip('%')
        try:
            return int(text)
        except ValueError:
            return 100

    def set_zoom_limits(self, can_zoom_in, can_zoom_out):
        """Disable the step buttons at the zoom bounds"""
        self.zoom_in_btn.setEnabled(can_zoom_in)
        self.zoom_out_btn.setEnabled(can_zoom_out)

    def sync_from_viewport(self, viewport):
        """Refresh display and button states from a Viewport"""
        self.set_zoom_percent(viewport.zoom_percentage)
        self.set_zoom_limits(viewport.can_zoom_in, viewport.can_zoom_out)
