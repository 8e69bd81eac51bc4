import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QFileDialog, QMessageBox, QLabel
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor, QImage

# Component imports
from components.canvas_widget import ViewportCanvas
from components.gui_widgets import ZoomToolbar

from models.viewport import Viewport
from services.config_service import load_viewport_config
from utils.logger import configure_logging, set_main_window


class ViewportEditor(QMainWindow):
    """Main window: a zoomable canvas with a zoom toolbar and status readout"""

    def __init__(self, config=None):
        super().__init__()
        self.setWindowTitle("Canvas Viewport")
        self.resize(1280, 720)

        self._logger = logging.getLogger('ViewportEditor')

        # Single source of truth for zoom/pan
        self.viewport = Viewport(config)
        self.viewport.add_listener(self._on_transform_changed)

        set_main_window(self)
        self.setup_ui()
        self._sync_zoom_controls()

    # ============= UI Setup =============

    def setup_ui(self):
        self._create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)

        self.canvas_widget = ViewportCanvas(self.viewport, central_widget)
        self.canvas_widget.cursor_moved.connect(self._on_cursor_moved)
        layout.addWidget(self.canvas_widget, stretch=1)

        self.cursor_label = QLabel("")
        self.statusBar().addPermanentWidget(self.cursor_label)

    def _create_menu_bar(self):
        menubar = self.menuBar()

        # Zoom controls to the right of the menu bar
        self.zoom_toolbar = ZoomToolbar(self)
        self.zoom_toolbar.zoom_in_requested.connect(self._zoom_in)
        self.zoom_toolbar.zoom_out_requested.connect(self._zoom_out)
        self.zoom_toolbar.reset_requested.connect(self._zoom_reset)
        self.zoom_toolbar.fit_requested.connect(self._fit_to_view)
        self.zoom_toolbar.zoom_changed.connect(self._on_zoom_changed)
        menubar.setCornerWidget(self.zoom_toolbar, Qt.TopRightCorner)

        # File Menu
        file_menu = menubar.addMenu("&File")
        open_action = file_menu.addAction("&Open Image...")
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._open_image)
        file_menu.addSeparator()
        exit_action = file_menu.addAction("E&xit")
        exit_action.triggered.connect(self.close)

        # View Menu
        view_menu = menubar.addMenu("&View")

        zoom_in_action = view_menu.addAction("Zoom &In")
        zoom_in_action.setShortcut("Ctrl++")
        zoom_in_action.triggered.connect(self._zoom_in)

        zoom_out_action = view_menu.addAction("Zoom &Out")
        zoom_out_action.setShortcut("Ctrl+-")
        zoom_out_action.triggered.connect(self._zoom_out)

        zoom_reset_action = view_menu.addAction("&Reset Zoom")
        zoom_reset_action.setShortcut("Ctrl+0")
        zoom_reset_action.triggered.connect(self._zoom_reset)

        fit_action = view_menu.addAction("&Fit to View")
        fit_action.triggered.connect(self._fit_to_view)

        view_menu.addSeparator()

        self.grid_action = view_menu.addAction("Show &Grid")
        self.grid_action.setCheckable(True)
        self.grid_action.setChecked(True)
        self.grid_action.toggled.connect(lambda checked: self.canvas_widget.set_show_grid(checked))

    # ============= Zoom =============

    def _zoom_in(self):
        self.viewport.zoom_in()

    def _zoom_out(self):
        self.viewport.zoom_out()

    def _zoom_reset(self):
        self.viewport.reset_transform()

    def _fit_to_view(self):
        self.viewport.fit_to_view()

    def _on_zoom_changed(self, zoom_percent):
        """Handle zoom preset selected on the toolbar"""
        self.viewport.set_zoom_percent(zoom_percent)

    def _on_transform_changed(self, state):
        self._sync_zoom_controls()

    def _sync_zoom_controls(self):
        self.zoom_toolbar.sync_from_viewport(self.viewport)

    # ============= Status =============

    def _on_cursor_moved(self, x, y):
        rect = self.canvas_widget.container_rect()
        point = self.viewport.screen_to_canvas(x, y, rect)
        text = f"Canvas: {point.x:.1f}, {point.y:.1f}"

        bounds = self.canvas_widget.image_bounds()
        if bounds is not None:
            percent = self.viewport.screen_to_image_percent(x, y, rect, bounds)
            text += f"   Image: {percent.x:.1f}%, {percent.y:.1f}%"
        self.cursor_label.setText(text)

    # ============= File =============

    def _open_image(self):
        filepath, _ = QFileDialog.getOpenFileName(
            self, "Open Image", "", "Images (*.png *.jpg *.jpeg *.bmp);;All Files (*)"
        )
        if not filepath:
            return
        self.load_image(filepath)

    def load_image(self, filepath):
        image = QImage(filepath)
        if image.isNull():
            QMessageBox.warning(self, "Open Image", f"Could not load image:\n{filepath}")
            return False
        self.canvas_widget.set_image(image)
        self.viewport.fit_to_view()
        self.setWindowTitle(f"Canvas Viewport - {os.path.basename(filepath)}")
        self._logger.info(f"Loaded image {filepath} ({image.width()}x{image.height()})")
        return True


def main():
    """Main entry point for the Canvas Viewport application"""
    parser = argparse.ArgumentParser(description='Pannable, zoomable canvas viewer.')
    parser.add_argument('image', nargs='?', help='Image to open.')
    parser.add_argument(
        '-c', '--config',
        default=None,
        help='Viewport config JSON (default: ~/.canvasviewport/config.json).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args()

    configure_logging(args.verbose)
    config = load_viewport_config(args.config)

    app = QtWidgets.QApplication(sys.argv[:1])

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setPalette(dark_palette)

    window = ViewportEditor(config)
    if args.image:
        window.load_image(args.image)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
