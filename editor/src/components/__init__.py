"""UI components for Canvas Viewport

This package contains the Qt layer that embeds the Viewport model:
- canvas_widget: the pannable, zoomable canvas surface
- gui_widgets: reusable controls (zoom toolbar)
"""

from .canvas_widget import ViewportCanvas

__all__ = ['ViewportCanvas']
