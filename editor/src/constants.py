"""
Canvas Viewport - Constants and Configuration

This module contains all constant values used throughout the application:
- Zoom bounds and step sizes
- Wheel/trackpad sensitivities
- Wheel delta unit normalization
- Toolbar zoom presets
- Qt input conversion values
- Config file locations
"""

import os

# ======================================================================
# ZOOM DEFAULTS
# ======================================================================

DEFAULT_MIN_ZOOM = 0.25
DEFAULT_MAX_ZOOM = 4.0
DEFAULT_ZOOM_STEP = 0.25  # Additive step for zoom in/out buttons

# Exponent base for continuous wheel zoom: factor = 2 ** (-delta * sensitivity)
DEFAULT_ZOOM_SENSITIVITY = 0.008
DEFAULT_PAN_SENSITIVITY = 1.0

# Scale changes smaller than this are skipped during wheel zoom
DEFAULT_ZOOM_EPSILON = 0.001

# Cap on |exponent| for a single wheel zoom step (factor stays within 2 ** +-64)
MAX_ZOOM_EXPONENT = 64

# Identity transform
IDENTITY_SCALE = 1.0
IDENTITY_TRANSLATE_X = 0.0
IDENTITY_TRANSLATE_Y = 0.0

# ======================================================================
# WHEEL DELTA MODES
# ======================================================================
# Matches the deltaMode values reported by browser wheel events

DELTA_MODE_PIXEL = 0
DELTA_MODE_LINE = 1
DELTA_MODE_PAGE = 2

DELTA_MODE_MULTIPLIERS = {
    DELTA_MODE_PIXEL: 1,
    DELTA_MODE_LINE: 16,   # ~16px per line
    DELTA_MODE_PAGE: 100,  # ~100px per page
}

# ======================================================================
# TOOLBAR
# ======================================================================

# Percentages offered in the zoom preset menu
ZOOM_PRESETS = [25, 50, 100, 150, 200, 300, 400]

# ======================================================================
# QT INPUT CONVERSION
# ======================================================================
# Qt reports mouse wheel rotation in eighths of a degree, 120 per notch

QT_ANGLE_DELTA_PER_NOTCH = 120
LINES_PER_NOTCH = 3

# ======================================================================
# CANVAS RENDERING
# ======================================================================

GRID_SPACING = 50  # Canvas units between grid lines
GRID_MAJOR_EVERY = 5  # Every Nth grid line is drawn heavier
CANVAS_BACKGROUND_COLOR = '#141414'
GRID_MINOR_COLOR = '#262626'
GRID_MAJOR_COLOR = '#3a3a3a'

# ======================================================================
# CONFIG FILE
# ======================================================================

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".canvasviewport")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")
