"""Coordinate conversion between screen and canvas space.

Coordinate spaces:
- Screen: client pixels (same space as the container rect)
- Container: pixels relative to the container's top-left corner
- Canvas: content coordinates, independent of zoom/pan
- Image percent: 0-100 position inside an aspect-fitted image

The render transform is translate(tx, ty) then scale(s), so
    screen = canvas * s + t + rect.origin
"""
import numpy as np

from models.transform import Vec2, ImageBounds


# ========================================
# Single points
# ========================================

def screen_to_canvas(screen_x, screen_y, state, rect):
    """Convert a screen point to canvas space.

    Args:
        screen_x, screen_y: Screen coordinates
        state: TransformState
        rect: ContainerRect

    Returns:
        Vec2 in canvas space
    """
    return Vec2(
        (screen_x - rect.left - state.translate_x) / state.scale,
        (screen_y - rect.top - state.translate_y) / state.scale,
    )


def canvas_to_screen(canvas_x, canvas_y, state, rect):
    """Convert a canvas point to screen space (inverse of screen_to_canvas)."""
    return Vec2(
        canvas_x * state.scale + state.translate_x + rect.left,
        canvas_y * state.scale + state.translate_y + rect.top,
    )


# ========================================
# Point arrays
# ========================================

def screen_points_to_canvas(points, state, rect):
    """Vectorized screen_to_canvas for an (N, 2) array of points."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    origin = np.array([rect.left + state.translate_x, rect.top + state.translate_y])
    return (pts - origin) / state.scale


def canvas_points_to_screen(points, state, rect):
    """Vectorized canvas_to_screen for an (N, 2) array of points."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    origin = np.array([rect.left + state.translate_x, rect.top + state.translate_y])
    return pts * state.scale + origin


def visible_canvas_bounds(state, rect):
    """Canvas-space rectangle currently shown in the container.

    Returns:
        (left, top, right, bottom) in canvas coordinates
    """
    corners = np.array([
        [rect.left, rect.top],
        [rect.left + rect.width, rect.top + rect.height],
    ])
    (left, top), (right, bottom) = screen_points_to_canvas(corners, state, rect)
    return float(left), float(top), float(right), float(bottom)


# ========================================
# Image percent space
# ========================================

def compute_image_bounds(container_width, container_height, image_width, image_height):
    """Aspect-fit an image into the container, centered on the free axis.

    Returns:
        ImageBounds, or None if either size is empty
    """
    if container_width <= 0 or container_height <= 0 or image_width <= 0 or image_height <= 0:
        return None

    image_aspect = image_width / image_height
    container_aspect = container_width / container_height

    if image_aspect > container_aspect:
        # Wider than the container: width is the constraint
        rendered_width = container_width
        rendered_height = container_width / image_aspect
        return ImageBounds(0.0, (container_height - rendered_height) / 2, rendered_width, rendered_height)

    rendered_height = container_height
    rendered_width = container_height * image_aspect
    return ImageBounds((container_width - rendered_width) / 2, 0.0, rendered_width, rendered_height)


def screen_to_image_percent(screen_x, screen_y, state, rect, bounds):
    """Screen point to a 0-100 position on the image, clamped to the image."""
    canvas = screen_to_canvas(screen_x, screen_y, state, rect)
    x = (canvas.x - bounds.offset_x) / bounds.rendered_width * 100
    y = (canvas.y - bounds.offset_y) / bounds.rendered_height * 100
    return Vec2(max(0.0, min(100.0, x)), max(0.0, min(100.0, y)))


def image_percent_to_screen(percent_x, percent_y, state, rect, bounds):
    """0-100 image position to screen coordinates (no clamping)."""
    canvas_x = bounds.offset_x + percent_x / 100 * bounds.rendered_width
    canvas_y = bounds.offset_y + percent_y / 100 * bounds.rendered_height
    return canvas_to_screen(canvas_x, canvas_y, state, rect)


# ========================================
# Render transform
# ========================================

def css_transform(state):
    """CSS transform string, translate applied before scale."""
    return f"translate({state.translate_x}px, {state.translate_y}px) scale({state.scale})"
