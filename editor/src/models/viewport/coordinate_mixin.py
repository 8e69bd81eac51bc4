"""Coordinate transformation mixin for the viewport.

Binds the coordinate functions in services.coordinate_mapping to the
viewport's current transform.
"""
from services import coordinate_mapping


class ViewportCoordinateMixin:
    """Mixin providing coordinate transformation methods.

    Requires the following from the parent class:
    - self._transform (TransformState)
    """

    def screen_to_canvas(self, screen_x, screen_y, rect):
        """Screen point -> Vec2 in canvas space."""
        return coordinate_mapping.screen_to_canvas(screen_x, screen_y, self._transform, rect)

    def canvas_to_screen(self, canvas_x, canvas_y, rect):
        """Canvas point -> Vec2 in screen space."""
        return coordinate_mapping.canvas_to_screen(canvas_x, canvas_y, self._transform, rect)

    def screen_points_to_canvas(self, points, rect):
        return coordinate_mapping.screen_points_to_canvas(points, self._transform, rect)

    def canvas_points_to_screen(self, points, rect):
        return coordinate_mapping.canvas_points_to_screen(points, self._transform, rect)

    def visible_canvas_bounds(self, rect):
        """(left, top, right, bottom) of the canvas area currently on screen."""
        return coordinate_mapping.visible_canvas_bounds(self._transform, rect)

    def screen_to_image_percent(self, screen_x, screen_y, rect, bounds):
        return coordinate_mapping.screen_to_image_percent(screen_x, screen_y, self._transform, rect, bounds)

    def image_percent_to_screen(self, percent_x, percent_y, rect, bounds):
        return coordinate_mapping.image_percent_to_screen(percent_x, percent_y, self._transform, rect, bounds)

    def css_transform(self):
        return coordinate_mapping.css_transform(self._transform)
