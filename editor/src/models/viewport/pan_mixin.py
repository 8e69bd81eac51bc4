"""
Pan Mixin for Viewport Model

Drag-pan session: start on pointer down, update on move, end on release.
The embedding UI must call end_pan() on pointer release, leave and cancel;
there is no timeout that ends a stuck session.
"""

from services import pan_operations


class ViewportPanMixin:
    """Mixin providing drag-pan sessions

    This mixin assumes the class has:
    - self._transform: TransformState
    - self._pan_session: PanSession
    - self._logger
    - self._apply(new_state, description)
    """

    def start_pan(self, x, y):
        """Begin panning from pointer position (x, y).

        Starting while already panning re-anchors the session.
        """
        if self._pan_session.active:
            self._logger.debug("start_pan while already panning, re-anchoring")
        self._pan_session = pan_operations.start_pan(x, y)

    def update_pan(self, x, y):
        """Move the canvas by the pointer travel since the last update.

        No effect unless a session is active.

        Returns:
            True if the transform changed
        """
        new_state, self._pan_session = pan_operations.update_pan(
            self._transform, self._pan_session, x, y
        )
        return self._apply(new_state, "update_pan")

    def end_pan(self):
        self._pan_session = pan_operations.end_pan()
