"""Drag-pan session state machine.

Idle --start_pan--> Panning --update_pan--> Panning --end_pan--> Idle

update_pan works on sliding deltas: each call applies the movement since
the previous pointer position and moves the anchor, so a series of
updates sums to the total pointer travel.
"""
from models.input_events import PanSession, IDLE_PAN_SESSION
from models.transform import Vec2
from services.zoom_operations import pan_by

MIDDLE_BUTTON = 'middle'
LEFT_BUTTON = 'left'


def start_pan(x, y):
    """Begin a pan session anchored at (x, y)."""
    return PanSession(active=True, anchor=Vec2(x, y))


def update_pan(state, session, x, y):
    """Apply pointer movement to the translation.

    Args:
        state: Current TransformState
        session: Current PanSession
        x, y: Pointer position, in the same space as the anchor

    Returns:
        (new_state, new_session). Both are returned unchanged when the
        session is idle.
    """
    if not session.active or session.anchor is None:
        return state, session

    delta_x = x - session.anchor.x
    delta_y = y - session.anchor.y
    return pan_by(state, delta_x, delta_y), PanSession(active=True, anchor=Vec2(x, y))


def end_pan():
    """Finish the session. Safe to call when already idle."""
    return IDLE_PAN_SESSION


def should_start_pan(button, alt_key=False):
    """Middle button pans; so does left button with Alt held."""
    return button == MIDDLE_BUTTON or (button == LEFT_BUTTON and alt_key)
