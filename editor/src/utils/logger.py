"""Global logging and error handling utilities"""
import sys
import logging
import traceback

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_main_window = None


def configure_logging(verbose=False):
    """Send log records to stdout. WARNING and up unless verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception, then raise it.

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE the exception is raised straight away so the full
    traceback is visible. In release builds the traceback is logged and,
    if a main window has been registered, a critical message box is shown
    before raising.
    """
    if DEBUG_MODE:
        raise e

    log = logging.getLogger('Viewport')
    log.error(f"{title}: {user_message or e}\n{traceback.format_exc()}")

    message = user_message if user_message else str(e)
    if _main_window is not None:
        from PyQt5.QtWidgets import QMessageBox
        QMessageBox.critical(_main_window, title, message)
    else:
        print(f"ERROR POPUP (no window): {title} - {message}", file=sys.stderr)

    raise e
