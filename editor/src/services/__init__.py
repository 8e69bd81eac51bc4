"""Pure viewport operations used by the Viewport model and UI layer"""
