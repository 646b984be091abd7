"""
UI Styling and Layout Module.

This module provides global CSS styling, layout primitives, feedback states
and charts for the LayerIt Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, section
from ui.feedback import show_error, show_empty_state

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
    "show_error",
    "show_empty_state",
]
