"""
Screens of the LayerIt app.

Each module renders one View and exposes render(catalog). The entry point
(streamlit_app/app.py) picks the module for the current view on every rerun.
"""
