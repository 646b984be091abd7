"""
Utility modules for the Streamlit frontend.

This package contains:
- session: Shared catalog and key-value store accessors
- state: Session state management helpers
- ui_components: Reusable UI components
"""
