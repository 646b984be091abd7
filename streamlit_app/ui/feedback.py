"""
Error and empty-state messages.

Storage write failures are queued in session state by utils.state and shown
once by show_flash_error() on the next rerun, so a failed save never breaks
the screen that triggered it.
"""

from typing import Callable, Optional

import streamlit as st

from utils.state import pop_flash_error


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Show an error banner.

    Args:
        message: What went wrong, in the user's terms
        hint: What the user can do about it, shown as a caption
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_flash_error() -> None:
    """Show the error queued by the previous rerun, if any."""
    flash = pop_flash_error()
    if flash:
        message, hint = flash
        show_error(message, hint)


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Browse Products",
    on_action: Optional[Callable[[], None]] = None,
    key: Optional[str] = None,
) -> None:
    """
    Show a placeholder for a list with nothing in it yet.

    Args:
        title: Headline, e.g. "Your routine is empty"
        subtitle: Explains how to fill the list
        action_label: Button text
        on_action: Button callback; no button is drawn without one
        key: Widget key for the button
    """
    st.info(f"🌱 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if on_action is not None:
        st.button(action_label, key=key, on_click=on_action, type="primary", width="stretch")
