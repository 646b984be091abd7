"""
Layout primitives shared by the LayerIt screens.

Every screen opens with page_header(); longer screens split their content with
section() titles.
"""

from typing import Callable, Optional

import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[Callable[[], None]] = None) -> None:
    """
    Draw the screen title in the serif display font.

    Args:
        title: Screen title, emoji allowed
        subtitle: Tagline shown under the title in the muted subtitle style
        right: Renders extra content (e.g. a routine button) in a narrow
            column beside the title
    """
    if right is None:
        _render_title(title, subtitle)
        return

    col_title, col_right = st.columns([3, 1], vertical_alignment="center")
    with col_title:
        _render_title(title, subtitle)
    with col_right:
        right()


def _render_title(title: str, subtitle: Optional[str]) -> None:
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="layerit-subtitle">{subtitle}</div>', unsafe_allow_html=True)


def section(title: str, caption: Optional[str] = None) -> None:
    """Small heading inside a screen, with an optional muted caption under it."""
    st.markdown(f"### {title}")
    if caption:
        st.caption(caption)
