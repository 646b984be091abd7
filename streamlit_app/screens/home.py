"""
Home screen - entry point to the quiz, the product browser and the routine.
"""

from typing import List

import streamlit as st

from layerit.models import Product
from layerit.navigation import NavigationAction
from ui.layout import page_header
from ui.styles import pill
from utils.state import get_routine, get_skin_type, go_to, reset_quiz


def render(catalog: List[Product]) -> None:
    page_header("✨ LayerIt 💗", subtitle="your friendly skincare compatibility checker")

    col_quiz, col_products = st.columns(2, gap="medium")

    with col_quiz:
        with st.container(border=True):
            st.markdown("### ✨ Find Your Skin Type")
            st.write("Take a quick 5-question quiz to discover your unique skin type")
            if st.button("Start Quiz →", key="home_start_quiz", type="primary", width="stretch"):
                reset_quiz()
                go_to(NavigationAction.START_QUIZ)
                st.rerun()

    with col_products:
        with st.container(border=True):
            st.markdown("### 🛍️ Browse Products")
            st.write("Check compatibility & build your perfect skincare routine")
            if st.button("Explore Now →", key="home_browse_products", type="primary", width="stretch"):
                go_to(NavigationAction.BROWSE_PRODUCTS)
                st.rerun()

    routine = get_routine()
    if routine:
        with st.container(border=True):
            col_text, col_action = st.columns([3, 1])
            with col_text:
                st.markdown("### ⭐ Your Saved Routine")
                st.caption(f"{len(routine)} products · Looking good!")
            with col_action:
                if st.button("View Routine", key="home_view_routine", width="stretch"):
                    go_to(NavigationAction.VIEW_ROUTINE)
                    st.rerun()

    skin_type = get_skin_type()
    if skin_type:
        st.markdown(f"Your skin type: {pill(skin_type)}", unsafe_allow_html=True)
