"""
Results screen - the scored skin type and a suggested routine.
"""

from typing import List

import streamlit as st

from layerit.models import Product
from layerit.navigation import NavigationAction
from layerit.quiz import DEFAULT_SKIN_TYPE, tally_answers
from layerit.recommendations import get_routine_steps, products_for_skin_type
from ui.charts import build_tally_chart
from ui.layout import page_header, section
from ui.styles import pill
from utils.state import get_quiz_state, get_skin_type, go_to


def render(catalog: List[Product]) -> None:
    skin_type = get_skin_type() or DEFAULT_SKIN_TYPE

    page_header("✨ Your Skin Type")
    st.markdown(pill(skin_type, large=True), unsafe_allow_html=True)

    section("🌸 Your Personalized Routine")
    for idx, step in enumerate(get_routine_steps(skin_type), start=1):
        st.markdown(f"**{idx}.** {step}")

    answers = get_quiz_state().answers
    if answers:
        section("How you answered", caption="Your answers per skin type.")
        st.altair_chart(build_tally_chart(tally_answers(answers)))

    suggested = products_for_skin_type(catalog, skin_type)
    if suggested:
        section("💗 Products for your skin")
        st.write(", ".join(f"**{p.name}** ({p.brand})" for p in suggested))

    col_browse, col_home = st.columns(2)
    with col_browse:
        if st.button("Browse Products", key="results_browse_products", type="primary", width="stretch"):
            go_to(NavigationAction.BROWSE_PRODUCTS)
            st.rerun()
    with col_home:
        if st.button("Back to Home", key="results_back_home", width="stretch"):
            go_to(NavigationAction.BACK_HOME)
            st.rerun()
