"""
Routine screen - the saved products and how well they layer together.
"""

from typing import List

import streamlit as st

from layerit.compatibility import check_routine_compatibility
from layerit.models import Product
from layerit.navigation import NavigationAction
from ui.feedback import show_empty_state
from ui.layout import page_header, section
from utils.session import get_store
from utils.state import clear_saved_routine, get_routine, go_to, remove_product_from_routine
from utils.ui_components import ingredient_preview, render_compatibility_result


def _browse_products() -> None:
    go_to(NavigationAction.BROWSE_PRODUCTS)


def render(catalog: List[Product]) -> None:
    page_header("⭐ Your Routine", subtitle="Everything you've saved, and whether it layers well")

    routine = get_routine()
    if not routine:
        show_empty_state(
            "Your routine is empty",
            subtitle="Add products from the collection to build your routine.",
            action_label="Browse Products",
            on_action=_browse_products,
            key="routine_empty_browse",
        )
    else:
        for idx, product in enumerate(routine, start=1):
            with st.container(border=True):
                col_info, col_remove = st.columns([4, 1])
                with col_info:
                    st.markdown(f"**{idx}. {product.name}** · {product.brand}")
                    st.caption(f"🧪 {ingredient_preview(product.ingredients)}")
                with col_remove:
                    if st.button("Remove", key=f"routine_remove_{product.id}", width="stretch"):
                        remove_product_from_routine(get_store(), product.id)
                        st.rerun()

        section("⚗️ Layering check", caption="Every pair of products in your routine, checked for conflicts.")
        flagged = check_routine_compatibility(routine)
        if not flagged:
            st.success("✅ No conflicts between the products in your routine.")
        for product_a, product_b, result in flagged:
            render_compatibility_result(result, [product_a, product_b])

        if st.button("Clear routine", key="routine_clear"):
            clear_saved_routine(get_store())
            st.rerun()

    col_browse, col_home = st.columns(2)
    with col_browse:
        if st.button("Browse Products", key="routine_browse_products", type="primary", width="stretch"):
            go_to(NavigationAction.BROWSE_PRODUCTS)
            st.rerun()
    with col_home:
        if st.button("🏠 Back to home", key="routine_back_home", width="stretch"):
            go_to(NavigationAction.BACK_HOME)
            st.rerun()
