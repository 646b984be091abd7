"""
Product browser screen.

Shows the catalog as a grid of cards. Up to two products can be selected and
checked for compatibility; any product can be added to the routine.
"""

from typing import List

import streamlit as st

from layerit.catalog import get_products_by_ids
from layerit.models import Product
from layerit.navigation import NavigationAction
from layerit.recommendations import products_for_skin_type
from layerit.selection import MAX_SELECTED, can_select
from ui.layout import page_header, section
from utils.session import get_store
from utils.state import (
    add_product_to_routine,
    clear_comparison,
    get_comparison,
    get_routine,
    get_selected_ids,
    get_skin_type,
    go_to,
    is_in_routine,
    run_comparison,
    toggle_selected,
)
from utils.ui_components import render_compatibility_result, render_product_card

GRID_COLUMNS = 3


def _routine_button() -> None:
    count = len(get_routine())
    if st.button(f"⭐ My Routine ({count})", key="products_view_routine", width="stretch"):
        go_to(NavigationAction.VIEW_ROUTINE)
        st.rerun()


def render(catalog: List[Product]) -> None:
    page_header("Product Collection", subtitle="Discover and compare skincare products", right=_routine_button)

    skin_type = get_skin_type()
    suited_ids = {p.id for p in products_for_skin_type(catalog, skin_type)} if skin_type else set()

    visible = catalog
    if skin_type:
        only_suited = st.toggle(f"Only show products for {skin_type} skin", key="products_only_suited")
        if only_suited:
            visible = [p for p in catalog if p.id in suited_ids]

    _render_selection_panel(catalog)
    _render_comparison_panel(catalog)

    selected_ids = get_selected_ids()
    columns = st.columns(GRID_COLUMNS, gap="medium")
    for idx, product in enumerate(visible):
        with columns[idx % GRID_COLUMNS]:
            select_clicked, add_clicked = render_product_card(
                product,
                is_selected=product.id in selected_ids,
                is_in_routine=is_in_routine(product.id),
                can_select=can_select(selected_ids, product.id),
                is_suggested=product.id in suited_ids,
            )
        if select_clicked:
            toggle_selected(product.id)
            st.rerun()
        if add_clicked:
            add_product_to_routine(get_store(), product)
            st.rerun()

    if st.button("🏠 Back to home", key="products_back_home"):
        go_to(NavigationAction.BACK_HOME)
        st.rerun()


def _render_selection_panel(catalog: List[Product]) -> None:
    selected = get_products_by_ids(catalog, get_selected_ids())
    if not selected:
        return

    with st.container(border=True):
        section("🔍 Selected for Comparison")
        st.write(" · ".join(f"**{p.name}**" for p in selected))
        if len(selected) == MAX_SELECTED:
            if st.button("✨ Check Compatibility", key="products_check_compatibility", type="primary"):
                run_comparison(catalog)
                st.rerun()
        else:
            st.caption("Select one more product to check compatibility.")


def _render_comparison_panel(catalog: List[Product]) -> None:
    result = get_comparison()
    if result is None:
        return

    with st.container(border=True):
        render_compatibility_result(result, get_products_by_ids(catalog, get_selected_ids()))
        if st.button("Compare Different Products", key="products_clear_comparison", width="stretch"):
            clear_comparison()
            st.rerun()
