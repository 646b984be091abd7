"""
Reusable UI Components Module.

This module contains the product and compatibility components shared by the
product browser and routine screens.

Design principles:
- Use emojis sparingly but meaningfully
- Color coding for verdicts (green = safe, amber = caution, rose = danger)
- Cards via bordered containers, laid out in Streamlit columns
"""

from typing import List, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st

from layerit.models import CompatibilityResult, ConflictRule, Product

INGREDIENT_PREVIEW_COUNT = 4

VERDICT_BADGES = {
    "safe": "✅ Safe",
    "caution": "⚠️ Caution",
    "danger": "⛔ Danger",
}


def verdict_badge(verdict: str | None) -> str:
    """
    Convert a verdict or severity to a display string with emoji.

    Args:
        verdict: "safe", "caution", "danger", or None

    Returns:
        Formatted string, e.g. "⚠️ Caution"; "❔ Unknown" for anything else
    """
    if not verdict:
        return "❔ Unknown"
    return VERDICT_BADGES.get(verdict.lower(), "❔ Unknown")


def ingredient_preview(ingredients: Sequence[str], limit: int = INGREDIENT_PREVIEW_COUNT) -> str:
    """Comma-separated first few ingredients, with an ellipsis if there are more."""
    preview = ", ".join(ingredients[:limit])
    if len(ingredients) > limit:
        preview += "..."
    return preview


def conflicts_to_dataframe(conflicts: Sequence[ConflictRule]) -> pd.DataFrame:
    """
    Build a display table of matched conflict rules.

    Returns:
        DataFrame with Ingredients, Severity and Why columns, one row per match
    """
    rows = [
        {
            "Ingredients": f"{rule.ingredient_a.title()} + {rule.ingredient_b.title()}",
            "Severity": verdict_badge(rule.severity),
            "Why": rule.explanation,
        }
        for rule in conflicts
    ]
    return pd.DataFrame(rows, columns=["Ingredients", "Severity", "Why"])


def render_product_card(
    product: Product,
    is_selected: bool,
    is_in_routine: bool,
    can_select: bool,
    is_suggested: bool = False,
) -> Tuple[bool, bool]:
    """
    Render a product card with Select and Add-to-routine buttons.

    Args:
        product: Product to show
        is_selected: Whether the product is picked for comparison
        is_in_routine: Whether the product is already in the routine
        can_select: Whether the Select button is enabled
        is_suggested: Whether to show a "suits your skin" badge

    Returns:
        (select_clicked, add_clicked)
    """
    with st.container(border=True):
        st.markdown(f"**{product.name}**")
        st.caption(product.brand)
        if is_suggested:
            st.caption("💗 Suits your skin")
        st.write(product.description)
        st.caption(f"🧪 Key ingredients: {ingredient_preview(product.ingredients)}")

        col_select, col_add = st.columns([3, 1])
        with col_select:
            select_clicked = st.button(
                "✓ Selected" if is_selected else "Select",
                key=f"select_{product.id}",
                type="primary" if is_selected else "secondary",
                disabled=not can_select and not is_selected,
                width="stretch",
            )
        with col_add:
            add_clicked = st.button(
                "✓" if is_in_routine else "🛍️",
                key=f"add_to_routine_{product.id}",
                disabled=is_in_routine,
                help="In routine" if is_in_routine else "Add to routine",
                width="stretch",
            )
    return select_clicked, add_clicked


def render_compatibility_result(result: CompatibilityResult, products: Optional[List[Product]] = None) -> None:
    """
    Render a verdict banner and the table of ingredient interactions.

    Args:
        result: Comparison outcome
        products: The compared products, used for the banner title
    """
    title = " + ".join(p.name for p in products) if products else "Compatibility"
    banner = f"**{verdict_badge(result.verdict)}** · {title}\n\n{result.message}"

    if result.verdict == "danger":
        st.error(banner)
    elif result.verdict == "caution":
        st.warning(banner)
    else:
        st.success(banner)

    if result.conflicts:
        st.markdown("#### ⚗️ Ingredient Interactions")
        st.dataframe(conflicts_to_dataframe(result.conflicts), hide_index=True, width="stretch")
