"""
Product selection for side-by-side comparison.

The product browser lets the user pick up to two products. Once exactly two
are picked, they can be checked for compatibility.
"""

from typing import List, Optional, Sequence

from layerit.catalog import get_products_by_ids
from layerit.compatibility import check_compatibility
from layerit.models import CompatibilityResult, Product

MAX_SELECTED = 2


def can_select(selected_ids: Sequence[int], product_id: int) -> bool:
    """A product can be toggled if there is room left or it is already selected."""
    return len(selected_ids) < MAX_SELECTED or product_id in selected_ids


def toggle_selection(selected_ids: Sequence[int], product_id: int) -> List[int]:
    """
    Select or deselect a product.

    Returns:
        New selection: without product_id if it was selected, with it appended
        if there was room, otherwise unchanged
    """
    if product_id in selected_ids:
        return [i for i in selected_ids if i != product_id]
    if len(selected_ids) < MAX_SELECTED:
        return [*selected_ids, product_id]
    return list(selected_ids)


def compare_selection(products: Sequence[Product], selected_ids: Sequence[int]) -> Optional[CompatibilityResult]:
    """
    Compare the selected products.

    Returns:
        CompatibilityResult when exactly two known products are selected, else None
    """
    selected = get_products_by_ids(products, selected_ids)
    if len(selected) != MAX_SELECTED:
        return None
    return check_compatibility(selected[0], selected[1])
