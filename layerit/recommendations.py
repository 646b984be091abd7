"""
Skin type recommendations.

Suggested routine steps shown on the quiz results screen, plus a filter that
narrows the catalog to products tagged for a skin type.
"""

from typing import Dict, List, Sequence, Tuple

from layerit.models import Product
from layerit.quiz import DEFAULT_SKIN_TYPE

ROUTINE_STEPS: Dict[str, Tuple[str, ...]] = {
    "oily": ("Gentle cleanser", "BHA toner or serum", "Lightweight moisturizer", "Niacinamide serum (optional)"),
    "dry": ("Creamy cleanser", "Hydrating toner", "Rich moisturizer", "Facial oil (optional)"),
    "combination": ("Gentle cleanser", "Balancing toner", "Gel moisturizer", "Spot treatment for T-zone"),
    "sensitive": ("Fragrance-free cleanser", "Soothing toner", "Barrier repair cream", "Avoid actives initially"),
    "normal": ("Gentle cleanser", "Hydrating toner", "Light moisturizer", "Optional targeted treatments"),
}


def get_routine_steps(skin_type: str | None) -> Tuple[str, ...]:
    """
    Get the suggested routine for a skin type.

    Unknown or missing skin types get the "normal" routine.
    """
    return ROUTINE_STEPS.get(skin_type or DEFAULT_SKIN_TYPE, ROUTINE_STEPS[DEFAULT_SKIN_TYPE])


def products_for_skin_type(products: Sequence[Product], skin_type: str | None) -> List[Product]:
    """
    Filter products to those tagged for a skin type.

    Args:
        products: Catalog products, in display order
        skin_type: Skin type to filter on. None or empty returns all products.

    Returns:
        Matching products, in the original order
    """
    if not skin_type:
        return list(products)
    wanted = skin_type.lower()
    return [p for p in products if wanted in (tag.lower() for tag in p.skin_types)]
