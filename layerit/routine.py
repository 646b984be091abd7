"""
Routine and skin type persistence.

The routine is an ordered list of products the user wants to keep. Only the
product ids are persisted (as a JSON array under ROUTINE_KEY); the products
themselves are looked up in the static catalog when the routine is loaded.
The skin type from the last completed quiz is persisted as a plain string
under SKIN_TYPE_KEY.

Both values are stored without versioning. A missing value means "nothing
saved yet"; a corrupt routine value is logged and treated as empty.
"""

import json
import logging
from typing import List, Optional, Sequence

from layerit.catalog import get_products_by_ids
from layerit.models import Product
from layerit.storage import KeyValueStore

logger = logging.getLogger(__name__)

ROUTINE_KEY = "layerit_routine"
SKIN_TYPE_KEY = "layerit_skin_type"


def load_routine_ids(store: KeyValueStore) -> List[int]:
    """
    Read the saved routine ids.

    Returns:
        Product ids in saved order, or an empty list if nothing valid is saved.
        A repeated id keeps only its first position.
    """
    raw = store.get_item(ROUTINE_KEY)
    if not raw:
        return []

    try:
        ids = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring corrupt routine value %r: %s", raw, e)
        return []

    if not isinstance(ids, list):
        logger.warning("Ignoring routine value %r: expected a list of ids", raw)
        return []

    routine_ids: List[int] = []
    for product_id in ids:
        # bool is an int subclass; a stray true/false is not an id
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            continue
        if product_id in routine_ids:
            logger.warning("Dropping repeated routine id %r", product_id)
            continue
        routine_ids.append(product_id)
    return routine_ids


def save_routine(store: KeyValueStore, routine: Sequence[Product]) -> None:
    """
    Persist the routine's product ids in routine order.

    Raises:
        StorageError: If the store cannot be written
    """
    ids = [product.id for product in routine]
    store.set_item(ROUTINE_KEY, json.dumps(ids))
    logger.debug("Saved routine ids %s", ids)


def load_routine(store: KeyValueStore, products: Sequence[Product]) -> List[Product]:
    """
    Rebuild the saved routine from the catalog.

    Args:
        store: Key-value store holding the routine ids
        products: Catalog products to resolve ids against

    Returns:
        Routine products in saved order. Ids no longer in the catalog are skipped.
    """
    return get_products_by_ids(products, load_routine_ids(store))


def add_to_routine(store: KeyValueStore, routine: Sequence[Product], product: Product) -> List[Product]:
    """
    Append a product to the routine and persist it.

    A product that is already in the routine is not added twice.

    Returns:
        The updated routine (a new list)

    Raises:
        StorageError: If the store cannot be written
    """
    if any(item.id == product.id for item in routine):
        return list(routine)

    updated = [*routine, product]
    save_routine(store, updated)
    return updated


def remove_from_routine(store: KeyValueStore, routine: Sequence[Product], product_id: int) -> List[Product]:
    """
    Remove a product from the routine by id and persist the result.

    Returns:
        The updated routine (a new list)

    Raises:
        StorageError: If the store cannot be written
    """
    updated = [item for item in routine if item.id != product_id]
    save_routine(store, updated)
    return updated


def clear_routine(store: KeyValueStore) -> None:
    """Forget the saved routine."""
    store.remove_item(ROUTINE_KEY)


def save_skin_type(store: KeyValueStore, skin_type: str) -> None:
    """
    Persist the skin type from a completed quiz.

    Raises:
        StorageError: If the store cannot be written
    """
    store.set_item(SKIN_TYPE_KEY, skin_type)


def load_skin_type(store: KeyValueStore) -> Optional[str]:
    """Read the saved skin type, or None if the quiz hasn't been taken."""
    return store.get_item(SKIN_TYPE_KEY) or None
