"""
Static product catalog.

The catalog is an ordered list of Product records read once from a JSON
dataset (layerit/data/products.json by default, see CatalogConfig). It is
read-only input data: nothing in the app mutates it, and lookups always return
the same Product instances.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from layerit.config import CatalogConfig
from layerit.models import Product

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the product dataset cannot be read or parsed."""


def load_products(path: Optional[Path] = None) -> List[Product]:
    """
    Load the product dataset.

    Args:
        path: Dataset location. Defaults to CatalogConfig.get_products_path().

    Returns:
        Products in dataset order

    Raises:
        CatalogError: If the file is missing, is not valid JSON, is not a list,
            or contains a record that doesn't match the Product schema
    """
    dataset_path = Path(path) if path is not None else CatalogConfig.get_products_path()

    try:
        with dataset_path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read product dataset at {dataset_path}: {e}") from e

    if not isinstance(raw, list):
        raise CatalogError(f"Product dataset at {dataset_path} must be a JSON array")

    try:
        products = [Product.model_validate(record) for record in raw]
    except ValidationError as e:
        raise CatalogError(f"Invalid product record in {dataset_path}: {e}") from e

    logger.info("Loaded %d products from %s", len(products), dataset_path)
    return products


def index_by_id(products: Iterable[Product]) -> Dict[int, Product]:
    """Build an id -> Product lookup."""
    return {product.id: product for product in products}


def get_product(products: Iterable[Product], product_id: int) -> Optional[Product]:
    """
    Find a product by id.

    Returns:
        The matching Product, or None if no product has that id
    """
    for product in products:
        if product.id == product_id:
            return product
    return None


def get_products_by_ids(products: Iterable[Product], product_ids: Iterable[int]) -> List[Product]:
    """
    Resolve a list of ids to products, keeping the order of product_ids.

    Ids with no matching product are skipped.
    """
    lookup = index_by_id(products)
    resolved = []
    for product_id in product_ids:
        product = lookup.get(product_id)
        if product is None:
            logger.debug("Skipping unknown product id %r", product_id)
            continue
        resolved.append(product)
    return resolved
