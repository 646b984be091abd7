"""
Shared resources for Streamlit screens.

Screens get the product catalog and the persisted key-value store through
these helpers, so every screen sees the same data within a session.
"""

from typing import List

import streamlit as st

from layerit.catalog import load_products
from layerit.models import Product
from layerit.storage import KeyValueStore, get_default_store


@st.cache_resource
def get_catalog() -> List[Product]:
    """
    Load the static product catalog once per server process.

    Raises:
        CatalogError: If the dataset cannot be loaded (not cached, so the
            next rerun retries)
    """
    return load_products()


def get_store() -> KeyValueStore:
    """
    Get the persisted key-value store.

    The file store re-reads its file on every call, so a fresh instance per
    rerun is cheap and always sees the latest saved values.
    """
    return get_default_store()
