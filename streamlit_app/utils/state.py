"""
Session State Management Module.

This module wraps Streamlit's session_state to give the screens a small, typed
API for everything LayerIt keeps per browser session:

- `current_view`: value of the View enum selecting the screen to render
- `skin_type`: skin type from the last completed quiz (or the persisted one)
- `quiz_state`: QuizState for the quiz currently in progress
- `routine`: list of Product objects saved to the routine
- `selected_product_ids`: up to two product ids picked for comparison
- `comparison_result`: CompatibilityResult of the last comparison, if any

The routine and skin type are also written through to the persisted key-value
store, and read back from it once at the start of each session.

# NOTE: session_state is reset when the browser tab is reloaded. Only the
    routine and skin type survive, via the persisted store.
"""

import logging
from typing import List, Optional, Sequence

import streamlit as st

from layerit.models import CompatibilityResult, Product
from layerit.navigation import INITIAL_VIEW, NavigationAction, View, navigate, parse_view
from layerit.quiz import QuizState
from layerit.routine import (
    add_to_routine,
    clear_routine,
    load_routine,
    load_skin_type,
    remove_from_routine,
    save_skin_type,
)
from layerit.selection import compare_selection, toggle_selection
from layerit.storage import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

CURRENT_VIEW_KEY = "current_view"
SKIN_TYPE_KEY = "skin_type"
QUIZ_KEY = "quiz_state"
ROUTINE_KEY = "routine"
SELECTED_KEY = "selected_product_ids"
COMPARISON_KEY = "comparison_result"
PERSISTED_LOADED_KEY = "persisted_state_loaded"
FLASH_ERROR_KEY = "flash_error"


def load_persisted_state(store: KeyValueStore, catalog: Sequence[Product]) -> None:
    """
    Seed session state from the persisted store on the first run of a session.

    Later reruns keep whatever the session already holds.
    """
    if st.session_state.get(PERSISTED_LOADED_KEY):
        return

    st.session_state[ROUTINE_KEY] = load_routine(store, catalog)
    st.session_state[SKIN_TYPE_KEY] = load_skin_type(store) or ""
    st.session_state.setdefault(CURRENT_VIEW_KEY, INITIAL_VIEW.value)
    st.session_state[PERSISTED_LOADED_KEY] = True
    logger.debug(
        "Loaded persisted state: %d routine products, skin type %r",
        len(st.session_state[ROUTINE_KEY]),
        st.session_state[SKIN_TYPE_KEY],
    )


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

def get_current_view() -> View:
    """Get the view to render, defaulting to home."""
    return parse_view(st.session_state.get(CURRENT_VIEW_KEY))


def go_to(action: NavigationAction) -> View:
    """
    Apply a navigation action to the current view.

    Returns:
        The view now selected
    """
    target = navigate(get_current_view(), action)
    st.session_state[CURRENT_VIEW_KEY] = target.value
    return target


# ---------------------------------------------------------------------------
# Quiz and skin type
# ---------------------------------------------------------------------------

def get_quiz_state() -> QuizState:
    """Get the quiz in progress, starting a new one if needed."""
    if QUIZ_KEY not in st.session_state:
        st.session_state[QUIZ_KEY] = QuizState()
    return st.session_state[QUIZ_KEY]


def reset_quiz() -> None:
    """Throw away quiz progress so the next attempt starts at question one."""
    st.session_state[QUIZ_KEY] = QuizState()


def get_skin_type() -> str:
    """Get the current skin type, or an empty string if none is known."""
    return st.session_state.get(SKIN_TYPE_KEY, "")


def complete_quiz(store: KeyValueStore, skin_type: str) -> None:
    """
    Record a finished quiz: remember and persist the skin type, show results.

    A failed write keeps the skin type for this session and flashes an error.
    """
    st.session_state[SKIN_TYPE_KEY] = skin_type
    try:
        save_skin_type(store, skin_type)
    except StorageError as e:
        logger.warning("Skin type not persisted: %s", e)
        set_flash_error("We couldn't save your skin type.", hint="It will be forgotten when you close the app.")
    go_to(NavigationAction.COMPLETE_QUIZ)


# ---------------------------------------------------------------------------
# Routine
# ---------------------------------------------------------------------------

def get_routine() -> List[Product]:
    """Get the products in the saved routine."""
    return st.session_state.get(ROUTINE_KEY, [])


def is_in_routine(product_id: int) -> bool:
    return any(product.id == product_id for product in get_routine())


def add_product_to_routine(store: KeyValueStore, product: Product) -> bool:
    """
    Add a product to the routine and persist it.

    Returns:
        True if the routine was saved, False if the store write failed
        (session state is left unchanged in that case)
    """
    try:
        st.session_state[ROUTINE_KEY] = add_to_routine(store, get_routine(), product)
    except StorageError as e:
        logger.warning("Routine not persisted: %s", e)
        set_flash_error(f"We couldn't add {product.name} to your routine.", hint="Check that the storage path is writable.")
        return False
    return True


def remove_product_from_routine(store: KeyValueStore, product_id: int) -> bool:
    """
    Remove a product from the routine and persist the change.

    Returns:
        True if the routine was saved, False if the store write failed
    """
    try:
        st.session_state[ROUTINE_KEY] = remove_from_routine(store, get_routine(), product_id)
    except StorageError as e:
        logger.warning("Routine not persisted: %s", e)
        set_flash_error("We couldn't update your routine.", hint="Check that the storage path is writable.")
        return False
    return True


def clear_saved_routine(store: KeyValueStore) -> bool:
    """Empty the routine in session state and in the store."""
    try:
        clear_routine(store)
    except StorageError as e:
        logger.warning("Routine not cleared: %s", e)
        set_flash_error("We couldn't clear your routine.", hint="Check that the storage path is writable.")
        return False
    st.session_state[ROUTINE_KEY] = []
    return True


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def get_selected_ids() -> List[int]:
    return st.session_state.get(SELECTED_KEY, [])


def toggle_selected(product_id: int) -> None:
    """Select or deselect a product for comparison."""
    st.session_state[SELECTED_KEY] = toggle_selection(get_selected_ids(), product_id)


def get_comparison() -> Optional[CompatibilityResult]:
    return st.session_state.get(COMPARISON_KEY)


def run_comparison(catalog: Sequence[Product]) -> Optional[CompatibilityResult]:
    """
    Compare the two selected products and keep the result for display.

    Returns:
        The result, or None if exactly two products aren't selected
    """
    result = compare_selection(catalog, get_selected_ids())
    st.session_state[COMPARISON_KEY] = result
    return result


def clear_comparison() -> None:
    """Drop the comparison result and the selection it was made from."""
    st.session_state[COMPARISON_KEY] = None
    st.session_state[SELECTED_KEY] = []


# ---------------------------------------------------------------------------
# Flash errors
# ---------------------------------------------------------------------------

def set_flash_error(message: str, hint: Optional[str] = None) -> None:
    """Queue an error to show once on the next render."""
    st.session_state[FLASH_ERROR_KEY] = (message, hint)


def pop_flash_error() -> Optional[tuple]:
    """Take the queued error, if any, so it is only shown once."""
    return st.session_state.pop(FLASH_ERROR_KEY, None)
