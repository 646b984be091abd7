"""
LayerIt - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up the page
configuration and global styling, loads the product catalog and the persisted
routine/skin type, then renders the screen selected by the current view.

Run with:
    streamlit run streamlit_app/app.py

Note: LayerIt is a single-page app. The five screens live in `screens/` and
are switched by one View value in session state, not by Streamlit's
multi-page `pages/` routing.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import the layerit package
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import layerit.config  # noqa: F401

import streamlit as st

from layerit.catalog import CatalogError
from layerit.config import configure_logging
from layerit.navigation import View
from screens import home, products, quiz, results, routine
from ui.feedback import show_error, show_flash_error
from ui.styles import load_global_styles
from utils.session import get_catalog, get_store
from utils.state import get_current_view, load_persisted_state

SCREENS = {
    View.HOME: home.render,
    View.QUIZ: quiz.render,
    View.RESULTS: results.render,
    View.PRODUCTS: products.render,
    View.ROUTINE: routine.render,
}

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="LayerIt",
    page_icon="✨",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Inject global CSS styling
load_global_styles()

try:
    catalog = get_catalog()
except CatalogError as e:
    show_error("The product catalog could not be loaded.", hint=str(e))
    st.stop()

load_persisted_state(get_store(), catalog)

show_flash_error()

SCREENS[get_current_view()](catalog)
