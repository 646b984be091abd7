"""
Global CSS Styling for LayerIt.

This module provides load_global_styles() to inject consistent styling
across all screens: soft pink/purple pastels, rounded cards and buttons, and a
serif display font for headings.
"""

import streamlit as st

PALETTE = {
    "pink": "#f472b6",
    "purple": "#a78bfa",
    "blue": "#93c5fd",
    "text": "#374151",
    "muted": "#6b7280",
    "safe": "#10b981",
    "caution": "#f59e0b",
    "danger": "#f43f5e",
}


def load_global_styles() -> None:
    """
    Inject global CSS styles for the LayerIt app.

    This function:
    - Imports Google Fonts (Playfair Display for headings, Poppins for body)
    - Paints the page with a pastel gradient background
    - Rounds buttons and bordered containers into soft cards
    - Defines the .layerit-pill class used for skin type and severity tags
    """
    css = f"""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Playfair+Display:wght@400;700&family=Poppins:wght@300;400;500;600&display=swap');

        html, body, [class*="css"] {{
            font-family: 'Poppins', sans-serif !important;
        }}

        h1, h2, h3 {{
            font-family: 'Playfair Display', serif !important;
            color: {PALETTE["text"]} !important;
        }}

        [data-testid="stAppViewContainer"] {{
            background: linear-gradient(135deg, #fdf2f8 0%, #f5f3ff 50%, #eff6ff 100%);
        }}

        .block-container {{
            max-width: 1100px;
            padding-top: 2rem !important;
        }}

        /* Buttons - pill shaped */
        .stButton > button {{
            border-radius: 999px !important;
            font-weight: 500 !important;
        }}

        .stButton > button[kind="primary"] {{
            background: linear-gradient(90deg, {PALETTE["pink"]}, {PALETTE["purple"]}) !important;
            border: none !important;
        }}

        /* Bordered containers - soft cards */
        [data-testid="stVerticalBlockBorderWrapper"] {{
            border-radius: 1.5rem !important;
            background: rgba(255, 255, 255, 0.85);
        }}

        .layerit-subtitle {{
            color: {PALETTE["muted"]};
            font-weight: 300;
            font-size: 1.1rem;
            margin-bottom: 1rem;
        }}

        .layerit-pill {{
            display: inline-block;
            padding: 0.35rem 1rem;
            border-radius: 999px;
            background: linear-gradient(90deg, #fce7f3, #ede9fe);
            border: 2px solid #fbcfe8;
            font-weight: 600;
            text-transform: capitalize;
        }}

        .layerit-pill--large {{
            font-size: 2rem;
            padding: 0.75rem 2rem;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)


def pill(text: str, large: bool = False) -> str:
    """
    Build the HTML for a rounded pill tag.

    Args:
        text: Tag text (capitalized by CSS)
        large: Use the large variant for hero display

    Returns:
        HTML string for st.markdown(..., unsafe_allow_html=True)
    """
    css_class = "layerit-pill layerit-pill--large" if large else "layerit-pill"
    return f'<span class="{css_class}">{text}</span>'
