"""
LayerIt core package.

Pure-Python domain logic for the LayerIt skincare compatibility checker:
product catalog, skin-type quiz, ingredient conflict matcher, routine
persistence and view routing. The Streamlit front end in ``streamlit_app``
builds on top of this package; nothing here imports Streamlit.
"""
