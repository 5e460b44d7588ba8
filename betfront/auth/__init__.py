"""Login / registration form core (no Streamlit dependency)."""
