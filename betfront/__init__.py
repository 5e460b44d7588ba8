"""betfront: Streamlit frontend with login/registration for the betting API."""
