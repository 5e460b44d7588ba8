from __future__ import annotations

import streamlit as st

from betfront.auth.token_store import ACCESS_TOKEN_KEY, TokenStore


def hide_native_pages_nav() -> None:
    st.markdown(
        """
        <style>
        [data-testid="stSidebarNav"] { display: none !important; }
        section[data-testid="stSidebar"] > div:first-child { padding-top: 0.5rem; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_sidebar(store: TokenStore | None = None) -> None:
    hide_native_pages_nav()

    st.sidebar.title("Ставки")

    signed_in = bool(store.read(ACCESS_TOKEN_KEY)) if store is not None else bool(
        st.session_state.get(ACCESS_TOKEN_KEY)
    )
    if signed_in:
        email = st.session_state.get("auth_email") or "пользователь"
        st.sidebar.success(f"Вы вошли как {email}")
    else:
        st.sidebar.info("Вы не вошли в систему")

    st.sidebar.markdown("---")
    st.sidebar.subheader("Навигация")
    if st.sidebar.button("Главная", key="nav_home"):
        st.switch_page("app.py")
    if st.sidebar.button("Вход / Регистрация", key="nav_auth"):
        st.switch_page("pages/auth.py")
