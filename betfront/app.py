from __future__ import annotations

import logging
from typing import Any

import pandas as pd
import streamlit as st

from betfront.auth.token_store import ACCESS_TOKEN_KEY, TokenStore, token_store_for
from betfront.clients.base import APIException, TransportException
from betfront.clients.bets_client import CompletedBetsClient
from betfront.core.config import settings
from betfront.core.observability import default_observer
from betfront.utils.sidebar import render_sidebar

logger = logging.getLogger(__name__)


def load_completed_bets(store: TokenStore, client: CompletedBetsClient | None = None) -> Any:
    """Fetch the latest completed bets with the stored access token."""
    client = client or CompletedBetsClient(
        observer=default_observer(settings.DEBUG_HTTP),
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
    )
    client.use_token_store(store)
    return client.list_completed_bets(limit=settings.COMPLETED_BETS_LIMIT)


def show_dashboard() -> None:
    store = token_store_for(st.session_state, settings.TOKEN_STORE_PATH)
    render_sidebar(store)

    st.title("🏠 Главная")

    if not store.read(ACCESS_TOKEN_KEY):
        st.warning("Требуется вход.")
        if st.button("Войти", type="primary"):
            st.switch_page("pages/auth.py")
        return

    st.subheader("Завершенные ставки")
    try:
        bets = load_completed_bets(store)
    except APIException as exc:
        logger.warning(f"Completed bets request rejected with status {exc.status_code}")
        st.error(f"Не удалось загрузить ставки: {exc}")
        return
    except TransportException:
        st.error("Сервер недоступен.")
        return

    if isinstance(bets, list) and bets and all(isinstance(row, dict) for row in bets):
        st.dataframe(pd.DataFrame(bets), use_container_width=True, hide_index=True)
    elif bets:
        st.json(bets)
    else:
        st.info("Завершенных ставок пока нет.")


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    st.set_page_config(page_title="Главная", layout="wide")
    show_dashboard()


if __name__ == "__main__":
    main()
