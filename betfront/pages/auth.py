"""Login / registration page for the betfront frontend."""

from __future__ import annotations

import logging
from typing import Any

import streamlit as st

from betfront.auth import messages
from betfront.auth.form import AuthForm
from betfront.auth.mode import MODE_QUERY_PARAM, Mode
from betfront.auth.state import AGREEMENT_TARGET, FormState
from betfront.auth.token_store import token_store_for
from betfront.auth.validation import is_valid_email
from betfront.clients.auth_client import AuthClient
from betfront.core.config import settings
from betfront.core.observability import default_observer
from betfront.utils.sidebar import render_sidebar

logger = logging.getLogger(__name__)

FORM_STATE_KEY = "auth_form_state"
WIDGET_KEYS = {
    "email": "auth_email_input",
    "password": "auth_password_input",
    "confirm_password": "auth_confirm_input",
}
AGREEMENT_KEY = "auth_agreement_input"


class AuthPageController:
    """Renders an ``AuthForm`` whose state lives in ``st.session_state``."""

    def __init__(self) -> None:
        self.token_store = token_store_for(st.session_state, settings.TOKEN_STORE_PATH)
        render_sidebar(self.token_store)
        st.session_state.setdefault(FORM_STATE_KEY, FormState())
        self.client = AuthClient(
            observer=default_observer(settings.DEBUG_HTTP),
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
        self.form = AuthForm(
            self.client,
            self.token_store,
            state=st.session_state[FORM_STATE_KEY],
            on_success=self._on_success,
        )
        self.form.sync_mode(st.query_params.get(MODE_QUERY_PARAM))

    # ----- callbacks -----
    def _on_success(self, payload: Any) -> None:
        st.session_state.auth_email = self.form.state.data.email

    def _on_field_change(self, name: str) -> None:
        self.form.set_field(name, st.session_state[WIDGET_KEYS[name]])

    def _on_agreement_change(self) -> None:
        self.form.set_agreed(bool(st.session_state[AGREEMENT_KEY]))

    def _on_toggle_mode(self) -> None:
        new_mode = self.form.toggle_mode()
        if new_mode is not None:
            st.query_params[MODE_QUERY_PARAM] = new_mode

    @staticmethod
    def _on_stub(action: str) -> None:
        logger.info(f"{action} requested (not implemented)")

    def _sync_widgets(self) -> None:
        """Push form state into widget keys before the widgets are created."""
        state = self.form.state
        for name, key in WIDGET_KEYS.items():
            st.session_state[key] = getattr(state.data, name)
        st.session_state[AGREEMENT_KEY] = state.agreed

    # ----- UI -----
    def _render_header(self, mode: Mode) -> None:
        st.title(messages.TITLE[mode])
        col_prompt, col_toggle = st.columns([2, 1])
        col_prompt.caption(messages.TOGGLE_PROMPT[mode])
        col_toggle.button(
            messages.TOGGLE_LABEL[mode],
            key="auth_toggle_mode",
            on_click=self._on_toggle_mode,
            disabled=self.form.state.is_loading,
        )

    def _password_input(self, name: str, label: str, visible: bool) -> None:
        col_input, col_eye = st.columns([5, 1])
        with col_input:
            st.text_input(
                label,
                key=WIDGET_KEYS[name],
                type="default" if visible else "password",
                on_change=self._on_field_change,
                args=(name,),
            )
        with col_eye:
            st.button(
                "👁️‍🗨️" if visible else "👁️",
                key=f"auth_eye_{name}",
                help=messages.HIDE_PASSWORD if visible else messages.SHOW_PASSWORD,
                on_click=self.form.toggle_password_visibility,
                args=(name,),
            )

    def _render_agreement(self) -> Any:
        st.checkbox(messages.AGREEMENT_LABEL, key=AGREEMENT_KEY, on_change=self._on_agreement_change)
        st.button(
            messages.AGREEMENT_LINK,
            key="auth_agreement_link",
            on_click=self._on_stub,
            args=("Service agreement",),
        )
        return st.container()

    def render(self) -> None:
        state = self.form.state
        mode = self.form.mode
        self._sync_widgets()

        self._render_header(mode)
        message_slot = st.container()

        st.text_input(
            messages.EMAIL_PLACEHOLDER,
            key=WIDGET_KEYS["email"],
            on_change=self._on_field_change,
            args=("email",),
            autocomplete="email",
        )
        # Hint only; the server decides whether the address is acceptable
        if state.data.email and not is_valid_email(state.data.email):
            st.caption(messages.INVALID_EMAIL)

        self._password_input("password", messages.PASSWORD_PLACEHOLDER, state.show_password)

        agreement_slot = None
        if mode is Mode.REGISTER:
            self._password_input("confirm_password", messages.CONFIRM_PLACEHOLDER, state.show_confirm_password)
            agreement_slot = self._render_agreement()
        else:
            st.button(
                messages.FORGOT_PASSWORD,
                key="auth_forgot_password",
                on_click=self._on_stub,
                args=("Password reset",),
            )

        label = messages.LOADING_LABEL if state.is_loading else messages.SUBMIT_LABEL[mode]
        if st.button(label, type="primary", disabled=not self.form.can_submit, use_container_width=True):
            with st.spinner(messages.LOADING_LABEL):
                self.form.submit()
            st.rerun()

        st.divider()
        st.caption(messages.DIVIDER)
        st.button(
            messages.GOOGLE_LABEL[mode],
            key="auth_google",
            use_container_width=True,
            on_click=self._on_stub,
            args=("Google sign-in",),
        )

        error = state.error
        with message_slot:
            if error is not None and error.target is None:
                st.error(error.text)
            elif state.success is not None:
                st.success(state.success.text)
                if st.button("На главную", key="auth_go_home"):
                    st.switch_page("app.py")
        if error is not None and error.target == AGREEMENT_TARGET:
            if agreement_slot is not None:
                with agreement_slot:
                    st.error(error.text)
            if state.focus_agreement:
                st.toast(error.text)
                state.focus_agreement = False


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    st.set_page_config(page_title="Вход", page_icon="🔐")
    AuthPageController().render()


if __name__ == "__main__":
    main()