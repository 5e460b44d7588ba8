"""Shared fixtures: in-memory token store, stub auth client and fake HTTP layer."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from betfront.auth.form import AuthForm
from betfront.auth.mode import Mode
from betfront.auth.state import FormData, FormState
from betfront.auth.token_store import InMemoryTokenStore

TOKENS_PAYLOAD = {"access": "a1", "refresh": "r1"}


class StubAuthClient:
    """Stands in for AuthClient; records calls and returns or raises a canned result."""

    def __init__(self) -> None:
        self.calls: list[tuple[Mode, str, str]] = []
        self.result: Any = dict(TOKENS_PAYLOAD)
        self.error: Exception | None = None
        self.during_call = None

    def authenticate(self, mode: Mode, email: str, password: str) -> Any:
        self.calls.append((mode, email, password))
        if self.during_call is not None:
            self.during_call()
        if self.error is not None:
            raise self.error
        return self.result


class FakeHTTP:
    """Replacement for ``requests.request`` used by BaseClient."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._outcome: Any = None

    def respond(self, status_code: int, payload: Any = None, *, invalid_json: bool = False) -> None:
        resp = MagicMock(spec=requests.Response)
        resp.status_code = status_code
        if invalid_json:
            resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        else:
            resp.json.return_value = payload
        self._outcome = resp

    def fail(self, exc: Exception) -> None:
        self._outcome = exc

    def __call__(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


@pytest.fixture()
def token_store() -> InMemoryTokenStore:
    return InMemoryTokenStore()


@pytest.fixture()
def stub_client() -> StubAuthClient:
    return StubAuthClient()


@pytest.fixture()
def fake_http(monkeypatch: pytest.MonkeyPatch) -> FakeHTTP:
    fake = FakeHTTP()
    monkeypatch.setattr("betfront.clients.base.requests.request", fake)
    return fake


@pytest.fixture()
def make_form(stub_client: StubAuthClient, token_store: InMemoryTokenStore):
    """Build an AuthForm in the given mode with pre-filled fields."""

    def _make(
            mode: Mode = Mode.LOGIN,
            *,
            email: str = "user@example.com",
            password: str = "secret123",
            confirm_password: str = "",
            agreed: bool = False,
            client: Any = None,
            on_success=None,
    ) -> AuthForm:
        state = FormState(
            mode=mode,
            data=FormData(email=email, password=password, confirm_password=confirm_password),
            agreed=agreed,
        )
        return AuthForm(client or stub_client, token_store, state=state, on_success=on_success)

    return _make
