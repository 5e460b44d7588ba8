from __future__ import annotations

from typing import Any

from betfront.auth.mode import Mode
from betfront.core.config import settings
from betfront.core.observability import RequestObserver

from .base import BaseClient


class AuthClient(BaseClient):
    """Auth API client for login and registration.

    Both endpoints take ``{"username": <email>, "password": <password>}`` and
    answer with a JSON body carrying ``access`` and ``refresh`` tokens.
    """

    def __init__(
            self,
            login_url: str | None = None,
            register_url: str | None = None,
            *,
            observer: RequestObserver | None = None,
            timeout: float | None = None,
    ) -> None:
        super().__init__(observer=observer, timeout=timeout)
        self.login_url = login_url or settings.API_LOGIN_URL
        self.register_url = register_url or settings.API_REGISTER_URL

    @staticmethod
    def _credentials(email: str, password: str) -> dict[str, str]:
        return {"username": email, "password": password}

    def endpoint_for(self, mode: Mode) -> str:
        return self.login_url if mode is Mode.LOGIN else self.register_url

    def login(self, email: str, password: str) -> dict[str, Any]:
        """Authenticate and return the raw response body."""
        return self.post(self.login_url, json_data=self._credentials(email, password))

    def register(self, email: str, password: str) -> dict[str, Any]:
        """Register a new account and return the raw response body."""
        return self.post(self.register_url, json_data=self._credentials(email, password))

    def authenticate(self, mode: Mode, email: str, password: str) -> dict[str, Any]:
        """Call the endpoint that matches ``mode``."""
        if mode is Mode.LOGIN:
            return self.login(email, password)
        return self.register(email, password)
