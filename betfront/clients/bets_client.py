"""API client for completed bets."""

from __future__ import annotations

from typing import Any

from betfront.auth.token_store import ACCESS_TOKEN_KEY, TokenStore
from betfront.core.config import settings
from betfront.core.observability import RequestObserver

from .base import BaseClient


class CompletedBetsClient(BaseClient):
    """Client for the completed-bets endpoint (requires a bearer token)."""

    def __init__(
            self,
            url: str | None = None,
            *,
            observer: RequestObserver | None = None,
            timeout: float | None = None,
    ) -> None:
        super().__init__(observer=observer, timeout=timeout)
        self.url = url or settings.API_COMPLETED_BETS_URL

    def use_token_store(self, store: TokenStore) -> None:
        """Authenticate following requests with the stored access token."""
        access = store.read(ACCESS_TOKEN_KEY)
        if access:
            self.set_tokens(access)
        else:
            self.clear_tokens()

    def list_completed_bets(self, limit: int | None = None) -> Any:
        limit = settings.COMPLETED_BETS_LIMIT if limit is None else limit
        return self.get(self.url, params={"limit": limit})
