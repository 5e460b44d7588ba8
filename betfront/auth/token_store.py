"""Persistence of the access/refresh token pair.

The form writes through the ``TokenStore`` interface only; which backing
store is used is decided by the caller:

* ``InMemoryTokenStore`` for tests and scripts,
* ``SessionStateTokenStore`` over ``st.session_state`` (per browser session),
* ``JsonFileTokenStore`` for tokens that must survive a restart.

Tokens are written both-or-neither and are never cleared here.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"


class TokenPair(BaseModel):
    """Tokens issued by the auth endpoints; other response fields are ignored."""
    access: str
    refresh: str

    def as_entries(self) -> dict[str, str]:
        return {ACCESS_TOKEN_KEY: self.access, REFRESH_TOKEN_KEY: self.refresh}


class TokenStore(Protocol):
    def save(self, tokens: TokenPair) -> None: ...

    def read(self, key: str) -> str | None: ...


class InMemoryTokenStore:
    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def save(self, tokens: TokenPair) -> None:
        self._entries = {**self._entries, **tokens.as_entries()}

    def read(self, key: str) -> str | None:
        return self._entries.get(key)


class SessionStateTokenStore:
    """Token store backed by a mutable mapping such as ``st.session_state``."""

    def __init__(self, state: MutableMapping[str, Any]) -> None:
        self.state = state

    def save(self, tokens: TokenPair) -> None:
        self.state.update(tokens.as_entries())

    def read(self, key: str) -> str | None:
        value = self.state.get(key)
        return value if isinstance(value, str) else None


class JsonFileTokenStore:
    """Token store persisted as a small JSON document on disk.

    Each save rewrites the whole file through a temporary file and
    ``os.replace``, so readers see either the old pair or the new one.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning(f"Ignoring unreadable token file {self.path}: {exc}")
            return {}
        if not isinstance(raw, dict):
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def save(self, tokens: TokenPair) -> None:
        entries = {**self._load(), **tokens.as_entries()}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(entries, fh)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def read(self, key: str) -> str | None:
        return self._load().get(key)


def token_store_for(state: MutableMapping[str, Any], path: str | None = None) -> TokenStore:
    """Pick the configured store: a JSON file when a path is set, else ``state``."""
    if path:
        return JsonFileTokenStore(path)
    return SessionStateTokenStore(state)
