"""Request observers injected into the HTTP clients."""

from __future__ import annotations

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class RequestObserver(Protocol):
    """Hook notified around every HTTP exchange."""

    def request_sent(self, method: str, url: str) -> None: ...

    def response_received(self, method: str, url: str, status_code: int, payload: Any) -> None: ...

    def request_failed(self, method: str, url: str, error: Exception) -> None: ...


class NullObserver:
    """Default observer; does nothing."""

    def request_sent(self, method: str, url: str) -> None:
        pass

    def response_received(self, method: str, url: str, status_code: int, payload: Any) -> None:
        pass

    def request_failed(self, method: str, url: str, error: Exception) -> None:
        pass


class LoggingObserver:
    """Observer writing each exchange to the module logger at DEBUG level.

    Response payloads are not logged: auth responses carry tokens.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def request_sent(self, method: str, url: str) -> None:
        self.log.debug(f"{method} {url}")

    def response_received(self, method: str, url: str, status_code: int, payload: Any) -> None:
        self.log.debug(f"{method} {url} -> {status_code}")

    def request_failed(self, method: str, url: str, error: Exception) -> None:
        self.log.debug(f"{method} {url} failed: {error}")


def default_observer(debug_http: bool) -> RequestObserver:
    """Return the observer matching the DEBUG_HTTP setting."""
    return LoggingObserver() if debug_http else NullObserver()
