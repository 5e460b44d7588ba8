"""Base HTTP client for the betfront frontend."""

from __future__ import annotations

import logging
from typing import Any

import requests

from betfront.core.observability import NullObserver, RequestObserver

logger = logging.getLogger(__name__)


class APIException(Exception):
    """The remote party answered with a non-2xx status.

    ``message`` is the body's ``message`` string when the server sent one,
    otherwise None. ``payload`` is the decoded JSON body.
    """

    def __init__(self, status_code: int, message: str | None, payload: Any = None) -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message
        self.payload = payload


class TransportException(Exception):
    """No usable response: connectivity error, timeout or undecodable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BaseClient:
    """Base HTTP client with optional JWT bearer handling.

    Paths may be absolute URLs (the auth endpoints are configured that way)
    or paths relative to ``base_url``.

    Usage:
        client.set_tokens(access_token)
        client.clear_tokens()
    """

    def __init__(
            self,
            base_url: str = "",
            *,
            observer: RequestObserver | None = None,
            timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.observer = observer or NullObserver()
        self.timeout = timeout
        self._access_token: str | None = None

    # ------------------------- token management ------------------------- #
    def set_tokens(self, access_token: str) -> None:
        """Set the access token sent as bearer on following requests."""
        self._access_token = access_token

    def clear_tokens(self) -> None:
        """Clear the stored access token."""
        self._access_token = None

    # ------------------------- core http methods ------------------------ #
    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}{path}"

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, json_data: dict[str, Any] | None = None,
             params: dict[str, Any] | None = None) -> Any:
        return self._request("POST", path, json_data=json_data, params=params)

    def _request(
            self,
            method: str,
            path: str,
            *,
            params: dict[str, Any] | None = None,
            json_data: dict[str, Any] | None = None,
    ) -> Any:
        url = self._url(path)
        self.observer.request_sent(method, url)
        try:
            resp = requests.request(
                method=method,
                url=url,
                headers=self._headers(),
                params=params,
                json=json_data,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning(f"{method} {url} failed: {exc}")
            self.observer.request_failed(method, url, exc)
            raise TransportException(str(exc)) from exc

        # Every answer from these endpoints is JSON, errors included
        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning(f"{method} {url} returned a non-JSON body (status {resp.status_code})")
            self.observer.request_failed(method, url, exc)
            raise TransportException("Response body is not valid JSON", resp.status_code) from exc

        self.observer.response_received(method, url, resp.status_code, payload)

        if 200 <= resp.status_code < 300:
            return payload

        message = payload.get("message") if isinstance(payload, dict) else None
        if not isinstance(message, str) or not message:
            message = None
        raise APIException(resp.status_code, message, payload)
