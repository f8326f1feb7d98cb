r"""Synchronous client handle for resilient HTTP requests.

This module provides ``SNClient``, a client bound to one base URL that
authenticates every request and runs it through the shared retry engine.
"""

from __future__ import annotations

__all__ = ["SNClient"]

from typing import TYPE_CHECKING, Any

import httpx

from snclient.auth import NoAuth
from snclient.core.body import encode_json_body
from snclient.core.config import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, ClientConfig
from snclient.core.validation import validate_timeout
from snclient.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from snclient.auth import Authenticator
    from snclient.backoff.base import BaseBackoffStrategy


class SNClient:
    r"""Synchronous client for a single HTTP service.

    The configuration is immutable after construction. Each verb method
    joins ``base_url`` and ``endpoint`` with a literal ``/``, serializes
    an optional body as JSON, and returns the response body as text.
    Failed attempts are retried with exponential backoff: server errors
    (5xx) and connect or timeout errors are retried up to ``max_retries``
    times; client errors (4xx) and other transport errors are raised
    immediately.

    Args:
        base_url: The URL every endpoint is appended to.
        max_retries: Maximum number of additional attempts after the
            first one. Must be >= 0.
        auth: Optional authenticator applied to every attempt.
            Defaults to ``NoAuth()``.
        backoff: Optional backoff strategy. Defaults to
            ``ExponentialBackoff()`` (1s, 2s, 4s, ...).
        timeout: Maximum seconds to wait for the server on a single
            attempt. Only used when ``client`` is not given.
        client: Optional ``httpx.Client``. If given, the caller owns it
            and ``SNClient`` never closes it.

    Example:
        ```pycon
        >>> from snclient import SNClient, TokenAuth
        >>> with SNClient(
        ...     "https://api.example.com", max_retries=3, auth=TokenAuth("secret")
        ... ) as client:  # doctest: +SKIP
        ...     body = client.get("items")
        ...     created = client.post("items", {"name": "widget"})
        ...

        ```
    """

    def __init__(
        self,
        base_url: str,
        max_retries: int = DEFAULT_MAX_RETRIES,
        *,
        auth: Authenticator | None = None,
        backoff: BaseBackoffStrategy | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        validate_timeout(timeout)
        self._config = ClientConfig(base_url=base_url, max_retries=max_retries)
        self._auth: Authenticator = auth if auth is not None else NoAuth()
        self._executor = RetryExecutor(max_retries, backoff)
        self._close_client = client is None
        self._client: httpx.Client = client if client is not None else httpx.Client(timeout=timeout)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_url={self.base_url!r}, "
            f"max_retries={self.max_retries}, auth={self._auth!r})"
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        """The URL every endpoint is appended to."""
        return self._config.base_url

    @property
    def max_retries(self) -> int:
        """Maximum number of additional attempts after the first one."""
        return self._config.max_retries

    @property
    def config(self) -> ClientConfig:
        """The immutable client configuration."""
        return self._config

    def close(self) -> None:
        """Close the underlying ``httpx.Client`` if this client created
        it."""
        if self._close_client:
            self._client.close()

    def request(self, method: str, endpoint: str, body: Any = None) -> str:
        r"""Send an HTTP request with automatic retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE, etc.).
            endpoint: Path appended to ``base_url`` after a ``/``.
            body: Optional JSON-serializable request body.

        Returns:
            The body of the successful response as text.

        Raises:
            HttpStatusError: If the final response has a non-success status.
            HttpTransportError: If the final attempt failed at the
                transport layer, or if ``body`` is not JSON
                serializable.
        """
        method = method.upper()
        url = f"{self._config.base_url}/{endpoint}"
        content, headers = encode_json_body(body, url=url, method=method)

        def build_request() -> httpx.Request:
            return self._auth.authenticate(
                self._client.build_request(method, url, content=content, headers=headers)
            )

        response = self._executor.execute(
            url=url, method=method, build_request=build_request, send=self._client.send
        )
        return response.text

    def get(self, endpoint: str) -> str:
        r"""Send an HTTP GET request with automatic retry logic.

        Args:
            endpoint: Path appended to ``base_url``.

        Returns:
            The response body as text.
        """
        return self.request("GET", endpoint)

    def post(self, endpoint: str, body: Any) -> str:
        r"""Send an HTTP POST request with a JSON body.

        Args:
            endpoint: Path appended to ``base_url``.
            body: JSON-serializable request body.

        Returns:
            The response body as text.
        """
        return self.request("POST", endpoint, body)

    def put(self, endpoint: str, body: Any) -> str:
        r"""Send an HTTP PUT request with a JSON body.

        Args:
            endpoint: Path appended to ``base_url``.
            body: JSON-serializable request body.

        Returns:
            The response body as text.
        """
        return self.request("PUT", endpoint, body)

    def patch(self, endpoint: str, body: Any) -> str:
        r"""Send an HTTP PATCH request with a JSON body.

        Args:
            endpoint: Path appended to ``base_url``.
            body: JSON-serializable request body.

        Returns:
            The response body as text.
        """
        return self.request("PATCH", endpoint, body)

    def delete(self, endpoint: str) -> str:
        r"""Send an HTTP DELETE request with automatic retry logic.

        Args:
            endpoint: Path appended to ``base_url``.

        Returns:
            The response body as text.
        """
        return self.request("DELETE", endpoint)
