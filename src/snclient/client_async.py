r"""Asynchronous client handle for resilient HTTP requests.

This module provides ``AsyncSNClient``, the asyncio counterpart of
``SNClient``. Concurrent calls on one client are independent: each runs
its own retry loop and backoff waits do not block the other calls.
"""

from __future__ import annotations

__all__ = ["AsyncSNClient"]

from typing import TYPE_CHECKING, Any

import httpx

from snclient.auth import NoAuth
from snclient.core.body import encode_json_body
from snclient.core.config import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, ClientConfig
from snclient.core.validation import validate_timeout
from snclient.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from snclient.auth import Authenticator
    from snclient.backoff.base import BaseBackoffStrategy


class AsyncSNClient:
    r"""Asynchronous client for a single HTTP service.

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
        client: Optional ``httpx.AsyncClient``. If given, the caller owns
            it and ``AsyncSNClient`` never closes it.

    Example:
        ```pycon
        >>> import asyncio
        >>> from snclient import AsyncSNClient, OAuth
        >>> async def main():  # doctest: +SKIP
        ...     async with AsyncSNClient(
        ...         "https://api.example.com", max_retries=3, auth=OAuth("abc123")
        ...     ) as client:
        ...         return await asyncio.gather(client.get("items/1"), client.get("items/2"))
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

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
        client: httpx.AsyncClient | None = None,
    ) -> None:
        validate_timeout(timeout)
        self._config = ClientConfig(base_url=base_url, max_retries=max_retries)
        self._auth: Authenticator = auth if auth is not None else NoAuth()
        self._executor = AsyncRetryExecutor(max_retries, backoff)
        self._close_client = client is None
        self._client: httpx.AsyncClient = (
            client if client is not None else httpx.AsyncClient(timeout=timeout)
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_url={self.base_url!r}, "
            f"max_retries={self.max_retries}, auth={self._auth!r})"
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

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

    async def aclose(self) -> None:
        """Close the underlying ``httpx.AsyncClient`` if this client
        created it."""
        if self._close_client:
            await self._client.aclose()

    async def request(self, method: str, endpoint: str, body: Any = None) -> str:
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

        response = await self._executor.execute(
            url=url, method=method, build_request=build_request, send=self._client.send
        )
        return response.text

    async def get(self, endpoint: str) -> str:
        """Send an HTTP GET request and return the body as text."""
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, body: Any) -> str:
        """Send an HTTP POST request with a JSON body and return the
        response body as text."""
        return await self.request("POST", endpoint, body)

    async def put(self, endpoint: str, body: Any) -> str:
        """Send an HTTP PUT request with a JSON body and return the
        response body as text."""
        return await self.request("PUT", endpoint, body)

    async def patch(self, endpoint: str, body: Any) -> str:
        """Send an HTTP PATCH request with a JSON body and return the
        response body as text."""
        return await self.request("PATCH", endpoint, body)

    async def delete(self, endpoint: str) -> str:
        """Send an HTTP DELETE request and return the body as text."""
        return await self.request("DELETE", endpoint)
